"""URL shortening utilities module.

This module handles the generation and validation of short codes
and target URLs.
"""

import random
import string
import re
from datetime import datetime, timezone
from typing import Optional

from pydantic import HttpUrl, TypeAdapter, ValidationError

from ..core.config import settings
from ..core.exceptions import InvalidAlias, InvalidUrl


# Characters drawn for generated short codes (base62)
ALPHABET = string.ascii_letters + string.digits

# Characters accepted in any short code, custom or generated
CODE_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

# Single-segment paths served by the API itself
RESERVED_CODES = frozenset({"health", "shorten", "analytics", "stats", "docs", "redoc"})

_http_url = TypeAdapter(HttpUrl)


def generate_short_code(length: Optional[int] = None) -> str:
    """Generate a random short code.

    Args:
        length: Length of the generated code. Defaults to settings value.

    Returns:
        Random short code string.
    """
    length = length if length is not None else settings.default_short_code_length
    if length < 1:
        raise ValueError(f"Short code length must be positive, got {length}")
    return "".join(random.choices(ALPHABET, k=length))


def validate_short_code(code: str) -> bool:
    """Validate short code format.

    Args:
        code: Short code to validate.

    Returns:
        True if valid, False otherwise.
    """
    if not code:
        return False
    if len(code) > settings.max_custom_code_length:
        return False
    return CODE_PATTERN.match(code) is not None


def is_reserved(code: str) -> bool:
    return code in RESERVED_CODES


def validate_custom_code(code: str) -> str:
    """Check a caller-supplied alias.

    Args:
        code: Custom short code.

    Returns:
        The alias, unchanged.

    Raises:
        InvalidAlias: Wrong characters, wrong length or a reserved name.
    """
    low, high = settings.min_custom_code_length, settings.max_custom_code_length
    if not low <= len(code) <= high:
        raise InvalidAlias(f"Custom code must be {low}-{high} characters long")
    if not CODE_PATTERN.match(code):
        raise InvalidAlias(
            "Custom code can only contain letters, numbers, hyphens, and underscores"
        )
    if is_reserved(code):
        raise InvalidAlias(f"Custom code '{code}' is reserved")
    return code


def normalize_url(url: str) -> str:
    """Normalize URL by stripping surrounding whitespace.

    Args:
        url: URL to normalize.

    Returns:
        Normalized URL string.
    """
    return url.strip()


def validate_target_url(url: str) -> str:
    """Check that a URL is absolute with an http or https scheme.

    Args:
        url: Candidate target URL.

    Returns:
        The normalized URL exactly as it will be stored.

    Raises:
        InvalidUrl: The URL does not parse or uses another scheme.
    """
    url = normalize_url(url)
    if not url.lower().startswith(("http://", "https://")):
        raise InvalidUrl("Please enter a valid URL (include http:// or https://)")
    try:
        _http_url.validate_python(url)
    except ValidationError as e:
        raise InvalidUrl(f"Invalid URL: {url}") from e
    return url


def redirect_location(url: str) -> str:
    """Return the ASCII form of a stored target URL for a Location header.

    Non-ASCII hosts become punycode and non-ASCII path characters are
    percent-encoded. ASCII URLs are returned unchanged.
    """
    if url.isascii():
        return url
    return str(_http_url.validate_python(url))


def create_short_url(base_url: str, short_code: str) -> str:
    """Create full short URL from base URL and short code.

    Args:
        base_url: Base URL of the service.
        short_code: Short code.

    Returns:
        Full short URL string.
    """
    return f"{base_url.rstrip('/')}/{short_code}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_timestamp(moment: datetime) -> str:
    """Render a datetime as a sortable ISO-8601 UTC string.

    Naive datetimes are taken to be UTC. Microseconds are always
    written so stored values compare correctly as text.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="microseconds")
