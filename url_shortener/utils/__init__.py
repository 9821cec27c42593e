"""Utils package for URL Shortener Service."""

from .shortener import (
    ALPHABET,
    generate_short_code,
    validate_short_code,
    validate_custom_code,
    validate_target_url,
    normalize_url,
    is_reserved,
    redirect_location,
    create_short_url,
    utc_now,
    to_timestamp,
)

__all__ = [
    "ALPHABET",
    "generate_short_code",
    "validate_short_code",
    "validate_custom_code",
    "validate_target_url",
    "normalize_url",
    "is_reserved",
    "redirect_location",
    "create_short_url",
    "utc_now",
    "to_timestamp",
]
