"""Error taxonomy for the URL Shortener Service.

Every error carries the HTTP status and machine-readable code it is
rendered with at the API boundary.
"""


class ShortenerError(Exception):
    """Base class for all service errors."""

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidUrl(ShortenerError):
    """Target URL is not an absolute http/https URL."""

    status_code = 400
    error_code = "INVALID_URL"


class InvalidAlias(ShortenerError):
    """Custom code violates the character class, length or reserved names."""

    status_code = 400
    error_code = "INVALID_ALIAS"


class AliasTaken(ShortenerError):
    """Custom code is already assigned to another link."""

    status_code = 409
    error_code = "ALIAS_TAKEN"


class AlreadyExists(ShortenerError):
    """Link store refused an insert because the code is present."""

    status_code = 409
    error_code = "ALREADY_EXISTS"

    def __init__(self, code: str):
        super().__init__(f"Short code already exists: {code}")
        self.code = code


class GenerationExhausted(ShortenerError):
    """Too many consecutive collisions while drawing a short code."""

    status_code = 503
    error_code = "GENERATION_EXHAUSTED"


class NotFound(ShortenerError):
    """Short code does not exist."""

    status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, code: str):
        super().__init__(f"Short URL not found: {code}")
        self.code = code


class StoreUnavailable(ShortenerError):
    """Persistence layer failed; the only retryable category."""

    status_code = 503
    error_code = "STORE_UNAVAILABLE"
