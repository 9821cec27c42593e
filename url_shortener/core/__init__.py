"""Core package - configuration, errors and database utilities."""

from .config import settings, get_settings
from .database import Database, db, get_db, get_test_db
from .exceptions import (
    ShortenerError,
    InvalidUrl,
    InvalidAlias,
    AliasTaken,
    AlreadyExists,
    GenerationExhausted,
    NotFound,
    StoreUnavailable,
)

__all__ = [
    "settings",
    "get_settings",
    "Database",
    "db",
    "get_db",
    "get_test_db",
    "ShortenerError",
    "InvalidUrl",
    "InvalidAlias",
    "AliasTaken",
    "AlreadyExists",
    "GenerationExhausted",
    "NotFound",
    "StoreUnavailable",
]
