"""Error hierarchy for URI resolution."""

from queueconn.core.errors.exceptions import (
    InvalidAddressError,
    InvalidDatabaseIndexError,
    MalformedURIError,
    MissingSocketPathError,
    RedisURIError,
    UnsupportedSchemeError,
)


__all__ = [
    "InvalidAddressError",
    "InvalidDatabaseIndexError",
    "MalformedURIError",
    "MissingSocketPathError",
    "RedisURIError",
    "UnsupportedSchemeError",
]
