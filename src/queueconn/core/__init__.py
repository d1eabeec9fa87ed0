"""Core resolution logic and cross-cutting concerns."""

from queueconn.core.errors import (
    InvalidAddressError,
    InvalidDatabaseIndexError,
    MalformedURIError,
    MissingSocketPathError,
    RedisURIError,
    UnsupportedSchemeError,
)
from queueconn.core.uri import (
    ConnectionDescriptor,
    DirectDescriptor,
    DirectTLSDescriptor,
    SentinelDescriptor,
    UnixSocketDescriptor,
    resolve,
)


__all__ = [
    # Descriptors
    "ConnectionDescriptor",
    "DirectDescriptor",
    "DirectTLSDescriptor",
    "SentinelDescriptor",
    "UnixSocketDescriptor",
    # Errors
    "InvalidAddressError",
    "InvalidDatabaseIndexError",
    "MalformedURIError",
    "MissingSocketPathError",
    "RedisURIError",
    "UnsupportedSchemeError",
    # Resolution
    "resolve",
]
