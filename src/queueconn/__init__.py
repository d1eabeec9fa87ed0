"""Resolve Redis connection URIs into typed connection descriptors."""

from queueconn.config import Settings, get_settings
from queueconn.core import (
    ConnectionDescriptor,
    DirectDescriptor,
    DirectTLSDescriptor,
    InvalidAddressError,
    InvalidDatabaseIndexError,
    MalformedURIError,
    MissingSocketPathError,
    RedisURIError,
    SentinelDescriptor,
    UnixSocketDescriptor,
    UnsupportedSchemeError,
    resolve,
)
from queueconn.core.jobs import get_redis_settings, to_redis_settings
from queueconn.core.logging import configure_logging


__version__ = "0.1.0"

__all__ = [
    "ConnectionDescriptor",
    "DirectDescriptor",
    "DirectTLSDescriptor",
    "InvalidAddressError",
    "InvalidDatabaseIndexError",
    "MalformedURIError",
    "MissingSocketPathError",
    "RedisURIError",
    "SentinelDescriptor",
    "Settings",
    "UnixSocketDescriptor",
    "UnsupportedSchemeError",
    "__version__",
    "configure_logging",
    "get_redis_settings",
    "get_settings",
    "resolve",
    "to_redis_settings",
]
