"""Library-wide constants.

This module defines constants used throughout the package
to avoid magic strings and ensure consistency.
"""

# URI schemes
SCHEME_REDIS = "redis"
SCHEME_REDIS_TLS = "rediss"
SCHEME_REDIS_SOCKET = "redis-socket"
SCHEME_REDIS_SENTINEL = "redis-sentinel"

# Transport networks
NETWORK_TCP = "tcp"
NETWORK_UNIX = "unix"

# Default ports
DEFAULT_REDIS_PORT = 6379
DEFAULT_SENTINEL_PORT = 26379

# Query parameters
QUERY_DB = "db"
QUERY_MASTER = "master"
QUERY_USERNAME = "username"
QUERY_PASSWORD = "password"

# Display
REDACTED = "***"
