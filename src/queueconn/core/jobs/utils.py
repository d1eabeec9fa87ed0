"""Conversion of connection descriptors into ARQ settings.

Provides the bridge between a resolved descriptor and the task-queue
client's connection configuration. Nothing here opens a connection.
"""

import re

import structlog
from arq.connections import RedisSettings

from queueconn.config import Settings, get_settings
from queueconn.core.constants import DEFAULT_REDIS_PORT, DEFAULT_SENTINEL_PORT
from queueconn.core.errors import InvalidAddressError
from queueconn.core.uri import (
    ConnectionDescriptor,
    DirectDescriptor,
    DirectTLSDescriptor,
    SentinelDescriptor,
    UnixSocketDescriptor,
    resolve,
    split_host_port,
)


logger = structlog.get_logger()

_PORT = re.compile(r"[0-9]+")


def _host_and_port(address: str, default_port: int) -> tuple[str, int]:
    """Split an address into host and integer port.

    Raises:
        InvalidAddressError: If the port is not a number
    """
    host, port_str = split_host_port(address)
    if not port_str:
        return host, default_port
    if not _PORT.fullmatch(port_str):
        raise InvalidAddressError(address=address)
    return host, int(port_str)


def to_redis_settings(descriptor: ConnectionDescriptor) -> RedisSettings:
    """Build ARQ RedisSettings from a connection descriptor.

    Args:
        descriptor: Resolved connection descriptor

    Returns:
        ARQ RedisSettings instance

    Raises:
        InvalidAddressError: If an address carries a non-numeric port
    """
    if isinstance(descriptor, (DirectDescriptor, DirectTLSDescriptor)):
        host, port = _host_and_port(descriptor.address, DEFAULT_REDIS_PORT)
        tls = isinstance(descriptor, DirectTLSDescriptor)
        return RedisSettings(
            host=host,
            port=port,
            password=descriptor.password or None,
            database=descriptor.db,
            ssl=tls,
            ssl_check_hostname=tls,
        )

    if isinstance(descriptor, UnixSocketDescriptor):
        return RedisSettings(
            unix_socket_path=descriptor.path,
            password=descriptor.password or None,
            database=descriptor.db,
        )

    if isinstance(descriptor, SentinelDescriptor):
        if descriptor.sentinel_password:
            # RedisSettings has no field for sentinel node credentials
            logger.warning(
                "sentinel_password_dropped",
                master_name=descriptor.master_name,
            )
        return RedisSettings(
            host=[
                _host_and_port(addr, DEFAULT_SENTINEL_PORT)
                for addr in descriptor.addrs
            ],
            sentinel=True,
            sentinel_master=descriptor.master_name,
            username=descriptor.username or None,
            password=descriptor.password or None,
            database=descriptor.db,
        )

    raise TypeError(f"Unsupported descriptor: {type(descriptor).__name__}")


def get_redis_settings(settings: Settings | None = None) -> RedisSettings:
    """Get Redis settings for ARQ from app configuration.

    Resolves the configured ``redis_uri`` and converts the descriptor into
    an ARQ RedisSettings instance suitable for both the worker and the
    connection pool.

    Args:
        settings: Settings to read from (defaults to the cached settings)

    Returns:
        ARQ RedisSettings instance
    """
    settings = settings or get_settings()
    return to_redis_settings(resolve(settings.redis_uri))
