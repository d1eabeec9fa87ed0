"""Redis URI resolution."""

from queueconn.core.uri.descriptors import (
    ConnectionDescriptor,
    DirectDescriptor,
    DirectTLSDescriptor,
    SentinelDescriptor,
    UnixSocketDescriptor,
)
from queueconn.core.uri.resolver import resolve, split_host_port


__all__ = [
    "ConnectionDescriptor",
    "DirectDescriptor",
    "DirectTLSDescriptor",
    "SentinelDescriptor",
    "UnixSocketDescriptor",
    "resolve",
    "split_host_port",
]
