"""Resolve Redis connection URIs into connection descriptors.

Four URI schemes are supported::

    redis://[:password@]host[:port][/db]
    rediss://[:password@]host[:port][/db]
    redis-socket://[:password@]path[?db=N]
    redis-sentinel://[:password@]host1[:port][,host2[:port]...][?master=NAME&username=U&password=P&db=N]

Resolution is a pure function of the input string: no I/O, no shared state.
"""

import re
from urllib.parse import SplitResult, parse_qs, unquote, urlsplit

import structlog

from queueconn.core.constants import (
    QUERY_DB,
    QUERY_MASTER,
    QUERY_PASSWORD,
    QUERY_USERNAME,
    SCHEME_REDIS,
    SCHEME_REDIS_SENTINEL,
    SCHEME_REDIS_SOCKET,
    SCHEME_REDIS_TLS,
)
from queueconn.core.errors import (
    InvalidDatabaseIndexError,
    MalformedURIError,
    MissingSocketPathError,
    UnsupportedSchemeError,
)
from queueconn.core.uri.descriptors import (
    ConnectionDescriptor,
    DirectDescriptor,
    DirectTLSDescriptor,
    SentinelDescriptor,
    UnixSocketDescriptor,
)


logger = structlog.get_logger()

_DB_INDEX = re.compile(r"[0-9]+")
_PORT = re.compile(r"[0-9]*")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")

_URI_ERROR_PREFIX = "Could not parse redis uri"
_SOCKET_ERROR_PREFIX = "Could not parse redis socket uri"


def resolve(uri: str) -> ConnectionDescriptor:
    """Resolve a Redis URI into a connection descriptor.

    Args:
        uri: Connection URI using one of the supported schemes

    Returns:
        The descriptor variant matching the URI scheme

    Raises:
        MalformedURIError: If the string is not a parseable URI
        UnsupportedSchemeError: If the scheme is not recognized
        InvalidDatabaseIndexError: If a direct or socket db index is not a
            non-negative integer
        MissingSocketPathError: If a socket URI has no path
        ValueError: If a sentinel URI has a missing ``db`` or one that is not
            a non-negative integer
    """
    if _CONTROL_CHARS.search(uri):
        raise MalformedURIError(reason="invalid control character in URL")
    try:
        parts = urlsplit(uri)
    except ValueError as e:
        raise MalformedURIError(reason=str(e)) from e

    if parts.scheme in (SCHEME_REDIS, SCHEME_REDIS_TLS):
        _check_port(parts)
        descriptor: ConnectionDescriptor = _resolve_direct(parts)
    elif parts.scheme == SCHEME_REDIS_SOCKET:
        _check_port(parts)
        descriptor = _resolve_socket(parts)
    elif parts.scheme == SCHEME_REDIS_SENTINEL:
        descriptor = _resolve_sentinel(parts)
    else:
        raise UnsupportedSchemeError(parts.scheme)

    logger.debug("redis_uri_resolved", scheme=parts.scheme, kind=descriptor.kind)
    return descriptor


def split_host_port(address: str) -> tuple[str, str | None]:
    """Split ``host[:port]`` into its host and port parts.

    Bracketed IPv6 hosts lose their brackets when a port follows. When no
    port delimiter can be found the whole address is returned as the host.

    Args:
        address: Address string such as ``localhost:6379`` or ``[::1]:6379``

    Returns:
        Tuple of host and port string (``None`` when there is no port)
    """
    if address.startswith("["):
        end = address.find("]")
        if end != -1 and address[end + 1 : end + 2] == ":":
            return address[1:end], address[end + 2 :]
        return address, None
    if address.count(":") == 1:
        host, _, port = address.partition(":")
        return host, port
    return address, None


def _check_port(parts: SplitResult) -> None:
    """Reject single-host authorities whose port is not all digits.

    The port is not range-checked.
    """
    authority = _host(parts)
    if authority.startswith("["):
        authority = authority[authority.find("]") + 1 :]
    _, colon, port = authority.rpartition(":")
    if colon and not _PORT.fullmatch(port):
        raise MalformedURIError(reason=f"invalid port {colon + port!r} after host")


def _host(parts: SplitResult) -> str:
    """Authority without the userinfo segment."""
    return parts.netloc.rpartition("@")[2]


def _password(parts: SplitResult) -> str:
    """Password from the userinfo, or an empty string."""
    if parts.password is None:
        return ""
    return unquote(parts.password)


def _query_get(parts: SplitResult, key: str) -> str:
    """First value of a query parameter, or an empty string."""
    values = parse_qs(parts.query, keep_blank_values=True).get(key)
    return values[0] if values else ""


def _parse_db_index(value: str, source: str, message: str) -> int:
    if not _DB_INDEX.fullmatch(value):
        raise InvalidDatabaseIndexError(message, source=source, value=value)
    return int(value)


def _resolve_direct(parts: SplitResult) -> DirectDescriptor | DirectTLSDescriptor:
    db = 0
    if parts.path:
        # Only the first segment is read; anything after it is ignored.
        first = parts.path.strip("/").split("/")[0]
        db = _parse_db_index(
            first,
            source="path",
            message=(
                f"{_URI_ERROR_PREFIX}: database number should be "
                "the first segment of the path"
            ),
        )

    address = _host(parts)
    password = _password(parts)

    if parts.scheme == SCHEME_REDIS_TLS:
        server_name, _ = split_host_port(address)
        return DirectTLSDescriptor(
            address=address,
            password=password,
            db=db,
            tls_server_name=server_name,
        )
    return DirectDescriptor(address=address, password=password, db=db)


def _resolve_socket(parts: SplitResult) -> UnixSocketDescriptor:
    # Text after "redis-socket:" that is not rooted at "/" is opaque, not a path
    if not parts.path.startswith("/"):
        raise MissingSocketPathError()

    db = 0
    raw_db = _query_get(parts, QUERY_DB)
    if raw_db:
        db = _parse_db_index(
            raw_db,
            source="query",
            message=f"{_SOCKET_ERROR_PREFIX}: query param `db` should be a number",
        )

    return UnixSocketDescriptor(
        path=unquote(parts.path),
        password=_password(parts),
        db=db,
    )


def _resolve_sentinel(parts: SplitResult) -> SentinelDescriptor:
    addrs = tuple(_host(parts).split(","))

    # No default here: a missing db is an error, raised as a plain ValueError.
    raw_db = _query_get(parts, QUERY_DB)
    if not _DB_INDEX.fullmatch(raw_db):
        raise ValueError(f"invalid literal for int() with base 10: {raw_db!r}")
    db = int(raw_db)

    return SentinelDescriptor(
        addrs=addrs,
        master_name=_query_get(parts, QUERY_MASTER),
        sentinel_password=_password(parts),
        username=_query_get(parts, QUERY_USERNAME),
        password=_query_get(parts, QUERY_PASSWORD),
        db=db,
    )
