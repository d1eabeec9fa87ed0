"""Connection descriptor models.

A descriptor is the immutable result of resolving a Redis URI. The four
variants form a closed union discriminated on ``kind``; callers match on the
variant class rather than probing for fields.
"""

from typing import Annotated, Literal
from urllib.parse import quote, urlencode

from pydantic import BaseModel, ConfigDict, Field

from queueconn.core.constants import (
    NETWORK_TCP,
    NETWORK_UNIX,
    QUERY_DB,
    QUERY_MASTER,
    QUERY_PASSWORD,
    QUERY_USERNAME,
    REDACTED,
    SCHEME_REDIS,
    SCHEME_REDIS_SENTINEL,
    SCHEME_REDIS_SOCKET,
    SCHEME_REDIS_TLS,
)


def _userinfo(password: str) -> str:
    """Render a password-only userinfo segment, or nothing."""
    return f":{quote(password, safe='')}@" if password else ""


def _mask(value: str) -> str:
    return REDACTED if value else value


class _Descriptor(BaseModel):
    """Shared configuration for all descriptor variants."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def network(self) -> str:
        """Transport network used to reach the store."""
        return NETWORK_TCP


class DirectDescriptor(_Descriptor):
    """Plain TCP connection to a single Redis node."""

    kind: Literal["direct"] = "direct"
    address: str = Field(..., description="host[:port] of the node")
    password: str = Field("", description="Password from the URI userinfo")
    db: int = Field(0, ge=0, description="Database index")

    @property
    def scheme(self) -> str:
        return SCHEME_REDIS

    def to_uri(self) -> str:
        """Build the ``redis://`` URI this descriptor resolves from."""
        return f"{self.scheme}://{_userinfo(self.password)}{self.address}/{self.db}"

    def redacted(self) -> "DirectDescriptor":
        """Return a copy with the password masked."""
        return self.model_copy(update={"password": _mask(self.password)})


class DirectTLSDescriptor(_Descriptor):
    """TCP connection to a single Redis node over TLS.

    ``tls_server_name`` is the host part of ``address`` and is only used as
    the peer name for certificate verification.
    """

    kind: Literal["direct-tls"] = "direct-tls"
    address: str = Field(..., description="host[:port] of the node")
    password: str = Field("", description="Password from the URI userinfo")
    db: int = Field(0, ge=0, description="Database index")
    tls_server_name: str = Field(..., description="Expected TLS peer name")

    @property
    def scheme(self) -> str:
        return SCHEME_REDIS_TLS

    def to_uri(self) -> str:
        """Build the ``rediss://`` URI this descriptor resolves from."""
        return f"{self.scheme}://{_userinfo(self.password)}{self.address}/{self.db}"

    def redacted(self) -> "DirectTLSDescriptor":
        """Return a copy with the password masked."""
        return self.model_copy(update={"password": _mask(self.password)})


class UnixSocketDescriptor(_Descriptor):
    """Connection through a Unix domain socket."""

    kind: Literal["unix-socket"] = "unix-socket"
    path: str = Field(
        ..., pattern=r"^/", description="Absolute socket filesystem path"
    )
    password: str = Field("", description="Password from the URI userinfo")
    db: int = Field(0, ge=0, description="Database index")

    @property
    def network(self) -> str:
        return NETWORK_UNIX

    @property
    def scheme(self) -> str:
        return SCHEME_REDIS_SOCKET

    def to_uri(self) -> str:
        """Build the ``redis-socket://`` URI this descriptor resolves from."""
        path = quote(self.path, safe="/")
        query = urlencode({QUERY_DB: self.db})
        return f"{self.scheme}://{_userinfo(self.password)}{path}?{query}"

    def redacted(self) -> "UnixSocketDescriptor":
        """Return a copy with the password masked."""
        return self.model_copy(update={"password": _mask(self.password)})


class SentinelDescriptor(_Descriptor):
    """Failover connection discovered through sentinel nodes.

    ``sentinel_password`` authenticates against the sentinels themselves,
    while ``username``/``password`` authenticate against the master or
    replica the sentinels report.
    """

    kind: Literal["sentinel"] = "sentinel"
    addrs: tuple[str, ...] = Field(..., min_length=1, description="Sentinel addresses")
    master_name: str = Field("", description="Name of the monitored master")
    sentinel_password: str = Field("", description="Password for sentinel nodes")
    username: str = Field("", description="Data node username")
    password: str = Field("", description="Data node password")
    db: int = Field(..., ge=0, description="Database index")

    @property
    def scheme(self) -> str:
        return SCHEME_REDIS_SENTINEL

    def to_uri(self) -> str:
        """Build the ``redis-sentinel://`` URI this descriptor resolves from."""
        params: dict[str, str | int] = {QUERY_MASTER: self.master_name}
        if self.username:
            params[QUERY_USERNAME] = self.username
        if self.password:
            params[QUERY_PASSWORD] = self.password
        params[QUERY_DB] = self.db
        hosts = ",".join(self.addrs)
        return (
            f"{self.scheme}://{_userinfo(self.sentinel_password)}{hosts}"
            f"?{urlencode(params)}"
        )

    def redacted(self) -> "SentinelDescriptor":
        """Return a copy with both passwords masked."""
        return self.model_copy(
            update={
                "sentinel_password": _mask(self.sentinel_password),
                "password": _mask(self.password),
            }
        )


ConnectionDescriptor = Annotated[
    DirectDescriptor | DirectTLSDescriptor | UnixSocketDescriptor | SentinelDescriptor,
    Field(discriminator="kind"),
]
