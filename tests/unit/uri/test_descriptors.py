"""Unit tests for connection descriptor models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from queueconn.core.uri import (
    ConnectionDescriptor,
    DirectDescriptor,
    DirectTLSDescriptor,
    SentinelDescriptor,
    UnixSocketDescriptor,
    resolve,
)


class TestDescriptorValidation:
    """Tests for descriptor field constraints."""

    def test_descriptors_are_frozen(self) -> None:
        """Verify descriptors cannot be mutated after construction."""
        descriptor = DirectDescriptor(address="localhost:6379")

        with pytest.raises(ValidationError):
            descriptor.db = 3  # type: ignore[misc]

    def test_negative_db_rejected(self) -> None:
        """Verify direct and socket db indexes must be non-negative."""
        with pytest.raises(ValidationError):
            DirectDescriptor(address="localhost", db=-1)
        with pytest.raises(ValidationError):
            UnixSocketDescriptor(path="/tmp/r.sock", db=-1)

    def test_socket_path_must_be_absolute(self) -> None:
        """Verify relative socket paths are rejected."""
        with pytest.raises(ValidationError):
            UnixSocketDescriptor(path="rel.sock", password="pw")

    def test_sentinel_negative_db_rejected(self) -> None:
        """Verify sentinel db indexes must be non-negative."""
        with pytest.raises(ValidationError):
            SentinelDescriptor(addrs=("h",), master_name="m", db=-1)

    def test_sentinel_requires_an_address(self) -> None:
        """Verify the sentinel address list cannot be empty."""
        with pytest.raises(ValidationError):
            SentinelDescriptor(addrs=(), master_name="m", db=0)

    def test_sentinel_requires_db(self) -> None:
        """Verify sentinel descriptors have no default db."""
        with pytest.raises(ValidationError):
            SentinelDescriptor(addrs=("h",), master_name="m")  # type: ignore[call-arg]

    def test_unknown_fields_rejected(self) -> None:
        """Verify descriptor variants do not accept foreign fields."""
        with pytest.raises(ValidationError):
            DirectDescriptor(address="h", tls_server_name="h")  # type: ignore[call-arg]


class TestDiscriminatedUnion:
    """Tests for the ConnectionDescriptor union."""

    @pytest.mark.parametrize(
        ("payload", "expected_type"),
        [
            ({"kind": "direct", "address": "h:1"}, DirectDescriptor),
            (
                {"kind": "direct-tls", "address": "h:1", "tls_server_name": "h"},
                DirectTLSDescriptor,
            ),
            ({"kind": "unix-socket", "path": "/s"}, UnixSocketDescriptor),
            ({"kind": "sentinel", "addrs": ["h"], "db": 0}, SentinelDescriptor),
        ],
    )
    def test_validates_by_kind(self, payload: dict, expected_type: type) -> None:
        """Verify the kind field selects the variant."""
        adapter: TypeAdapter[ConnectionDescriptor] = TypeAdapter(ConnectionDescriptor)

        assert isinstance(adapter.validate_python(payload), expected_type)

    def test_unknown_kind_rejected(self) -> None:
        """Verify the union is closed."""
        adapter: TypeAdapter[ConnectionDescriptor] = TypeAdapter(ConnectionDescriptor)

        with pytest.raises(ValidationError):
            adapter.validate_python({"kind": "cluster", "address": "h"})


class TestToUri:
    """Tests for rebuilding URIs from descriptors."""

    @pytest.mark.parametrize(
        "descriptor",
        [
            DirectDescriptor(address="localhost:6379", password="secret", db=2),
            DirectDescriptor(address="cache.internal", db=0),
            DirectTLSDescriptor(
                address="cache:6380",
                password="p@ss:w/rd",
                db=9,
                tls_server_name="cache",
            ),
            UnixSocketDescriptor(path="/tmp/redis.sock", db=3),
            UnixSocketDescriptor(path="/var/run/redis 1.sock", password="pw"),
            SentinelDescriptor(
                addrs=("host1:26379", "host2:26379"),
                master_name="mymaster",
                db=0,
            ),
            SentinelDescriptor(
                addrs=("host1",),
                master_name="my master&co",
                sentinel_password="s3cret",
                username="worker",
                password="node=pw",
                db=7,
            ),
        ],
    )
    def test_round_trip(self, descriptor: ConnectionDescriptor) -> None:
        """Verify resolving a descriptor's URI gives back an equal descriptor."""
        assert resolve(descriptor.to_uri()) == descriptor

    def test_socket_uri_format(self) -> None:
        """Verify socket URIs always carry an empty authority."""
        descriptor = UnixSocketDescriptor(path="/tmp/r.sock", password="pw", db=1)

        assert descriptor.to_uri() == "redis-socket://:pw@/tmp/r.sock?db=1"

    def test_direct_uri_format(self) -> None:
        """Verify the canonical redis:// form."""
        descriptor = DirectDescriptor(address="localhost:6379", password="secret", db=2)

        assert descriptor.to_uri() == "redis://:secret@localhost:6379/2"

    def test_sentinel_uri_omits_empty_credentials(self) -> None:
        """Verify empty data-node credentials are not emitted."""
        descriptor = SentinelDescriptor(addrs=("h1", "h2"), master_name="m", db=1)

        assert descriptor.to_uri() == "redis-sentinel://h1,h2?master=m&db=1"


class TestRedacted:
    """Tests for masking secrets."""

    def test_direct_password_masked(self) -> None:
        """Verify the password is replaced and other fields kept."""
        descriptor = DirectDescriptor(address="h:1", password="secret", db=4)

        redacted = descriptor.redacted()

        assert redacted.password == "***"
        assert redacted.address == "h:1"
        assert descriptor.password == "secret"

    def test_empty_password_stays_empty(self) -> None:
        """Verify absent secrets are not turned into masks."""
        descriptor = UnixSocketDescriptor(path="/tmp/r.sock")

        assert descriptor.redacted().password == ""

    def test_sentinel_passwords_masked(self) -> None:
        """Verify both sentinel and data-node passwords are masked."""
        descriptor = SentinelDescriptor(
            addrs=("h",),
            master_name="m",
            sentinel_password="a",
            username="worker",
            password="b",
            db=0,
        )

        redacted = descriptor.redacted()

        assert redacted.sentinel_password == "***"
        assert redacted.password == "***"
        assert redacted.username == "worker"


class TestNetworkAndScheme:
    """Tests for derived properties."""

    @pytest.mark.parametrize(
        ("descriptor", "network", "scheme"),
        [
            (DirectDescriptor(address="h"), "tcp", "redis"),
            (DirectTLSDescriptor(address="h", tls_server_name="h"), "tcp", "rediss"),
            (UnixSocketDescriptor(path="/s"), "unix", "redis-socket"),
            (SentinelDescriptor(addrs=("h",), db=0), "tcp", "redis-sentinel"),
        ],
    )
    def test_properties(
        self, descriptor: ConnectionDescriptor, network: str, scheme: str
    ) -> None:
        """Verify each variant reports its transport and scheme."""
        assert descriptor.network == network
        assert descriptor.scheme == scheme
