"""Exceptions raised while resolving Redis connection URIs.

Every resolution failure is raised to the immediate caller; no partial
descriptor is ever returned alongside an error.
"""

from typing import Any


class RedisURIError(Exception):
    """Base exception for all URI resolution errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        details: Additional error details
    """

    message: str = "Could not parse redis uri"
    error_code: str = "redis_uri_error"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class MalformedURIError(RedisURIError):
    """Raised when the input is not syntactically a URI.

    Example:
        raise MalformedURIError(reason="Port could not be cast to integer value")
    """

    message = "Could not parse redis uri"
    error_code = "malformed_uri"

    def __init__(
        self,
        message: str | None = None,
        reason: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if reason:
            details["reason"] = reason
            message = message or f"{self.message}: {reason}"
        super().__init__(message=message, details=details, **kwargs)


class UnsupportedSchemeError(RedisURIError):
    """Raised when the URI scheme is not one of the recognized schemes.

    Example:
        raise UnsupportedSchemeError("ftp")
    """

    message = "Unsupported uri scheme"
    error_code = "unsupported_scheme"

    def __init__(self, scheme: str, **kwargs: Any) -> None:
        self.scheme = scheme
        details = kwargs.pop("details", {})
        details["scheme"] = scheme
        message = kwargs.pop("message", None) or f"{self.message}: {scheme!r}"
        super().__init__(message=message, details=details, **kwargs)


class InvalidDatabaseIndexError(RedisURIError):
    """Raised when a database index is not a non-negative base-10 integer.

    ``source`` is ``"path"`` for direct URIs and ``"query"`` for socket URIs.

    Example:
        raise InvalidDatabaseIndexError(source="path", value="abc")
    """

    message = "Invalid database index"
    error_code = "invalid_database_index"

    def __init__(
        self,
        message: str | None = None,
        source: str | None = None,
        value: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.source = source
        details = kwargs.pop("details", {})
        if source:
            details["source"] = source
        if value is not None:
            details["value"] = value
        super().__init__(message=message, details=details, **kwargs)


class MissingSocketPathError(RedisURIError):
    """Raised when a socket URI carries no filesystem path."""

    message = "Could not parse redis socket uri: path does not exist"
    error_code = "missing_socket_path"


class InvalidAddressError(RedisURIError):
    """Raised when an address cannot be split into host and numeric port.

    Only descriptor conversions split addresses; resolution keeps them opaque.
    """

    message = "Invalid address"
    error_code = "invalid_address"

    def __init__(
        self,
        message: str | None = None,
        address: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if address is not None:
            details["address"] = address
            message = message or f"{self.message}: {address!r}"
        super().__init__(message=message, details=details, **kwargs)
