"""Errors raised by the GrackDB API client."""

from __future__ import annotations

from grackdb_provider.domain.errors import RemoteAPIError


class GrackDBError(RemoteAPIError):
    """Base class for GrackDB API failures."""


class GrackDBTransportError(GrackDBError):
    """Raised when the request could not be sent or the server answered with an error status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GrackDBDecodeError(GrackDBError):
    """Raised when the response body is not a GraphQL JSON envelope."""


class MissingDataError(GrackDBError):
    """Raised when the envelope lacks the data key an operation expects."""

    def __init__(self, message: str, *, key: str) -> None:
        super().__init__(message)
        self.key = key
