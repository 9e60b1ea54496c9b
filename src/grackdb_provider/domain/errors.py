"""Domain-level error definitions."""

from __future__ import annotations


class RemoteAPIError(RuntimeError):
    """Base class for failures talking to the remote API (transport, decode, missing data)."""


class AttributeAssignmentError(RuntimeError):
    """Raised when a decoded value cannot be stored into a resource attribute."""

    def __init__(self, message: str, *, attribute: str) -> None:
        super().__init__(message)
        self.attribute = attribute


class ConfigValidationError(ValueError):
    """Raised when declared configuration does not match a resource schema."""

    def __init__(self, message: str, *, attributes: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.attributes = attributes


class UnknownResourceTypeError(LookupError):
    """Raised when a resource or data source type name is not registered."""
