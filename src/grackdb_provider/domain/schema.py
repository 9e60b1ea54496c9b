"""Attribute schemas describing how local resource attributes map onto remote fields.

A schema knows which attributes a user may declare, which are computed by the
remote system, and which force a replacement when they change. It is the only
place that turns declared values into GraphQL input objects, so every resource
encodes creates and partial updates the same way.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .errors import AttributeAssignmentError, ConfigValidationError


class Unset(Enum):
    """Sentinel asking for an optional attribute to be cleared remotely."""

    UNSET = "unset"

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = Unset.UNSET

type AttributeValue = str | None | Unset
type AttributeMap = Mapping[str, AttributeValue]


def is_empty(value: AttributeValue) -> bool:
    return value is None or value is UNSET or value == ""


@dataclass(frozen=True, slots=True, kw_only=True)
class Attribute:
    name: str
    remote_name: str | None = None
    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    force_new: bool = False
    # an empty value clears the remote field by sending an explicit null
    nullable: bool = False

    @property
    def declarable(self) -> bool:
        return self.required or self.optional

    @property
    def mutable(self) -> bool:
        return self.declarable and not self.force_new

    @property
    def wire_name(self) -> str:
        return self.remote_name or self.name


@dataclass(frozen=True, slots=True)
class ResourceSchema:
    type_name: str
    description: str
    attributes: tuple[Attribute, ...]

    def get(self, name: str) -> Attribute | None:
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None

    @property
    def declarable_attributes(self) -> tuple[Attribute, ...]:
        return tuple(attribute for attribute in self.attributes if attribute.declarable)

    @property
    def mutable_attributes(self) -> tuple[Attribute, ...]:
        return tuple(attribute for attribute in self.attributes if attribute.mutable)

    @property
    def force_new_names(self) -> frozenset[str]:
        return frozenset(attribute.name for attribute in self.attributes if attribute.force_new)

    def validate_config(self, declared: AttributeMap) -> None:
        """Check a full declared configuration before a create."""

        self.validate_declared(declared)
        missing = tuple(
            attribute.name
            for attribute in self.attributes
            if attribute.required and is_empty(declared.get(attribute.name))
        )
        if missing:
            raise ConfigValidationError(
                f"Missing required attribute(s) for {self.type_name}: {', '.join(missing)}",
                attributes=missing,
            )

    def validate_changes(self, changes: AttributeMap) -> None:
        """Check a set of changed attributes before an update."""

        self.validate_declared(changes)
        emptied = tuple(
            name
            for name, value in changes.items()
            if (attribute := self.get(name)) is not None and attribute.required and is_empty(value)
        )
        if emptied:
            raise ConfigValidationError(
                f"Required attribute(s) of {self.type_name} cannot be cleared: {', '.join(emptied)}",
                attributes=emptied,
            )

    def create_input(self, declared: AttributeMap) -> dict[str, object]:
        """Required attributes plus every optional attribute with a non-empty value."""

        variables: dict[str, object] = {}
        for attribute in self.declarable_attributes:
            value = declared.get(attribute.name)
            if attribute.required or not is_empty(value):
                variables[attribute.wire_name] = value
        return variables

    def update_input(self, changes: AttributeMap) -> dict[str, object]:
        """Encode only the changed mutable attributes.

        ``UNSET`` always becomes an explicit null. An empty value becomes null for
        nullable attributes; for other optional attributes it cannot be told apart
        from "no longer managed" and is left out (see :meth:`ambiguous_clears`).
        ``ForceNew`` attributes are never encoded.
        """

        variables: dict[str, object] = {}
        for attribute in self.mutable_attributes:
            if attribute.name not in changes:
                continue
            value = changes[attribute.name]
            if value is UNSET or (attribute.nullable and is_empty(value)):
                variables[attribute.wire_name] = None
            elif not is_empty(value):
                variables[attribute.wire_name] = value
        return variables

    def ambiguous_clears(self, changes: AttributeMap) -> tuple[str, ...]:
        return tuple(
            attribute.name
            for attribute in self.mutable_attributes
            if attribute.name in changes
            and not attribute.nullable
            and not attribute.required
            and changes[attribute.name] in (None, "")
        )

    def assign(self, fields: dict[str, str | None], name: str, value: object) -> None:
        """Store a decoded remote value into ``fields`` under a local attribute name."""

        if self.get(name) is None:
            raise AttributeAssignmentError(
                f"{self.type_name} has no attribute {name!r}", attribute=name
            )
        if value is not None and not isinstance(value, str):
            raise AttributeAssignmentError(
                f"Attribute {name!r} of {self.type_name} expects a string, "
                f"got {type(value).__name__}",
                attribute=name,
            )
        fields[name] = value

    def validate_declared(self, values: AttributeMap) -> None:
        """Reject attributes that cannot be declared at all: unknown, computed or non-string."""

        unknown = tuple(name for name in values if self.get(name) is None)
        if unknown:
            raise ConfigValidationError(
                f"Unknown attribute(s) for {self.type_name}: {', '.join(unknown)}",
                attributes=unknown,
            )
        computed = tuple(name for name in values if not self._require(name).declarable)
        if computed:
            raise ConfigValidationError(
                f"Computed attribute(s) of {self.type_name} cannot be set: {', '.join(computed)}",
                attributes=computed,
            )
        invalid = tuple(
            name
            for name, value in values.items()
            if value is not None and value is not UNSET and not isinstance(value, str)
        )
        if invalid:
            raise ConfigValidationError(
                f"Attribute(s) of {self.type_name} must be strings: {', '.join(invalid)}",
                attributes=invalid,
            )

    def _require(self, name: str) -> Attribute:
        attribute = self.get(name)
        if attribute is None:
            raise KeyError(name)
        return attribute
