"""Resource state snapshots and plan-time diffing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from .schema import UNSET, AttributeMap, AttributeValue

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .schema import ResourceSchema


@dataclass(frozen=True, slots=True)
class ResourceState:
    """Last-known state of one resource instance as tracked by the host.

    ``id`` is ``None`` until the remote system assigned one, and again after the
    resource was deleted or found missing.
    """

    id: str | None = None
    attributes: Mapping[str, str | None] = field(default_factory=dict[str, "str | None"])

    @property
    def exists(self) -> bool:
        return self.id is not None

    def get(self, name: str) -> str | None:
        return self.attributes.get(name)


class PlanAction(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    REPLACE = "replace"
    DELETE = "delete"
    NOOP = "noop"


@dataclass(frozen=True, slots=True)
class Plan:
    action: PlanAction
    changes: Mapping[str, AttributeValue] = field(default_factory=dict[str, AttributeValue])
    replace: tuple[str, ...] = ()


def _comparable(value: AttributeValue) -> str:
    if value is None or value is UNSET:
        return ""
    return value


def plan_changes(schema: ResourceSchema, prior: ResourceState, declared: AttributeMap) -> Plan:
    """Compare declared configuration against the last-known state.

    An attribute missing from ``declared`` counts as empty, so removing an optional
    attribute from configuration shows up as a change. Computed attributes never do.
    """

    if not prior.exists:
        return Plan(PlanAction.CREATE, changes=dict(declared))

    changes: dict[str, AttributeValue] = {}
    replace: list[str] = []
    for attribute in schema.declarable_attributes:
        value = declared.get(attribute.name)
        if _comparable(value) == _comparable(prior.get(attribute.name)):
            continue
        if attribute.force_new:
            replace.append(attribute.name)
        else:
            changes[attribute.name] = value

    if replace:
        return Plan(PlanAction.REPLACE, changes=changes, replace=tuple(replace))
    if changes:
        return Plan(PlanAction.UPDATE, changes=changes)
    return Plan(PlanAction.NOOP)
