"""Generic create/read/update/delete reconciliation against the remote API.

One :class:`Reconciler` serves every resource type. The per-entity parts (GraphQL
documents, decoding, field mapping) live behind :class:`EntityOperations`; the
reconciler owns the contract shared by all of them:

- create validates, mutates, then reads the new object back in full
- read overwrites every tracked attribute, or reports "not found" as a warning
- update sends only changed mutable attributes, never ``ForceNew`` ones, then reads
- delete mutates and clears the identity without reading back

Failures never raise out of a verb; they are returned as diagnostics and no partial
state is reported.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from .diagnostics import Diagnostic, Diagnostics
from .errors import AttributeAssignmentError, ConfigValidationError, RemoteAPIError

if TYPE_CHECKING:
    from .ports import GraphQLExecutor, GraphQLRequest
    from .schema import AttributeMap, ResourceSchema

log = getLogger(__name__)

type Fields = dict[str, str | None]


class EntityOperations[E](Protocol):
    """Entity-specific half of a reconciler."""

    @property
    def schema(self) -> ResourceSchema: ...

    @property
    def label(self) -> str: ...

    @property
    def not_found_summary(self) -> str: ...

    def build_create_mutation(self, declared: AttributeMap) -> GraphQLRequest: ...

    def build_read_query(self, resource_id: str) -> GraphQLRequest: ...

    def build_update_mutation(self, resource_id: str, changes: AttributeMap) -> GraphQLRequest: ...

    def build_delete_mutation(self, resource_id: str) -> GraphQLRequest: ...

    def decode_created_id(self, data: object) -> str: ...

    def decode_entity(self, data: object) -> E | None: ...

    def entity_fields(self, entity: E) -> Fields: ...


@dataclass(slots=True)
class CreateResult:
    id: str | None = None
    fields: Fields = field(default_factory=dict[str, "str | None"])
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(slots=True)
class ReadResult:
    id: str | None = None
    fields: Fields = field(default_factory=dict[str, "str | None"])
    found: bool = False
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(slots=True)
class UpdateResult:
    fields: Fields = field(default_factory=dict[str, "str | None"])
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(slots=True)
class DeleteResult:
    id: str | None = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


class Reconciler[E]:
    def __init__(self, *, executor: GraphQLExecutor, operations: EntityOperations[E]) -> None:
        self._executor = executor
        self._operations = operations

    @property
    def schema(self) -> ResourceSchema:
        return self._operations.schema

    @property
    def label(self) -> str:
        return self._operations.label

    def create(self, declared: AttributeMap) -> CreateResult:
        try:
            self.schema.validate_config(declared)
        except ConfigValidationError as exc:
            return CreateResult(diagnostics=Diagnostics.of(Diagnostic.from_exception(exc)))

        request = self._operations.build_create_mutation(declared)
        try:
            data = self._send(request)
            resource_id = self._operations.decode_created_id(data)
        except RemoteAPIError as exc:
            log.warning("Failed to create %s: %s", self.label, exc)
            return CreateResult(
                diagnostics=Diagnostics.of(
                    Diagnostic.from_exception(exc, summary=f"Failed to create {self.label}")
                )
            )

        log.info("Created %s %s", self.label, resource_id)
        read = self.read(resource_id)
        return CreateResult(id=resource_id, fields=read.fields, diagnostics=read.diagnostics)

    def read(self, resource_id: str) -> ReadResult:
        request = self._operations.build_read_query(resource_id)
        try:
            data = self._send(request)
            entity = self._operations.decode_entity(data)
            if entity is None:
                log.info("%s %s not found", self.label, resource_id)
                return ReadResult(
                    found=False,
                    diagnostics=Diagnostics.of(
                        Diagnostic.warning(self._operations.not_found_summary)
                    ),
                )
            fields = self._operations.entity_fields(entity)
        except (RemoteAPIError, AttributeAssignmentError) as exc:
            log.warning("Failed to read %s %s: %s", self.label, resource_id, exc)
            return ReadResult(
                diagnostics=Diagnostics.of(
                    Diagnostic.from_exception(exc, summary=f"Failed to read {self.label}")
                )
            )

        return ReadResult(id=resource_id, fields=fields, found=True)

    def update(self, resource_id: str, changes: AttributeMap) -> UpdateResult:
        forced = sorted(self.schema.force_new_names.intersection(changes))
        if forced:
            return UpdateResult(
                diagnostics=Diagnostics.of(
                    Diagnostic.error(
                        f"Cannot change {', '.join(forced)} of {self.label} {resource_id} in place",
                        "The resource must be destroyed and recreated for this change.",
                        attribute=forced[0],
                    )
                )
            )
        try:
            self.schema.validate_changes(changes)
        except ConfigValidationError as exc:
            return UpdateResult(diagnostics=Diagnostics.of(Diagnostic.from_exception(exc)))

        diagnostics = Diagnostics()
        for name in self.schema.ambiguous_clears(changes):
            diagnostics.append(
                Diagnostic.warning(
                    f"Removing {name} from the {self.label} configuration does not clear it",
                    "Set it to UNSET to clear the remote value explicitly.",
                    attribute=name,
                )
            )

        request = self._operations.build_update_mutation(resource_id, changes)
        try:
            self._send(request)
        except RemoteAPIError as exc:
            log.warning("Failed to update %s %s: %s", self.label, resource_id, exc)
            diagnostics.append(
                Diagnostic.from_exception(exc, summary=f"Failed to update {self.label}")
            )
            return UpdateResult(diagnostics=diagnostics)

        log.info("Updated %s %s", self.label, resource_id)
        read = self.read(resource_id)
        diagnostics.extend(read.diagnostics)
        return UpdateResult(fields=read.fields, diagnostics=diagnostics)

    def delete(self, resource_id: str) -> DeleteResult:
        request = self._operations.build_delete_mutation(resource_id)
        try:
            self._send(request)
        except RemoteAPIError as exc:
            log.warning("Failed to delete %s %s: %s", self.label, resource_id, exc)
            return DeleteResult(
                id=resource_id,
                diagnostics=Diagnostics.of(
                    Diagnostic.from_exception(exc, summary=f"Failed to delete {self.label}")
                ),
            )

        log.info("Deleted %s %s", self.label, resource_id)
        return DeleteResult(id=None)

    def _send(self, request: GraphQLRequest) -> object:
        payload = self._executor.execute(request.query, request.variables)
        return payload.require(request.data_key)
