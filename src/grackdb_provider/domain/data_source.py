"""Read-only data sources."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from .diagnostics import Diagnostic, Diagnostics
from .errors import AttributeAssignmentError, RemoteAPIError
from .reconciler import Fields, ReadResult

if TYPE_CHECKING:
    from .ports import GraphQLExecutor, GraphQLRequest
    from .schema import ResourceSchema

log = getLogger(__name__)


class DataSourceOperations[E](Protocol):
    @property
    def schema(self) -> ResourceSchema: ...

    @property
    def label(self) -> str: ...

    @property
    def not_found_summary(self) -> str: ...

    def build_query(self) -> GraphQLRequest: ...

    def decode_entity(self, data: object) -> E | None: ...

    def entity_fields(self, entity: E) -> Fields: ...


class DataSourceReader[E]:
    """Fetch a singleton entity on every read; nothing is cached between reads.

    A null result is an error here, unlike a resource read: a data source with no
    entity behind it has nothing meaningful to report.
    """

    def __init__(self, *, executor: GraphQLExecutor, operations: DataSourceOperations[E]) -> None:
        self._executor = executor
        self._operations = operations

    @property
    def schema(self) -> ResourceSchema:
        return self._operations.schema

    def read(self) -> ReadResult:
        request = self._operations.build_query()
        try:
            payload = self._executor.execute(request.query, request.variables)
            data = payload.get(request.data_key)
            entity = self._operations.decode_entity(data) if data is not None else None
            if entity is None:
                log.warning("No %s returned", self._operations.label)
                return ReadResult(
                    diagnostics=Diagnostics.of(Diagnostic.error(self._operations.not_found_summary))
                )
            fields = self._operations.entity_fields(entity)
        except (RemoteAPIError, AttributeAssignmentError) as exc:
            log.warning("Failed to read %s: %s", self._operations.label, exc)
            return ReadResult(
                diagnostics=Diagnostics.of(
                    Diagnostic.from_exception(exc, summary=f"Failed to read {self._operations.label}")
                )
            )

        return ReadResult(id=fields.get("id"), fields=fields, found=True)
