"""Provider host: configuration wiring, resource registry and plan/apply orchestration.

The host owns what a Terraform-style lifecycle would otherwise own: it tracks the
last-known :class:`ResourceState`, diffs declared configuration against it, and
decides which reconciler verb to call. ``ForceNew`` changes are turned into a
destroy-then-create here; reconcilers never see them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Any

from grackdb_provider.adapters.grackdb import (
    CurrentUserOperations,
    DiscordAccountOperations,
    GrackDBClient,
    UserOperations,
)
from grackdb_provider.config.provider import ProviderConfig, get_provider_config
from grackdb_provider.domain.data_source import DataSourceReader
from grackdb_provider.domain.diagnostics import Diagnostic, Diagnostics
from grackdb_provider.domain.errors import ConfigValidationError, UnknownResourceTypeError
from grackdb_provider.domain.reconciler import ReadResult, Reconciler
from grackdb_provider.domain.resources import (
    CURRENT_USER_TYPE,
    DISCORD_ACCOUNT_TYPE,
    USER_TYPE,
)
from grackdb_provider.domain.state import Plan, PlanAction, ResourceState, plan_changes

if TYPE_CHECKING:
    from collections.abc import Callable

    from grackdb_provider.adapters.http_resilience import ResilientClient
    from grackdb_provider.config.http_resilience import ResilienceConfig
    from grackdb_provider.domain.ports import GraphQLExecutor
    from grackdb_provider.domain.schema import AttributeMap

log = getLogger(__name__)


@dataclass(slots=True)
class ApplyResult:
    state: ResourceState
    plan: Plan
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


@dataclass(slots=True)
class RefreshResult:
    state: ResourceState
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


class Provider:
    def __init__(self, *, executor: GraphQLExecutor) -> None:
        self._executor = executor
        self._resources: dict[str, Reconciler[Any]] = {
            USER_TYPE: Reconciler(executor=executor, operations=UserOperations()),
            DISCORD_ACCOUNT_TYPE: Reconciler(
                executor=executor, operations=DiscordAccountOperations()
            ),
        }
        self._data_sources: dict[str, DataSourceReader[Any]] = {
            CURRENT_USER_TYPE: DataSourceReader(
                executor=executor, operations=CurrentUserOperations()
            ),
        }

    @classmethod
    def configure(
        cls,
        config: ProviderConfig | None = None,
        *,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> Provider:
        """Build the shared API client once and bind every resource to it."""

        effective = config or get_provider_config()
        if not effective.token:
            log.warning("No GrackDB token configured; requests are sent unauthenticated")
        client = GrackDBClient(config=effective, client_factory=client_factory)
        log.info("Configured GrackDB provider for %s", effective.api_url)
        return cls(executor=client)

    @property
    def resource_types(self) -> tuple[str, ...]:
        return tuple(self._resources)

    @property
    def data_source_types(self) -> tuple[str, ...]:
        return tuple(self._data_sources)

    def resource(self, type_name: str) -> Reconciler[Any]:
        try:
            return self._resources[type_name]
        except KeyError:
            raise UnknownResourceTypeError(f"Unknown resource type: {type_name}") from None

    def data_source(self, type_name: str) -> DataSourceReader[Any]:
        try:
            return self._data_sources[type_name]
        except KeyError:
            raise UnknownResourceTypeError(f"Unknown data source type: {type_name}") from None

    def read_data_source(self, type_name: str) -> ReadResult:
        return self.data_source(type_name).read()

    def plan(self, type_name: str, state: ResourceState, declared: AttributeMap) -> Plan:
        """Diff ``declared`` against ``state``.

        Raises ``ConfigValidationError`` for attributes the resource cannot declare.
        """

        schema = self.resource(type_name).schema
        schema.validate_declared(declared)
        return plan_changes(schema, state, declared)

    def apply(self, type_name: str, state: ResourceState, declared: AttributeMap) -> ApplyResult:
        """Bring one resource in line with its declared configuration."""

        reconciler = self.resource(type_name)
        try:
            plan = self.plan(type_name, state, declared)
        except ConfigValidationError as exc:
            return ApplyResult(
                state=state,
                plan=Plan(PlanAction.NOOP),
                diagnostics=Diagnostics.of(Diagnostic.from_exception(exc)),
            )
        log.info("Applying %s: %s", type_name, plan.action)

        if plan.action is PlanAction.NOOP:
            return ApplyResult(state=state, plan=plan)

        if plan.action is PlanAction.UPDATE and state.id is not None:
            updated = reconciler.update(state.id, plan.changes)
            if updated.diagnostics.has_errors() or not updated.fields:
                return ApplyResult(state=state, plan=plan, diagnostics=updated.diagnostics)
            return ApplyResult(
                state=ResourceState(id=state.id, attributes=updated.fields),
                plan=plan,
                diagnostics=updated.diagnostics,
            )

        diagnostics = Diagnostics()
        if plan.action is PlanAction.REPLACE:
            log.info("Replacing %s %s: %s changed", type_name, state.id, ", ".join(plan.replace))
            destroyed = self.destroy(type_name, state)
            diagnostics.extend(destroyed.diagnostics)
            if destroyed.diagnostics.has_errors():
                return ApplyResult(state=state, plan=plan, diagnostics=diagnostics)

        created = reconciler.create(declared)
        diagnostics.extend(created.diagnostics)
        return ApplyResult(
            state=ResourceState(id=created.id, attributes=created.fields),
            plan=plan,
            diagnostics=diagnostics,
        )

    def refresh(self, type_name: str, state: ResourceState) -> RefreshResult:
        """Re-read a resource; a missing remote object drops its identity."""

        if state.id is None:
            return RefreshResult(state=state)
        result = self.resource(type_name).read(state.id)
        if result.found:
            return RefreshResult(
                state=ResourceState(id=state.id, attributes=result.fields),
                diagnostics=result.diagnostics,
            )
        if result.diagnostics.has_errors():
            return RefreshResult(state=state, diagnostics=result.diagnostics)
        log.info("%s %s no longer exists remotely", type_name, state.id)
        return RefreshResult(
            state=ResourceState(id=None, attributes=state.attributes),
            diagnostics=result.diagnostics,
        )

    def destroy(self, type_name: str, state: ResourceState) -> ApplyResult:
        plan = Plan(PlanAction.DELETE)
        if state.id is None:
            return ApplyResult(state=state, plan=plan)
        result = self.resource(type_name).delete(state.id)
        if result.diagnostics.has_errors():
            return ApplyResult(state=state, plan=plan, diagnostics=result.diagnostics)
        return ApplyResult(state=ResourceState(), plan=plan, diagnostics=result.diagnostics)
