"""Ports the reconcilers use to reach the remote GraphQL API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class GraphQLRequest:
    """A GraphQL document, its variables and the root field its data is keyed by."""

    query: str
    data_key: str
    variables: Mapping[str, object] = field(default_factory=dict[str, object])


@runtime_checkable
class GraphQLPayload(Protocol):
    def require(self, key: str) -> object:
        """Return ``data[key]`` or raise a ``RemoteAPIError`` if it is absent or null."""
        ...

    def get(self, key: str) -> object:
        """Return ``data[key]``, or ``None`` if absent."""
        ...


@runtime_checkable
class GraphQLExecutor(Protocol):
    def execute(
        self, query: str, variables: Mapping[str, object] | None = None
    ) -> GraphQLPayload:
        ...


__all__ = ["GraphQLExecutor", "GraphQLPayload", "GraphQLRequest"]
