"""Reconciliation core: schemas, state, diagnostics and the generic CRUD contract."""

from __future__ import annotations

from .data_source import DataSourceOperations, DataSourceReader
from .diagnostics import Diagnostic, Diagnostics, Severity
from .errors import (
    AttributeAssignmentError,
    ConfigValidationError,
    RemoteAPIError,
    UnknownResourceTypeError,
)
from .ports import GraphQLExecutor, GraphQLPayload, GraphQLRequest
from .reconciler import (
    CreateResult,
    DeleteResult,
    EntityOperations,
    ReadResult,
    Reconciler,
    UpdateResult,
)
from .schema import UNSET, Attribute, AttributeMap, AttributeValue, ResourceSchema, Unset
from .state import Plan, PlanAction, ResourceState, plan_changes

__all__ = [
    "UNSET",
    "Attribute",
    "AttributeAssignmentError",
    "AttributeMap",
    "AttributeValue",
    "ConfigValidationError",
    "CreateResult",
    "DataSourceOperations",
    "DataSourceReader",
    "DeleteResult",
    "Diagnostic",
    "Diagnostics",
    "EntityOperations",
    "GraphQLExecutor",
    "GraphQLPayload",
    "GraphQLRequest",
    "Plan",
    "PlanAction",
    "ReadResult",
    "Reconciler",
    "RemoteAPIError",
    "ResourceSchema",
    "ResourceState",
    "Severity",
    "UnknownResourceTypeError",
    "Unset",
    "UpdateResult",
    "plan_changes",
]
