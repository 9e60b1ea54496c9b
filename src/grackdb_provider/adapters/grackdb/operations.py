"""Per-entity GraphQL operations plugged into the generic reconciler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError

from grackdb_provider.domain.ports import GraphQLRequest
from grackdb_provider.domain.resources import (
    CURRENT_USER_SCHEMA,
    DISCORD_ACCOUNT_SCHEMA,
    USER_SCHEMA,
)

from . import queries
from .errors import GrackDBDecodeError
from .schema import (
    CreatedNode,
    DiscordAccount,
    DiscordAccountConnection,
    GrackDBBaseModel,
    User,
    UserConnection,
)
from .translator import current_user_fields, discord_account_fields, user_fields

if TYPE_CHECKING:
    from grackdb_provider.domain.data_source import DataSourceOperations
    from grackdb_provider.domain.reconciler import EntityOperations, Fields
    from grackdb_provider.domain.schema import AttributeMap, ResourceSchema


def _validate[M: GrackDBBaseModel](model: type[M], data: object, *, key: str) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise GrackDBDecodeError(f"Unexpected GrackDB payload for {key!r}: {exc}") from exc


def _created_id(data: object, *, key: str) -> str:
    return _validate(CreatedNode, data, key=key).id


@dataclass(frozen=True, slots=True)
class UserOperations:
    schema: ResourceSchema = USER_SCHEMA
    label: str = "user"
    not_found_summary: str = "Unable to refresh user state, unable to find requested user."

    def build_create_mutation(self, declared: AttributeMap) -> GraphQLRequest:
        return GraphQLRequest(
            query=queries.CREATE_USER_MUTATION,
            data_key="createUser",
            variables={"input": self.schema.create_input(declared)},
        )

    def build_read_query(self, resource_id: str) -> GraphQLRequest:
        return GraphQLRequest(
            query=queries.READ_USER_QUERY,
            data_key="users",
            variables={"userId": resource_id},
        )

    def build_update_mutation(self, resource_id: str, changes: AttributeMap) -> GraphQLRequest:
        return GraphQLRequest(
            query=queries.UPDATE_USER_MUTATION,
            data_key="updateUser",
            variables={"userId": resource_id, "input": self.schema.update_input(changes)},
        )

    def build_delete_mutation(self, resource_id: str) -> GraphQLRequest:
        return GraphQLRequest(
            query=queries.DELETE_USER_MUTATION,
            data_key="deleteUser",
            variables={"userId": resource_id},
        )

    def decode_created_id(self, data: object) -> str:
        return _created_id(data, key="createUser")

    def decode_entity(self, data: object) -> User | None:
        connection = _validate(UserConnection, data, key="users")
        if not connection.edges:
            return None
        return connection.edges[0].node

    def entity_fields(self, entity: User) -> Fields:
        return user_fields(entity)


@dataclass(frozen=True, slots=True)
class DiscordAccountOperations:
    schema: ResourceSchema = DISCORD_ACCOUNT_SCHEMA
    label: str = "discord account"
    not_found_summary: str = (
        "Unable to refresh discord account state, unable to find requested account."
    )

    def build_create_mutation(self, declared: AttributeMap) -> GraphQLRequest:
        return GraphQLRequest(
            query=queries.CREATE_DISCORD_ACCOUNT_MUTATION,
            data_key="createDiscordAccount",
            variables={"input": self.schema.create_input(declared)},
        )

    def build_read_query(self, resource_id: str) -> GraphQLRequest:
        return GraphQLRequest(
            query=queries.READ_DISCORD_ACCOUNT_QUERY,
            data_key="discordAccounts",
            variables={"accountId": resource_id},
        )

    def build_update_mutation(self, resource_id: str, changes: AttributeMap) -> GraphQLRequest:
        return GraphQLRequest(
            query=queries.UPDATE_DISCORD_ACCOUNT_MUTATION,
            data_key="updateDiscordAccount",
            variables={"accountId": resource_id, "input": self.schema.update_input(changes)},
        )

    def build_delete_mutation(self, resource_id: str) -> GraphQLRequest:
        return GraphQLRequest(
            query=queries.DELETE_DISCORD_ACCOUNT_MUTATION,
            data_key="deleteDiscordAccount",
            variables={"accountId": resource_id},
        )

    def decode_created_id(self, data: object) -> str:
        return _created_id(data, key="createDiscordAccount")

    def decode_entity(self, data: object) -> DiscordAccount | None:
        connection = _validate(DiscordAccountConnection, data, key="discordAccounts")
        if not connection.edges:
            return None
        return connection.edges[0].node

    def entity_fields(self, entity: DiscordAccount) -> Fields:
        return discord_account_fields(entity)


@dataclass(frozen=True, slots=True)
class CurrentUserOperations:
    schema: ResourceSchema = CURRENT_USER_SCHEMA
    label: str = "current user"
    not_found_summary: str = (
        "Failed to retrieve current user. Please ensure you've provided a valid api token."
    )

    def build_query(self) -> GraphQLRequest:
        return GraphQLRequest(query=queries.CURRENT_USER_QUERY, data_key="currentUser")

    def decode_entity(self, data: object) -> User | None:
        return _validate(User, data, key="currentUser")

    def entity_fields(self, entity: User) -> Fields:
        return current_user_fields(entity)


if TYPE_CHECKING:
    _user_check: EntityOperations[User] = UserOperations()
    _discord_account_check: EntityOperations[DiscordAccount] = DiscordAccountOperations()
    _current_user_check: DataSourceOperations[User] = CurrentUserOperations()
