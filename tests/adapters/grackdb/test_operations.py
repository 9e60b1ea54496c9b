from __future__ import annotations

import pytest

from grackdb_provider.adapters.grackdb import (
    CurrentUserOperations,
    DiscordAccountOperations,
    GrackDBDecodeError,
    UserOperations,
)
from grackdb_provider.adapters.grackdb.schema import DiscordAccount, GraphQLResponse, User
from grackdb_provider.domain.errors import AttributeAssignmentError
from grackdb_provider.domain.schema import UNSET


def _account_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "id": "account-1",
        "discordId": "80351110224678912",
        "username": "nelly",
        "discriminator": "1337",
        "owner": {"id": "user-1", "username": "alice", "avatarUrl": None},
        "bot": {"id": "bot-1"},
    }
    payload.update(overrides)
    return payload


def test_user_model_reads_camel_case_aliases() -> None:
    user = User.model_validate({"id": "u1", "username": "alice", "avatarUrl": "https://a/b.png"})

    assert user.avatar_url == "https://a/b.png"


def test_user_model_treats_missing_avatar_as_none() -> None:
    user = User.model_validate({"id": "u1", "username": "alice"})

    assert user.avatar_url is None


def test_discord_account_nested_references() -> None:
    account = DiscordAccount.model_validate(_account_payload())

    assert account.discord_id == "80351110224678912"
    assert account.owner is not None
    assert account.owner.username == "alice"
    assert account.bot is not None
    assert account.bot.id == "bot-1"


def test_graphql_response_get_without_data() -> None:
    response = GraphQLResponse.model_validate({"errors": [{"message": "boom"}]})

    assert response.get("users") is None
    assert response.errors[0].message == "boom"


def test_user_create_mutation_omits_empty_avatar() -> None:
    request = UserOperations().build_create_mutation({"username": "alice", "avatar_url": ""})

    assert request.data_key == "createUser"
    assert request.variables == {"input": {"username": "alice"}}
    assert "createUser(input: $input)" in request.query


def test_user_read_query_selects_avatar_url() -> None:
    request = UserOperations().build_read_query("u1")

    assert request.variables == {"userId": "u1"}
    assert "avatarUrl" in request.query
    assert "users(where: { id: $userId })" in request.query


def test_user_update_mutation_encodes_cleared_avatar_as_null() -> None:
    request = UserOperations().build_update_mutation("u1", {"avatar_url": UNSET})

    assert request.variables == {"userId": "u1", "input": {"avatarUrl": None}}


def test_user_decode_entity_returns_first_edge() -> None:
    operations = UserOperations()
    data = {
        "edges": [
            {"node": {"id": "u1", "username": "alice", "avatarUrl": None}},
            {"node": {"id": "u2", "username": "bob", "avatarUrl": None}},
        ]
    }

    user = operations.decode_entity(data)

    assert user is not None
    assert operations.entity_fields(user) == {"id": "u1", "username": "alice", "avatar_url": None}


def test_user_decode_entity_without_edges_is_none() -> None:
    assert UserOperations().decode_entity({"edges": []}) is None


def test_decode_created_id_rejects_malformed_payload() -> None:
    with pytest.raises(GrackDBDecodeError, match="createUser"):
        UserOperations().decode_created_id({"username": "no id"})


def test_discord_account_fields_flatten_references() -> None:
    operations = DiscordAccountOperations()
    account = operations.decode_entity({"edges": [{"node": _account_payload()}]})

    assert account is not None
    assert operations.entity_fields(account) == {
        "id": "account-1",
        "discord_id": "80351110224678912",
        "username": "nelly",
        "discriminator": "1337",
        "owner": "user-1",
        "bot": "bot-1",
    }


def test_discord_account_fields_clear_missing_references() -> None:
    operations = DiscordAccountOperations()
    account = operations.decode_entity(
        {"edges": [{"node": _account_payload(owner=None, bot=None)}]}
    )

    assert account is not None
    fields = operations.entity_fields(account)
    assert fields["owner"] is None
    assert fields["bot"] is None


def test_discord_account_update_never_sends_discord_id() -> None:
    request = DiscordAccountOperations().build_update_mutation(
        "account-1", {"discord_id": "1", "username": "nelly2"}
    )

    assert request.variables == {"accountId": "account-1", "input": {"username": "nelly2"}}


def test_current_user_query_has_no_variables() -> None:
    request = CurrentUserOperations().build_query()

    assert request.data_key == "currentUser"
    assert request.variables == {}


def test_current_user_fields_use_current_user_schema() -> None:
    operations = CurrentUserOperations()
    user = operations.decode_entity({"id": "u1", "username": "alice", "avatarUrl": "x"})

    assert user is not None
    assert operations.entity_fields(user) == {"id": "u1", "username": "alice", "avatar_url": "x"}


def test_assignment_rejects_non_string_values() -> None:
    user = User.model_construct(id="u1", username=42, avatar_url=None)

    with pytest.raises(AttributeAssignmentError) as excinfo:
        UserOperations().entity_fields(user)

    assert excinfo.value.attribute == "username"
