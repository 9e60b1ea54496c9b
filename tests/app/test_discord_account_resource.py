from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from grackdb_provider.domain.diagnostics import Severity
from grackdb_provider.domain.resources import DISCORD_ACCOUNT_TYPE
from grackdb_provider.domain.schema import UNSET

if TYPE_CHECKING:
    from grackdb_provider.domain.reconciler import Reconciler
    from grackdb_provider.provider import Provider
    from tests.support.fake_grackdb import FakeGrackDB


@pytest.fixture
def accounts(provider: Provider) -> Reconciler[object]:
    return provider.resource(DISCORD_ACCOUNT_TYPE)


def _declared(**overrides: str) -> dict[str, str]:
    declared = {"discord_id": "80351110224678912", "username": "nelly", "discriminator": "1337"}
    declared.update(overrides)
    return declared


def test_create_with_owner(accounts: Reconciler[object], fake_grackdb: FakeGrackDB) -> None:
    owner_id = fake_grackdb.add_user("alice")

    result = accounts.create(_declared(owner=owner_id))

    assert not result.diagnostics
    assert result.fields == {
        "id": result.id,
        "discord_id": "80351110224678912",
        "username": "nelly",
        "discriminator": "1337",
        "owner": owner_id,
        "bot": None,
    }
    assert fake_grackdb.requests_for("createDiscordAccount")[0].variables["input"] == {
        "discordId": "80351110224678912",
        "username": "nelly",
        "discriminator": "1337",
        "owner": owner_id,
    }


def test_create_without_owner_omits_it(
    accounts: Reconciler[object], fake_grackdb: FakeGrackDB
) -> None:
    result = accounts.create(_declared(owner=""))

    assert result.fields["owner"] is None
    assert "owner" not in fake_grackdb.requests_for("createDiscordAccount")[0].variables["input"]


def test_create_requires_discriminator(
    accounts: Reconciler[object], fake_grackdb: FakeGrackDB
) -> None:
    declared = _declared()
    del declared["discriminator"]

    result = accounts.create(declared)

    assert result.diagnostics.errors[0].attribute == "discriminator"
    assert fake_grackdb.requests == []


def test_read_reports_bot_reference(
    accounts: Reconciler[object], fake_grackdb: FakeGrackDB
) -> None:
    account_id = fake_grackdb.add_discord_account(
        discord_id="1", username="botty", discriminator="0000", bot="bot-7"
    )

    result = accounts.read(account_id)

    assert result.found
    assert result.fields["bot"] == "bot-7"
    assert result.fields["owner"] is None


def test_read_missing_account_is_a_warning(accounts: Reconciler[object]) -> None:
    result = accounts.read("account-404")

    assert not result.found
    assert result.diagnostics.warnings[0].summary == (
        "Unable to refresh discord account state, unable to find requested account."
    )


def test_update_rejects_discord_id_change(
    accounts: Reconciler[object], fake_grackdb: FakeGrackDB
) -> None:
    account_id = fake_grackdb.add_discord_account(
        discord_id="1", username="nelly", discriminator="1337"
    )

    result = accounts.update(account_id, {"discord_id": "2", "username": "nelly2"})

    assert result.diagnostics.has_errors()
    assert result.diagnostics.errors[0].attribute == "discord_id"
    assert fake_grackdb.requests_for("updateDiscordAccount") == []
    assert fake_grackdb.accounts[account_id]["discordId"] == "1"


def test_update_changes_discriminator(
    accounts: Reconciler[object], fake_grackdb: FakeGrackDB
) -> None:
    account_id = fake_grackdb.add_discord_account(
        discord_id="1", username="nelly", discriminator="1337"
    )

    result = accounts.update(account_id, {"discriminator": "4242"})

    assert not result.diagnostics
    assert result.fields["discriminator"] == "4242"
    assert fake_grackdb.requests_for("updateDiscordAccount")[0].variables["input"] == {
        "discriminator": "4242"
    }


def test_update_unset_owner_sends_null(
    accounts: Reconciler[object], fake_grackdb: FakeGrackDB
) -> None:
    owner_id = fake_grackdb.add_user("alice")
    account_id = fake_grackdb.add_discord_account(
        discord_id="1", username="nelly", discriminator="1337", owner=owner_id
    )

    result = accounts.update(account_id, {"owner": UNSET})

    assert not result.diagnostics
    assert fake_grackdb.requests_for("updateDiscordAccount")[0].variables["input"] == {
        "owner": None
    }
    assert result.fields["owner"] is None


def test_update_empty_owner_is_left_alone_with_warning(
    accounts: Reconciler[object], fake_grackdb: FakeGrackDB
) -> None:
    owner_id = fake_grackdb.add_user("alice")
    account_id = fake_grackdb.add_discord_account(
        discord_id="1", username="nelly", discriminator="1337", owner=owner_id
    )

    result = accounts.update(account_id, {"owner": ""})

    assert fake_grackdb.requests_for("updateDiscordAccount")[0].variables["input"] == {}
    assert result.fields["owner"] == owner_id
    assert [item.severity for item in result.diagnostics] == [Severity.WARNING]
    assert result.diagnostics.warnings[0].attribute == "owner"


def test_delete_account(accounts: Reconciler[object], fake_grackdb: FakeGrackDB) -> None:
    account_id = fake_grackdb.add_discord_account(
        discord_id="1", username="nelly", discriminator="1337"
    )

    result = accounts.delete(account_id)

    assert result.id is None
    assert account_id not in fake_grackdb.accounts
