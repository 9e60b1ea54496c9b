"""Translate decoded GrackDB entities into local attribute maps."""

from __future__ import annotations

from typing import TYPE_CHECKING

from grackdb_provider.domain.resources import (
    CURRENT_USER_SCHEMA,
    DISCORD_ACCOUNT_SCHEMA,
    USER_SCHEMA,
)

if TYPE_CHECKING:
    from grackdb_provider.domain.reconciler import Fields
    from grackdb_provider.domain.schema import ResourceSchema

    from .schema import DiscordAccount, User


def user_fields(user: User, *, schema: ResourceSchema = USER_SCHEMA) -> Fields:
    fields: Fields = {}
    schema.assign(fields, "id", user.id)
    schema.assign(fields, "username", user.username)
    schema.assign(fields, "avatar_url", user.avatar_url)
    return fields


def current_user_fields(user: User) -> Fields:
    return user_fields(user, schema=CURRENT_USER_SCHEMA)


def discord_account_fields(account: DiscordAccount) -> Fields:
    """References are flattened to ids; a missing reference clears the local value."""

    fields: Fields = {}
    schema = DISCORD_ACCOUNT_SCHEMA
    schema.assign(fields, "id", account.id)
    schema.assign(fields, "discord_id", account.discord_id)
    schema.assign(fields, "username", account.username)
    schema.assign(fields, "discriminator", account.discriminator)
    schema.assign(fields, "owner", account.owner.id if account.owner is not None else None)
    schema.assign(fields, "bot", account.bot.id if account.bot is not None else None)
    return fields
