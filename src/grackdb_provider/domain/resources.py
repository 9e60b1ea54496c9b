"""Schemas of the GrackDB resources and data sources."""

from __future__ import annotations

from typing import Final

from .schema import Attribute, ResourceSchema

USER_TYPE: Final = "grackdb_user"
DISCORD_ACCOUNT_TYPE: Final = "grackdb_discord_account"
CURRENT_USER_TYPE: Final = "grackdb_current_user"

USER_SCHEMA = ResourceSchema(
    type_name=USER_TYPE,
    description="Create and manage a GrackDB User.",
    attributes=(
        Attribute(name="id", description="Unique ID for this user.", computed=True),
        Attribute(name="username", description="Username for this user.", required=True),
        Attribute(
            name="avatar_url",
            remote_name="avatarUrl",
            description="URL to this user's avatar.",
            optional=True,
            nullable=True,
        ),
    ),
)

DISCORD_ACCOUNT_SCHEMA = ResourceSchema(
    type_name=DISCORD_ACCOUNT_TYPE,
    description="Create and manage a GrackDB Discord account.",
    attributes=(
        Attribute(name="id", description="Unique ID for this Discord account.", computed=True),
        Attribute(
            name="discord_id",
            remote_name="discordId",
            description="Discord snowflake for this account.",
            required=True,
            force_new=True,
        ),
        Attribute(name="username", description="Username for this account.", required=True),
        Attribute(
            name="discriminator", description="Discriminator for this account.", required=True
        ),
        Attribute(
            name="owner", description="ID of the User that owns this account.", optional=True
        ),
        Attribute(name="bot", description="ID of the bot that owns this account.", computed=True),
    ),
)

CURRENT_USER_SCHEMA = ResourceSchema(
    type_name=CURRENT_USER_TYPE,
    description="Get details on the current authenticated user.",
    attributes=(
        Attribute(name="id", description="Unique ID for this user.", computed=True),
        Attribute(name="username", description="Unique username for this user.", computed=True),
        Attribute(
            name="avatar_url",
            remote_name="avatarUrl",
            description="URL for this user's avatar.",
            computed=True,
        ),
    ),
)
