"""Pydantic models describing GrackDB GraphQL payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .errors import MissingDataError


class GrackDBBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class User(GrackDBBaseModel):
    id: str
    username: str
    # null and absent both decode to None; the API always selects it
    avatar_url: str | None = Field(default=None, alias="avatarUrl")


class DiscordBot(GrackDBBaseModel):
    id: str
    account: DiscordAccount | None = None


class DiscordAccount(GrackDBBaseModel):
    id: str
    discord_id: str = Field(alias="discordId")
    username: str
    discriminator: str
    owner: User | None = None
    bot: DiscordBot | None = None


class CreatedNode(GrackDBBaseModel):
    id: str


class UserEdge(GrackDBBaseModel):
    node: User


class UserConnection(GrackDBBaseModel):
    edges: list[UserEdge] = Field(default_factory=list[UserEdge])


class DiscordAccountEdge(GrackDBBaseModel):
    node: DiscordAccount


class DiscordAccountConnection(GrackDBBaseModel):
    edges: list[DiscordAccountEdge] = Field(default_factory=list[DiscordAccountEdge])


class GraphQLErrorLocation(GrackDBBaseModel):
    line: int
    column: int


class GraphQLError(GrackDBBaseModel):
    message: str
    path: list[str | int] | None = None
    locations: list[GraphQLErrorLocation] | None = None


class GraphQLResponse(GrackDBBaseModel):
    """The ``{"data": ..., "errors": [...]}`` envelope of every GraphQL response."""

    data: dict[str, object] | None = None
    errors: list[GraphQLError] = Field(default_factory=list[GraphQLError])

    def get(self, key: str) -> object:
        if self.data is None:
            return None
        return self.data.get(key)

    def require(self, key: str) -> object:
        value = self.get(key)
        if value is None:
            message = f"GrackDB response is missing data for {key!r}"
            if self.errors:
                message = f"{message}: {'; '.join(error.message for error in self.errors)}"
            raise MissingDataError(message, key=key)
        return value


DiscordBot.model_rebuild()
DiscordAccount.model_rebuild()
