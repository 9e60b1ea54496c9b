"""Public interface for the GrackDB adapter."""

from __future__ import annotations

from .client import GrackDBClient
from .errors import GrackDBDecodeError, GrackDBError, GrackDBTransportError, MissingDataError
from .operations import CurrentUserOperations, DiscordAccountOperations, UserOperations
from .schema import DiscordAccount, DiscordBot, GraphQLResponse, User

__all__ = [
    "CurrentUserOperations",
    "DiscordAccount",
    "DiscordAccountOperations",
    "DiscordBot",
    "GrackDBClient",
    "GrackDBDecodeError",
    "GrackDBError",
    "GrackDBTransportError",
    "GraphQLResponse",
    "MissingDataError",
    "User",
    "UserOperations",
]
