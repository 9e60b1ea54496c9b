"""HTTP client for the GrackDB GraphQL API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from grackdb_provider.adapters.http_resilience import ResilientClient

from .errors import GrackDBDecodeError, GrackDBTransportError
from .schema import GraphQLResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from grackdb_provider.config.http_resilience import ResilienceConfig
    from grackdb_provider.config.provider import ProviderConfig

log = getLogger(__name__)


class GrackDBClient:
    """Low-level GraphQL client for GrackDB.

    Headers (user agent and bearer token) are fixed when the client is built; one
    instance is shared by every resource of a configured provider.
    """

    def __init__(
        self,
        *,
        config: ProviderConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.client_resilience()
        self._client_factory = client_factory or ResilientClient

    @property
    def api_url(self) -> str:
        return self._config.api_url

    @property
    def authenticated(self) -> bool:
        return bool(self._config.token)

    def execute(
        self, query: str, variables: Mapping[str, object] | None = None
    ) -> GraphQLResponse:
        """Send one GraphQL document and return its decoded envelope.

        Each call opens its own HTTP client through ``client_factory`` and runs it
        under ``asyncio.run``; connections are not kept alive between calls. Calling
        this from inside a running event loop raises ``RuntimeError``, which is not a
        ``RemoteAPIError`` and therefore propagates out of the reconciler verbs.
        """

        return asyncio.run(self._execute_async(query=query, variables=dict(variables or {})))

    async def _execute_async(
        self,
        *,
        query: str,
        variables: dict[str, object],
    ) -> GraphQLResponse:
        body = {"operationName": None, "query": query, "variables": variables}
        log.debug("POST %s variables=%s", self.api_url, variables)

        async with self._client_factory(self._resilience) as client:
            try:
                response = await client.post_json(self.api_url, body)
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                raise GrackDBTransportError(
                    f"GrackDB returned HTTP {status}", status_code=status
                ) from exc
            except httpx.HTTPError as exc:
                raise GrackDBTransportError(f"GrackDB request failed: {exc}") from exc

        return self._decode(response)

    def _decode(self, response: httpx.Response) -> GraphQLResponse:
        try:
            payload = response.json()
        except ValueError as exc:
            raise GrackDBDecodeError("GrackDB response is not valid JSON") from exc

        if not isinstance(payload, dict):
            raise GrackDBDecodeError("Unexpected GrackDB response payload")

        try:
            envelope = GraphQLResponse.model_validate(payload)
        except ValidationError as exc:
            raise GrackDBDecodeError(f"Unexpected GrackDB response payload: {exc}") from exc

        for error in envelope.errors:
            log.error("GrackDB GraphQL error: %s", error.message)
        return envelope
