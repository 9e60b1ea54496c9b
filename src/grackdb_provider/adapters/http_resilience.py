from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from httpx_retries import Retry, RetryTransport

from grackdb_provider.config.http_resilience import ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from types import TracebackType

__all__ = ["ResilienceConfig", "ResilientClient", "RetryPolicy", "build_retry"]

log = getLogger(__name__)


def build_retry(policy: RetryPolicy) -> Retry:
    # GraphQL only ever POSTs
    return Retry(
        total=policy.total,
        backoff_factor=policy.backoff_factor,
        max_backoff_wait=policy.max_backoff_wait,
        respect_retry_after_header=policy.respect_retry_after_header,
        allowed_methods=("POST",),
        status_forcelist=tuple(policy.status_forcelist),
        retry_on_exceptions=policy.retry_on_exceptions,
        backoff_jitter=policy.backoff_jitter,
    )


class ResilientClient:
    """Async JSON-over-HTTP client with fixed headers, a timeout and an optional retry policy.

    ``transport`` replaces the network transport underneath the retry layer, which is
    how tests route requests to an in-memory server.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        if config.retry.enabled:
            log.debug("%s: retrying up to %d times", config.name, config.retry.total)
        self._client = httpx.AsyncClient(
            timeout=config.timeout_seconds,
            headers=dict(config.default_headers or {}),
            transport=RetryTransport(transport=transport, retry=build_retry(config.retry)),
        )

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def post_json(self, url: str, payload: object) -> httpx.Response:
        return await self._client.post(url, json=payload)
