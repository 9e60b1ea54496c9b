from __future__ import annotations

import asyncio

import httpx

from grackdb_provider.adapters.http_resilience import ResilientClient, build_retry
from grackdb_provider.config.http_resilience import ResilienceConfig, RetryPolicy


def test_build_retry_copies_policy() -> None:
    retry = build_retry(RetryPolicy(total=3, backoff_factor=0.1))

    assert retry.total == 3
    assert retry.is_retryable_method("POST")


def test_client_sends_default_headers() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    config = ResilienceConfig(name="test", default_headers={"User-Agent": "agent/1.0"})

    async def call() -> httpx.Response:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            return await client.post_json("https://grackdb.test/query", {})

    response = asyncio.run(call())

    assert response.status_code == 200
    assert seen[0].headers["User-Agent"] == "agent/1.0"


def test_client_retries_when_policy_allows() -> None:
    statuses = iter([503, 503, 200])

    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(next(statuses))

    config = ResilienceConfig(
        name="test",
        retry=RetryPolicy(total=2, backoff_factor=0.0, backoff_jitter=0.0),
    )

    async def call() -> httpx.Response:
        async with ResilientClient(config, transport=httpx.MockTransport(handler)) as client:
            return await client.post_json("https://grackdb.test/query", {})

    assert asyncio.run(call()).status_code == 200
