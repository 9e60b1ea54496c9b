"""Timeout, retry and header settings for the GraphQL transport."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """Retry settings handed to ``httpx_retries``.

    ``total=0`` sends each GraphQL document exactly once. Mutations are not
    idempotent, so a caller opting into retries accepts duplicate writes.
    """

    total: int = 0
    backoff_factor: float = 0.5
    max_backoff_wait: float = 30.0
    respect_retry_after_header: bool = True
    status_forcelist: frozenset[int] = field(
        default_factory=lambda: frozenset({429, 502, 503, 504})
    )
    retry_on_exceptions: tuple[type[httpx.HTTPError], ...] = (
        httpx.ConnectError,
        httpx.ConnectTimeout,
    )
    backoff_jitter: float = 1.0

    @property
    def enabled(self) -> bool:
        return self.total > 0


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    timeout_seconds: float | None = 30.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    default_headers: Mapping[str, str] | None = None

    def with_headers(self, headers: Mapping[str, str]) -> ResilienceConfig:
        """Copy with ``headers`` layered over the existing default headers."""

        merged = dict(self.default_headers or {})
        merged.update(headers)
        return replace(self, default_headers=merged)
