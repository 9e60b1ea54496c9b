"""GrackDB provider configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from grackdb_provider import __version__

from .env import optional_env_var
from .errors import ConfigurationError
from .http_resilience import ResilienceConfig

DEFAULT_API_URL = "https://grackdb.fogo.sh/query"
DEFAULT_USER_AGENT = f"grackdb-provider/{__version__}"

API_URL_ENV_VAR = "GRACKDB_API_URL"
TOKEN_ENV_VAR = "GRACKDB_TOKEN"  # noqa: S105


@dataclass(frozen=True, slots=True)
class ProviderConfig:
    """Connection settings shared by every resource and data source."""

    api_url: str = DEFAULT_API_URL
    token: str | None = field(default=None, repr=False)
    user_agent: str = DEFAULT_USER_AGENT
    resilience: ResilienceConfig = field(
        default_factory=lambda: ResilienceConfig(name="grackdb")
    )

    def __post_init__(self) -> None:
        try:
            url = httpx.URL(self.api_url)
        except httpx.InvalidURL as exc:
            raise ConfigurationError(f"Invalid api_url: {self.api_url!r}") from exc
        if url.scheme not in {"http", "https"} or not url.host:
            raise ConfigurationError(f"api_url must be an http(s) URL, got {self.api_url!r}")

    def headers(self) -> dict[str, str]:
        """Headers attached to every request, fixed for the lifetime of a client."""

        headers = {"User-Agent": self.user_agent}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def client_resilience(self) -> ResilienceConfig:
        """Resilience settings with the provider headers merged in."""

        return self.resilience.with_headers(self.headers())


def get_provider_config(
    *,
    api_url: str | None = None,
    token: str | None = None,
    resilience: ResilienceConfig | None = None,
) -> ProviderConfig:
    """Build the provider configuration, falling back to the environment.

    Explicit arguments win over ``GRACKDB_API_URL`` and ``GRACKDB_TOKEN``. The token
    is optional: without it requests are sent unauthenticated.
    """

    return ProviderConfig(
        api_url=api_url or optional_env_var(API_URL_ENV_VAR) or DEFAULT_API_URL,
        token=token or optional_env_var(TOKEN_ENV_VAR),
        resilience=resilience or ResilienceConfig(name="grackdb"),
    )
