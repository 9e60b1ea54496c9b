"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .http_resilience import ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .provider import (
    DEFAULT_API_URL,
    DEFAULT_USER_AGENT,
    ProviderConfig,
    get_provider_config,
)

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_USER_AGENT",
    "ConfigurationError",
    "ProviderConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "get_provider_config",
    "optional_env_var",
]
