"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when provider settings (such as ``api_url``) cannot be used to reach GrackDB."""
