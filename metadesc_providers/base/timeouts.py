"""Timeout configuration for provider HTTP calls.

Centralizes the timeout values used by transports and provider adapters so no
call site hard-codes its own literal.

Key Components
--------------
TimeoutConfig
    Dataclass capturing normalized timeout values (seconds).

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use and again whenever the relevant variables change. Supported
    environment variables (all optional):
        METADESC_TIMEOUT_HTTP_SECONDS
        METADESC_TIMEOUT_MODELS_SECONDS

Failure Modes
-------------
Invalid or non-positive values are ignored and the default is kept.
"""
from __future__ import annotations

from dataclasses import dataclass
import os

from .constants import DEFAULT_HTTP_TIMEOUT


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Timeout for a summary generation request.
        models_timeout_seconds: Timeout for a model-list request; these are
            small GET calls and default to half of the generation timeout.
    """

    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT
    models_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT / 2


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None

_ENV_NAMES = ("METADESC_TIMEOUT_HTTP_SECONDS", "METADESC_TIMEOUT_MODELS_SECONDS")


def _parse_env_float(name: str, default: float) -> float:
    """Parse an environment variable as a positive float, else return ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    cur_guard = "/".join(os.getenv(name, "") for name in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED

    http = _parse_env_float("METADESC_TIMEOUT_HTTP_SECONDS", DEFAULT_HTTP_TIMEOUT)
    models = _parse_env_float("METADESC_TIMEOUT_MODELS_SECONDS", http / 2)
    _CACHED = TimeoutConfig(http_timeout_seconds=http, models_timeout_seconds=models)
    _ENV_GUARD = cur_guard
    return _CACHED


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
]
