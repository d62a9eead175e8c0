"""Provider configuration: defaults, optional JSON file, environment, overrides.

Every adapter resolves its settings through :func:`get_provider_config`.
Sources are merged per provider, later ones winning:

1. built-in defaults (``defaults.py``)
2. the JSON object in the file named by ``METADESC_CONFIG_FILE``, keyed by
   provider name::

       {"openai": {"model": "gpt-4o-mini"},
        "anthropic": {"model": "claude-3-5-haiku-latest", "timeout_seconds": 20}}

3. environment: ``<PROVIDER>_API_KEY`` (see ``env.py``), ``<PROVIDER>_MODEL``,
   ``<PROVIDER>_BASE_URL``, ``<PROVIDER>_TIMEOUT_SECONDS``
4. explicit overrides passed by the caller (``None`` values are skipped)

A ``.env`` file (path from ``DOTENV_FILE``, default ``./.env``) is read once
per process before the environment is consulted. This module only supplies
values; it never stores keys anywhere.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MODEL,
    DEEPSEEK_DEFAULT_BASE_URL,
    DEEPSEEK_DEFAULT_MODEL,
    GEMINI_DEFAULT_BASE_URL,
    GEMINI_DEFAULT_MODEL,
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_MODEL,
    XAI_DEFAULT_BASE_URL,
    XAI_DEFAULT_MODEL,
)
from .env import is_placeholder, resolve_provider_key

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"model": OPENAI_DEFAULT_MODEL, "base_url": OPENAI_DEFAULT_BASE_URL},
    "anthropic": {"model": ANTHROPIC_DEFAULT_MODEL, "base_url": ANTHROPIC_DEFAULT_BASE_URL},
    "gemini": {"model": GEMINI_DEFAULT_MODEL, "base_url": GEMINI_DEFAULT_BASE_URL},
    "deepseek": {"model": DEEPSEEK_DEFAULT_MODEL, "base_url": DEEPSEEK_DEFAULT_BASE_URL},
    "xai": {"model": XAI_DEFAULT_MODEL, "base_url": XAI_DEFAULT_BASE_URL},
}

# config field -> env var suffix (prefixed with the upper-cased provider name)
ENV_FIELD_MAP: Dict[str, str] = {
    "model": "MODEL",
    "base_url": "BASE_URL",
    "timeout_seconds": "TIMEOUT_SECONDS",
}

_file_cache: Optional[Dict[str, Any]] = None
_dotenv_done = False


def _parse_dotenv_line(line: str) -> Optional[tuple]:
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = line.split("=", 1)
    key = key.strip()
    if key.startswith("export "):
        key = key[len("export "):].strip()
    return (key, value.strip().strip('"').strip("'")) if key else None


def _load_dotenv_once() -> None:
    """Copy ``.env`` entries into ``os.environ``.

    A variable already set in the process wins unless it holds a placeholder.
    """
    global _dotenv_done
    if _dotenv_done:
        return
    _dotenv_done = True
    path = Path(os.getenv("DOTENV_FILE", ".env"))
    if not path.is_file():
        return
    for raw in path.read_text(encoding="utf-8").splitlines():
        parsed = _parse_dotenv_line(raw)
        if parsed is None:
            continue
        key, value = parsed
        current = os.environ.get(key)
        if current is None or is_placeholder(current):
            os.environ[key] = value


def _load_external_config() -> Dict[str, Any]:
    """Return (and cache) the ``METADESC_CONFIG_FILE`` contents.

    A missing path yields ``{}``; a present but malformed file raises
    ``ValueError`` so misconfiguration is not silently ignored.
    """
    global _file_cache
    if _file_cache is not None:
        return _file_cache
    path = os.getenv("METADESC_CONFIG_FILE")
    if not path or not Path(path).is_file():
        _file_cache = {}
        return _file_cache
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"METADESC_CONFIG_FILE {path!r} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"METADESC_CONFIG_FILE {path!r} must contain a JSON object")
    _file_cache = data
    return data


def _env_overrides(provider: str) -> Dict[str, Any]:
    prefix = provider.upper()
    out = {field: os.getenv(f"{prefix}_{suffix}") for field, suffix in ENV_FIELD_MAP.items()}
    out = {k: v for k, v in out.items() if v}
    key, _ = resolve_provider_key(provider)
    if key:
        out["api_key"] = key
    return out


def _normalize_timeout(cfg: Dict[str, Any]) -> None:
    """Coerce ``timeout_seconds`` to a positive float or drop it."""
    if "timeout_seconds" not in cfg:
        return
    try:
        value = float(cfg["timeout_seconds"])
    except (TypeError, ValueError):
        value = 0.0
    if value > 0:
        cfg["timeout_seconds"] = value
    else:
        del cfg["timeout_seconds"]


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged settings (``model``, ``base_url``, ``api_key``, ``timeout_seconds``)."""
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = dict(DEFAULTS.get(name, {}))
    section = _load_external_config().get(name)
    if isinstance(section, dict):
        cfg.update(section)
    cfg.update(_env_overrides(name))
    if overrides:
        cfg.update({k: v for k, v in overrides.items() if v is not None})
    _normalize_timeout(cfg)
    return cfg


def reset_config_cache() -> None:
    """Forget the cached config file and ``.env`` state (tests, long-lived CLIs)."""
    global _file_cache, _dotenv_done
    _file_cache = None
    _dotenv_done = False


__all__ = [
    "DEFAULTS",
    "get_provider_config",
    "reset_config_cache",
]
