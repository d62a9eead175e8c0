"""Credential environment variables per provider.

``ENV_MAP`` names the canonical ``<PROVIDER>_API_KEY`` variable; providers
that also honour a second name list every accepted name, canonical first, in
``ENV_ALIASES``. Values that look like template placeholders (``your-key``,
``changeme`` ...) are treated as unset so a copied ``.env.example`` never
produces a request with a fake key.

Lookups never raise: unknown providers resolve to nothing.
"""

from __future__ import annotations

import os
from typing import Dict, List, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
    "xai": "XAI_API_KEY",
}

ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    # Google AI Studio documents GOOGLE_API_KEY
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
}

_PLACEHOLDER_MARKERS = ("placeholder", "changeme", "example")


def is_placeholder(val: Optional[str]) -> bool:
    """Return True when ``val`` looks like template text rather than a real key."""
    if val is None:
        return False
    lowered = str(val).strip().lower()
    return lowered.startswith("your-") or any(marker in lowered for marker in _PLACEHOLDER_MARKERS)


def get_env_var_name(provider: str) -> Optional[str]:
    return ENV_MAP.get((provider or "").lower())


def env_var_hint(provider: str) -> List[str]:
    """Accepted variable names for ``provider``, canonical first (used in CLI hints)."""
    name = (provider or "").lower()
    names = list(ENV_ALIASES.get(name, ()))
    canonical = ENV_MAP.get(name)
    if canonical and canonical not in names:
        names.insert(0, canonical)
    return names


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, variable)`` for the first usable key, else ``(None, None)``."""
    for var in env_var_hint(provider):
        value = os.environ.get(var)
        if value and not is_placeholder(value):
            return value, var
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_name",
    "env_var_hint",
    "resolve_provider_key",
]
