"""ProviderIdentity Protocol (single-class module).

Static, informational metadata every provider exposes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProviderIdentity(Protocol):
    """Identity of a provider type; values never change per type."""

    def get_name(self) -> str:
        """Stable unique lowercase slug, e.g. ``"openai"``. Used as a config key."""
        ...

    def get_title(self) -> str:
        """Display label."""
        ...

    def get_default_model(self) -> str:
        """Model id used when the caller selects none."""
        ...

    def get_url_api_key(self) -> str:
        """Where users obtain credentials (informational only)."""
        ...
