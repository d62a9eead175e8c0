"""ModelListingProvider Protocol (single-class module)."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..models import ModelListResult


@runtime_checkable
class ModelListingProvider(Protocol):
    """Interface to query a vendor for selectable models."""

    def fetch_models(self, api_key: Optional[str] = None) -> ModelListResult:
        """Return available models, or an error if the call or parsing fails.

        Implementations must not raise for vendor failures.
        """
        ...
