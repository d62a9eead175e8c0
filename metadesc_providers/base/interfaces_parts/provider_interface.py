"""ProviderInterface Protocol (single-class module).

The full capability contract; calling code depends on this and never on a
concrete vendor class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .model_listing_provider import ModelListingProvider
from .provider_identity import ProviderIdentity
from .summary_provider import SummaryProvider


@runtime_checkable
class ProviderInterface(ProviderIdentity, ModelListingProvider, SummaryProvider, Protocol):
    """Identity + model listing + summary generation."""
