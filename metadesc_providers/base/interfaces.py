"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports Protocols split into single-class modules under
``metadesc_providers.base.interfaces_parts`` while keeping imports stable.
"""

from __future__ import annotations

from .interfaces_parts import (
    ModelListingProvider,
    ProviderIdentity,
    ProviderInterface,
    SummaryProvider,
)

__all__ = [
    "ProviderInterface",
    "ProviderIdentity",
    "ModelListingProvider",
    "SummaryProvider",
]
