"""
Provider-agnostic DTOs for the providers layer.

This module re-exports the single-class modules under
``metadesc_providers.base.models_parts`` to keep import paths stable.
"""

from __future__ import annotations

from .models_parts import HttpExchange, ModelDescriptor, ModelListResult, SummaryResult

__all__ = [
    "ModelDescriptor",
    "SummaryResult",
    "ModelListResult",
    "HttpExchange",
]
