"""Model DTO parts package.

Exposes one-class-per-file DTOs for the provider layer. Prefer importing from
``metadesc_providers.base.models`` for the stable surface.
"""

from .model_descriptor import ModelDescriptor
from .summary_result import SummaryResult
from .model_list_result import ModelListResult
from .http_exchange import HttpExchange

__all__ = ["ModelDescriptor", "SummaryResult", "ModelListResult", "HttpExchange"]
