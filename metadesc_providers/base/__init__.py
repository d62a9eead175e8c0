"""
Providers Base Package

Exports provider-agnostic contracts, DTOs, the shared request engine and the
provider factory used by the vendor adapters and the debugging CLI.

- Interfaces: normalized provider boundary (``ProviderInterface``)
- Models (DTOs): result values and model descriptors
- Engine: ``AbstractProvider`` template-method implementation
- Factory: lazy creation of provider adapters by canonical name
"""

from .abstract_provider import AbstractProvider
from .errors import ErrorCode, ProviderError, TransportError
from .factory import ProviderFactory, UnknownProviderError, create_provider
from .interfaces import (
    ModelListingProvider,
    ProviderIdentity,
    ProviderInterface,
    SummaryProvider,
)
from .models import HttpExchange, ModelDescriptor, ModelListResult, SummaryResult
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
    "ModelDescriptor",
    "SummaryResult",
    "ModelListResult",
    "HttpExchange",
    # Interfaces
    "ProviderInterface",
    "ProviderIdentity",
    "ModelListingProvider",
    "SummaryProvider",
    # Engine
    "AbstractProvider",
    # Errors
    "ErrorCode",
    "ProviderError",
    "TransportError",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
    "create_provider",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
]
