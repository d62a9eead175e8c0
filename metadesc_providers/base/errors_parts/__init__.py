"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `metadesc_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .transport_error import TransportError
from .classification import classify_exception, is_retryable_status, status_category

__all__ = [
    "ErrorCode",
    "ProviderError",
    "TransportError",
    "classify_exception",
    "is_retryable_status",
    "status_category",
]
