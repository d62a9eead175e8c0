"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``metadesc_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.transport_error import TransportError
from .errors_parts.classification import (
    classify_exception,
    is_retryable_status,
    status_category,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "TransportError",
    "classify_exception",
    "is_retryable_status",
    "status_category",
]
