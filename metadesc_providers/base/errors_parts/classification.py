"""
Error classification helpers mapping exceptions and HTTP statuses.

``classify_exception`` maps anything raised while building, sending or parsing a
request to one of the normalized :class:`ErrorCode` values. ``status_category``
gives a coarse label for non-2xx statuses used in log events, and
``is_retryable_status`` feeds the ``ProviderError.retryable`` hint.
"""
from __future__ import annotations

import asyncio
import json
from typing import Dict

import httpx
from pydantic import ValidationError

from .error_code import ErrorCode
from .provider_error import ProviderError
from .transport_error import TransportError


_HTTP_STATUS_CATEGORY: Dict[int, str] = {
    400: "invalid_request",
    401: "auth",
    403: "auth",
    404: "not_found",
    408: "timeout",
    409: "conflict",
    413: "invalid_request",
    422: "invalid_request",
    429: "rate_limit",
    500: "server_error",
    502: "transient",
    503: "unavailable",
    504: "timeout",
    529: "overloaded",
}

_RETRYABLE_STATUSES = frozenset({408, 429, 500, 502, 503, 504, 529})


def status_category(status: int) -> str:
    """Return a coarse label for an HTTP status (``"unknown"`` when unmapped)."""
    if status in _HTTP_STATUS_CATEGORY:
        return _HTTP_STATUS_CATEGORY[status]
    if 500 <= status < 600:
        return "server_error"
    if 400 <= status < 500:
        return "client_error"
    return "unknown"


def is_retryable_status(status: int) -> bool:
    """Return True when a retry of the same request may succeed."""
    return status in _RETRYABLE_STATUSES


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Transport failures (``TransportError``, httpx errors, timeouts, OS errors).
        3. JSON / text decoding failures.
        4. Request validation failures (pydantic).
        5. ``PARSE`` fallback: any other hook failure means the vendor payload
           did not have the expected shape.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TransportError, httpx.HTTPError, TimeoutError, asyncio.TimeoutError, OSError)):
        return ErrorCode.TRANSPORT
    if isinstance(exc, (json.JSONDecodeError, UnicodeDecodeError)):
        return ErrorCode.DECODE
    if isinstance(exc, ValidationError):
        return ErrorCode.VALIDATION
    return ErrorCode.PARSE


__all__ = [
    "classify_exception",
    "is_retryable_status",
    "status_category",
    "_HTTP_STATUS_CATEGORY",
]
