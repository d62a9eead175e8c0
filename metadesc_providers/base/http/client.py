"""Shared ``httpx.Client`` pool used by :class:`HttpxTransport`.

One client per ``(base_url, purpose)`` key keeps connections alive across
summary and model-list calls. Adapters pass their provider name as
``purpose`` so vendors never share a connection pool.

The pool default timeout comes from ``get_timeout_config()``; transports
always pass an explicit per-request timeout on top of it. Every pooled client
is closed at interpreter exit, and tests call :func:`close_all_clients`
directly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..logging import get_logger
from ..timeouts import get_timeout_config

_PoolKey = Tuple[Optional[str], str]

_POOL: Dict[_PoolKey, httpx.Client] = {}
_POOL_LOCK = threading.RLock()
_logger = get_logger("metadesc_providers.http")


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return the pooled client for ``(base_url, purpose)``, creating it once.

    ``base_url=None`` yields a client without a base, so callers must use
    absolute URLs (the transport always does).
    """
    key: _PoolKey = (base_url, purpose)
    with _POOL_LOCK:
        client = _POOL.get(key)
        if client is None or client.is_closed:
            kwargs = {"timeout": get_timeout_config().http_timeout_seconds}
            if base_url:
                kwargs["base_url"] = base_url
            client = httpx.Client(**kwargs)
            _POOL[key] = client
        return client


def close_all_clients() -> None:
    """Close every pooled client and empty the pool."""
    with _POOL_LOCK:
        clients = list(_POOL.values())
        _POOL.clear()
    for client in clients:
        try:
            client.close()
        except (httpx.HTTPError, OSError, RuntimeError) as exc:
            _logger.debug("closing pooled client failed: %s", type(exc).__name__)


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
