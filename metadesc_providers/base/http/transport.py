"""HTTP transport contract and the default httpx implementation.

Providers never open sockets themselves; they hand a fully built request to an
object satisfying :class:`HttpTransport` and receive an :class:`HttpResponse`.
Tests substitute a fake transport, and hosting applications may plug in their
own (for example one that routes through a corporate proxy).

Failure modes:
    - Connection, TLS, DNS and timeout failures raise :class:`TransportError`.
    - Non-2xx statuses are *not* errors at this layer; they are returned as-is
      so the provider can extract the vendor error message.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

import httpx

from ..errors import TransportError
from .client import get_httpx_client
from .response import HttpResponse


@runtime_checkable
class HttpTransport(Protocol):
    """Narrow interface consumed by providers for network I/O."""

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        json_body: Optional[Any] = None,
        timeout: float,
    ) -> HttpResponse:
        """Perform one HTTP exchange and return its raw response."""
        ...


class HttpxTransport:
    """Transport backed by a pooled (or injected) ``httpx.Client``."""

    def __init__(self, client: Optional[httpx.Client] = None, *, purpose: str = "providers") -> None:
        self._client = client
        self._purpose = purpose

    def _get_client(self) -> httpx.Client:
        return self._client if self._client is not None else get_httpx_client(None, self._purpose)

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        json_body: Optional[Any] = None,
        timeout: float,
    ) -> HttpResponse:
        try:
            resp = self._get_client().request(
                method,
                url,
                headers=dict(headers),
                json=json_body,
                timeout=timeout,
            )
        except httpx.TimeoutException as exc:
            raise TransportError(f"request timed out after {timeout}s", timeout=True) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"{type(exc).__name__}: {exc}") from exc
        return HttpResponse(
            status_code=resp.status_code,
            body=resp.content,
            headers=dict(resp.headers),
        )


__all__ = ["HttpTransport", "HttpxTransport"]
