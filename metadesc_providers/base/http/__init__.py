"""HTTP utilities package for providers.

Exposes the transport contract, the httpx-backed transport, and the pooled
client helpers it relies on.
"""

from .client import close_all_clients, get_httpx_client
from .response import HttpResponse
from .transport import HttpTransport, HttpxTransport

__all__ = [
    "HttpResponse",
    "HttpTransport",
    "HttpxTransport",
    "get_httpx_client",
    "close_all_clients",
]
