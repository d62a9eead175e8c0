"""
HttpExchange: one planned vendor HTTP call.

Built by the abstract provider before the request is sent. Never persisted.
``redacted()`` returns a copy safe to print or log.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from ..utils.redaction import redact_headers


@dataclass(frozen=True)
class HttpExchange:
    """Ephemeral record of an outgoing HTTP request."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Any] = None

    def redacted(self) -> "HttpExchange":
        """Return a copy whose credential headers are masked."""
        return replace(self, headers=redact_headers(self.headers))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "headers": dict(self.headers),
            "body": self.body,
        }


__all__ = ["HttpExchange"]
