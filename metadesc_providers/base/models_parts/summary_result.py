"""
SummaryResult: outcome of a summary generation request.

Exactly one of ``text`` or ``error`` is set. Returning the error as a value
keeps vendor failures from escaping as exceptions into the hosting
application; callers that prefer exceptions use :meth:`unwrap`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..errors import ProviderError


@dataclass(frozen=True)
class SummaryResult:
    """Generated summary text or a typed provider error.

    Attributes:
        provider: Provider key that handled the request.
        model: Model identifier used for the request.
        text: Trimmed, non-empty summary on success.
        error: Structured failure when the request did not succeed.
        latency_ms: Wall time spent handling the request.
    """

    provider: str
    model: Optional[str] = None
    text: Optional[str] = None
    error: Optional[ProviderError] = None
    latency_ms: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.text is not None

    def unwrap(self) -> str:
        """Return the summary text or raise the carried :class:`ProviderError`."""
        if self.error is not None:
            raise self.error
        if self.text is None:  # pragma: no cover - constructor misuse
            raise ValueError("SummaryResult carries neither text nor error")
        return self.text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "provider": self.provider,
            "model": self.model,
            "text": self.text,
            "error": self.error.to_dict() if self.error else None,
            "latency_ms": self.latency_ms,
        }


__all__ = ["SummaryResult"]
