"""SummaryProvider Protocol (single-class module)."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..models import SummaryResult


@runtime_checkable
class SummaryProvider(Protocol):
    """Interface producing a meta-description candidate from a prompt."""

    def generate_summary(
        self,
        prompt: str,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
    ) -> SummaryResult:
        """Generate a summary; ``api_key``/``model`` override instance config
        for this call only.

        Failure handling: never raise for vendor, transport or validation
        failures; return them inside ``SummaryResult.error``.
        """
        ...
