"""Context attached to every provider log event.

Identifies which provider, model and operation (``summary`` or ``models``)
an event belongs to. There is no field for credentials; ``extra`` values are
caller-controlled and must not contain them either.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    provider: Optional[str] = None
    model: Optional[str] = None
    operation: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to event fields, dropping unset values."""
        fields: Dict[str, Any] = {"provider": self.provider, "model": self.model, "operation": self.operation}
        fields.update(self.extra)
        return {k: v for k, v in fields.items() if v is not None}


__all__ = ["LogContext"]
