"""
ModelDescriptor DTO for provider model listings.

A normalized ``{id, displayName}`` pair. ``id`` is the exact value echoed back
to the vendor as a model selector; ``display_name`` is the human label and falls
back to ``id`` when the vendor supplies none.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ModelDescriptor:
    """A single selectable vendor model.

    Attributes:
        id: Vendor model identifier, sent back verbatim in future requests.
        display_name: Human-friendly name.
    """

    id: str
    display_name: str

    @classmethod
    def from_vendor(cls, model_id: str, display_name: Optional[str] = None) -> "ModelDescriptor":
        """Build a descriptor, defaulting the label to the id when missing/blank."""
        label = display_name if isinstance(display_name, str) and display_name.strip() else model_id
        return cls(id=model_id, display_name=label)

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire/JSON representation (``displayName`` key)."""
        return {"id": self.id, "displayName": self.display_name}


__all__ = ["ModelDescriptor"]
