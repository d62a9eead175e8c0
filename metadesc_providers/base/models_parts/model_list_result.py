"""
ModelListResult: outcome of a model-list request.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..errors import ProviderError
from .model_descriptor import ModelDescriptor


@dataclass(frozen=True)
class ModelListResult:
    """Available models for a provider, or the reason they could not be listed."""

    provider: str
    models: List[ModelDescriptor] = field(default_factory=list)
    error: Optional[ProviderError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[ModelDescriptor]:
        """Return the model list or raise the carried :class:`ProviderError`."""
        if self.error is not None:
            raise self.error
        return list(self.models)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "provider": self.provider,
            "models": [m.to_dict() for m in self.models],
            "error": self.error.to_dict() if self.error else None,
        }


__all__ = ["ModelListResult"]
