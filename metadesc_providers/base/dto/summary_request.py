"""
Pydantic DTO validating summary generation input.

Purpose
-------
Reject blank prompts before any request is built so a validation failure never
costs a network round trip.

External dependencies: Pydantic only.

Fallback semantics: validation either succeeds or raises
``pydantic.ValidationError``; the abstract provider converts that into
``ProviderError(code=ErrorCode.VALIDATION)``.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class SummaryRequestDTO(BaseModel):
    """The only caller-supplied input to summary generation.

    The prompt is kept exactly as given (it is not stripped); only its
    emptiness is checked.
    """

    prompt: str

    @field_validator("prompt")
    @classmethod
    def _prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt must be a non-empty string")
        return value


__all__ = ["SummaryRequestDTO"]
