"""OpenAI provider adapter built on AbstractProvider.

Wire format
-----------
- ``POST {base}chat/completions`` with
  ``{model, messages:[{role:"user", content}], max_tokens, temperature}``.
- Success text at ``choices[0].message.content``.
- ``GET {base}models`` returns ``{data:[{id, ...}]}``; only chat generation
  families (``MODEL_PREFIXES``) are kept since the endpoint also lists
  embeddings, audio and moderation models.
- Errors arrive as ``{"error": {"message": ..., "type": ...}}``.

OpenAI-compatible vendors (DeepSeek, xAI) subclass this adapter and only
change identity constants and ``MODEL_PREFIXES``.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional, Tuple

from ..base.abstract_provider import AbstractProvider
from ..base.models import ModelDescriptor
from ..config.defaults import (
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_MODEL,
    OPENAI_SUMMARY_MAX_TOKENS,
    SUMMARY_TEMPERATURE,
)

__all__ = ["OpenAIProvider"]


class OpenAIProvider(AbstractProvider):
    """OpenAI chat-completions adapter."""

    NAME = "openai"
    TITLE = "OpenAI"
    DEFAULT_MODEL = OPENAI_DEFAULT_MODEL
    API_KEY_URL = "https://platform.openai.com"
    API_BASE = OPENAI_DEFAULT_BASE_URL

    MODEL_PREFIXES: ClassVar[Tuple[str, ...]] = ("gpt-3.5", "gpt-4")
    MAX_TOKENS: ClassVar[int] = OPENAI_SUMMARY_MAX_TOKENS

    def get_summary_endpoint(self) -> str:
        return "chat/completions"

    def build_summary_request_body(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.MAX_TOKENS,
            "temperature": SUMMARY_TEMPERATURE,
        }

    def parse_summary(self, data: Any) -> str:
        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            raise self.parse_error()
        message = choices[0].get("message")
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise self.parse_error()
        return content

    def parse_model_list(self, data: Any) -> List[ModelDescriptor]:
        models: List[ModelDescriptor] = []
        for entry in self.model_entries(data):
            model_id = entry.get("id") if isinstance(entry, dict) else None
            if not isinstance(model_id, str):
                self.skip_model_entry(entry, "no string id")
                continue
            if model_id.startswith(self.MODEL_PREFIXES):
                models.append(ModelDescriptor.from_vendor(model_id))
        return models

    def extract_error_message(self, data: Optional[Any]) -> str:
        return self.nested_error_message(data)
