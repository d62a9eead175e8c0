"""Anthropic provider adapter built on AbstractProvider.

Wire format
-----------
- ``POST {base}messages`` with the chat-style body and ``max_tokens`` 150.
- Auth uses ``x-api-key`` plus a pinned ``anthropic-version`` header; the
  default ``Authorization`` header must not be sent.
- The reply ``content`` is an ordered list of typed blocks; only a leading
  ``{"type": "text", "text": ...}`` block is accepted.
- ``GET {base}models`` returns ``{data:[{id, display_name}]}`` and is parsed
  live; no curated list is shipped.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.abstract_provider import AbstractProvider
from ..base.constants import AUTHORIZATION_HEADER
from ..base.models import ModelDescriptor
from ..config.defaults import (
    ANTHROPIC_API_VERSION,
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MODEL,
    ANTHROPIC_SUMMARY_MAX_TOKENS,
    SUMMARY_TEMPERATURE,
)

__all__ = ["AnthropicProvider"]

API_KEY_HEADER = "x-api-key"
VERSION_HEADER = "anthropic-version"


class AnthropicProvider(AbstractProvider):
    """Anthropic messages adapter."""

    NAME = "anthropic"
    TITLE = "Anthropic"
    DEFAULT_MODEL = ANTHROPIC_DEFAULT_MODEL
    API_KEY_URL = "https://console.anthropic.com/settings/keys"
    API_BASE = ANTHROPIC_DEFAULT_BASE_URL

    def get_summary_endpoint(self) -> str:
        return "messages"

    def prepare_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        out = {k: v for k, v in headers.items() if k.lower() != AUTHORIZATION_HEADER.lower()}
        out[VERSION_HEADER] = ANTHROPIC_API_VERSION
        out[API_KEY_HEADER] = self.api_key
        return out

    def build_summary_request_body(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": ANTHROPIC_SUMMARY_MAX_TOKENS,
            "temperature": SUMMARY_TEMPERATURE,
        }

    def parse_summary(self, data: Any) -> str:
        content = data.get("content") if isinstance(data, dict) else None
        if not isinstance(content, list) or not content:
            raise self.parse_error()
        block = content[0]
        if not isinstance(block, dict) or block.get("type") != "text":
            raise self.parse_error("first content block is not text")
        text = block.get("text")
        if not isinstance(text, str):
            raise self.parse_error()
        return text

    def parse_model_list(self, data: Any) -> List[ModelDescriptor]:
        models: List[ModelDescriptor] = []
        for entry in self.model_entries(data):
            if not isinstance(entry, dict) or not isinstance(entry.get("id"), str):
                self.skip_model_entry(entry, "no string id")
                continue
            models.append(ModelDescriptor.from_vendor(entry["id"], entry.get("display_name")))
        return models

    def extract_error_message(self, data: Optional[Any]) -> str:
        # {"type": "error", "error": {"type": "...", "message": "..."}}
        if message := self.nested_error_message(data):
            return message
        err = data.get("error") if isinstance(data, dict) else None
        if isinstance(err, dict) and isinstance(err.get("type"), str):
            return err["type"]
        return ""
