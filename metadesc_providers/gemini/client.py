"""Gemini provider adapter built on AbstractProvider.

Wire format (Generative Language REST API)
------------------------------------------
- ``POST {base}models/{model}:generateContent`` with
  ``{contents:[{role:"user", parts:[{text}]}], generationConfig:{...}}``.
- Key is sent in ``x-goog-api-key``; no ``Authorization`` header.
- Reply text is the concatenation of ``candidates[0].content.parts[*].text``.
- ``GET {base}models`` returns ``{models:[{name:"models/<id>", displayName,
  supportedGenerationMethods:[...]}]}``; embedding-only models are dropped
  and the ``models/`` prefix is stripped from ids.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

from ..base.abstract_provider import AbstractProvider
from ..base.constants import AUTHORIZATION_HEADER
from ..base.models import ModelDescriptor
from ..config.defaults import (
    GEMINI_DEFAULT_BASE_URL,
    GEMINI_DEFAULT_MODEL,
    GEMINI_SUMMARY_MAX_TOKENS,
    SUMMARY_TEMPERATURE,
)

__all__ = ["GeminiProvider"]

API_KEY_HEADER = "x-goog-api-key"
MODEL_NAME_PREFIX = "models/"
GENERATE_METHOD = "generateContent"


def _strip_model_prefix(name: str) -> str:
    return name[len(MODEL_NAME_PREFIX):] if name.startswith(MODEL_NAME_PREFIX) else name


class GeminiProvider(AbstractProvider):
    """Gemini generateContent adapter."""

    NAME = "gemini"
    TITLE = "Google Gemini"
    DEFAULT_MODEL = GEMINI_DEFAULT_MODEL
    API_KEY_URL = "https://aistudio.google.com/app/apikey"
    API_BASE = GEMINI_DEFAULT_BASE_URL
    MODELS_FIELD = "models"

    def get_summary_endpoint(self) -> str:
        model_id = quote(_strip_model_prefix(self.model), safe="-._~")
        return f"models/{model_id}:{GENERATE_METHOD}"

    def prepare_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        out = {k: v for k, v in headers.items() if k.lower() != AUTHORIZATION_HEADER.lower()}
        out[API_KEY_HEADER] = self.api_key
        return out

    def build_summary_request_body(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "maxOutputTokens": GEMINI_SUMMARY_MAX_TOKENS,
                "temperature": SUMMARY_TEMPERATURE,
            },
        }

    def parse_summary(self, data: Any) -> str:
        candidates = data.get("candidates") if isinstance(data, dict) else None
        if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
            raise self.parse_error()
        content = candidates[0].get("content")
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            raise self.parse_error()
        texts = [p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
        if not texts:
            raise self.parse_error()
        return "".join(texts)

    def parse_model_list(self, data: Any) -> List[ModelDescriptor]:
        models: List[ModelDescriptor] = []
        for entry in self.model_entries(data):
            if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
                self.skip_model_entry(entry, "no string name")
                continue
            methods = entry.get("supportedGenerationMethods") or []
            if GENERATE_METHOD not in methods:
                continue
            models.append(
                ModelDescriptor.from_vendor(_strip_model_prefix(entry["name"]), entry.get("displayName"))
            )
        return models

    def extract_error_message(self, data: Optional[Any]) -> str:
        # {"error": {"code": 400, "message": "...", "status": "INVALID_ARGUMENT"}}
        if message := self.nested_error_message(data):
            return message
        err = data.get("error") if isinstance(data, dict) else None
        if isinstance(err, dict) and isinstance(err.get("status"), str):
            return err["status"]
        return ""
