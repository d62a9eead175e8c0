"""xAI (Grok) provider adapter.

The xAI REST API is OpenAI-compatible; only identity constants and the
model-family filter differ from :class:`OpenAIProvider`.
"""

from __future__ import annotations

from ..config.defaults import XAI_DEFAULT_BASE_URL, XAI_DEFAULT_MODEL
from ..openai.client import OpenAIProvider

__all__ = ["XAIProvider"]


class XAIProvider(OpenAIProvider):
    NAME = "xai"
    TITLE = "xAI"
    DEFAULT_MODEL = XAI_DEFAULT_MODEL
    API_KEY_URL = "https://console.x.ai"
    API_BASE = XAI_DEFAULT_BASE_URL

    MODEL_PREFIXES = ("grok-",)
