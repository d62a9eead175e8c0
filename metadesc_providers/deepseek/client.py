"""DeepSeek provider adapter.

DeepSeek serves an OpenAI-compatible chat-completions API, so the adapter
reuses :class:`OpenAIProvider` and only swaps identity and model filter.
"""

from __future__ import annotations

from ..config.defaults import DEEPSEEK_DEFAULT_BASE_URL, DEEPSEEK_DEFAULT_MODEL
from ..openai.client import OpenAIProvider

__all__ = ["DeepseekProvider"]


class DeepseekProvider(OpenAIProvider):
    NAME = "deepseek"
    TITLE = "DeepSeek"
    DEFAULT_MODEL = DEEPSEEK_DEFAULT_MODEL
    API_KEY_URL = "https://platform.deepseek.com/api_keys"
    API_BASE = DEEPSEEK_DEFAULT_BASE_URL

    MODEL_PREFIXES = ("deepseek-",)
