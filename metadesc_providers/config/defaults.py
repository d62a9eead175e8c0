"""metadesc_providers.config.defaults
==================================

Central place for small, stable default values used across the package and
the debugging CLI. These defaults can be overridden via environment variables
or an external configuration file.

This module intentionally avoids importing from other provider packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- CLI Defaults ----
# Default provider selected by the debugging CLI when none is specified.
PROVIDER_CLI_DEFAULT_PROVIDER = "openai"

# ---- Provider-specific defaults ----
OPENAI_DEFAULT_MODEL = "gpt-3.5-turbo"
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1/"

ANTHROPIC_DEFAULT_MODEL = "claude-3-sonnet-20240229"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/v1/"
ANTHROPIC_API_VERSION = "2023-06-01"

GEMINI_DEFAULT_MODEL = "gemini-2.5-pro"
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/"

DEEPSEEK_DEFAULT_MODEL = "deepseek-chat"
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com/v1/"

XAI_DEFAULT_MODEL = "grok-4"
XAI_DEFAULT_BASE_URL = "https://api.x.ai/v1/"

# ---- Generation parameters ----
SUMMARY_TEMPERATURE = 0.6
OPENAI_SUMMARY_MAX_TOKENS = 70
# Anthropic rejects very small budgets for some models; 70 truncates too often.
ANTHROPIC_SUMMARY_MAX_TOKENS = 150
GEMINI_SUMMARY_MAX_TOKENS = 150

# ---- Prompt builder ----
META_DESCRIPTION_MAX_LENGTH = 160
PROMPT_SOURCE_MAX_CHARS = 4000


__all__ = [
    "PROVIDER_CLI_DEFAULT_PROVIDER",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_API_VERSION",
    "GEMINI_DEFAULT_MODEL",
    "GEMINI_DEFAULT_BASE_URL",
    "DEEPSEEK_DEFAULT_MODEL",
    "DEEPSEEK_DEFAULT_BASE_URL",
    "XAI_DEFAULT_MODEL",
    "XAI_DEFAULT_BASE_URL",
    "SUMMARY_TEMPERATURE",
    "OPENAI_SUMMARY_MAX_TOKENS",
    "ANTHROPIC_SUMMARY_MAX_TOKENS",
    "GEMINI_SUMMARY_MAX_TOKENS",
    "META_DESCRIPTION_MAX_LENGTH",
    "PROMPT_SOURCE_MAX_CHARS",
]
