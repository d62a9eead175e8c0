"""Base shared constants for provider adapters.

Central location to avoid scattering magic strings, header names, and the
message templates surfaced to callers. Templates are opaque strings formatted
with ``str.format``; hosting environments may swap them for localized copies.

Security
--------
This module contains only generic sentinel strings and numeric defaults.
There are no credentials or tokens embedded.

# pragma: allowlist secret
"""
from __future__ import annotations

# Default HTTP timeout (seconds) when neither config nor env overrides it
DEFAULT_HTTP_TIMEOUT = 30.0

# Header names
CONTENT_TYPE_HEADER = "Content-Type"
AUTHORIZATION_HEADER = "Authorization"
JSON_CONTENT_TYPE = "application/json"

# Headers whose values must never be displayed or logged verbatim
SENSITIVE_HEADERS = frozenset({"authorization", "x-api-key", "x-goog-api-key", "api-key"})

# Replacement used when a secret is scrubbed from text
REDACTED = "[redacted]"

# Raw error bodies longer than this are truncated before being surfaced
MAX_ERROR_BODY_CHARS = 300

# ---- Message templates ----
MSG_EMPTY_PROMPT = "Prompt must not be empty."
MSG_MISSING_API_KEY = "{provider} API key is not configured."  # pragma: allowlist secret
MSG_TRANSPORT = "Could not reach the {provider} API: {detail}"
MSG_HTTP_FALLBACK = "{provider} API request failed with HTTP status {status}."
MSG_DECODE = "{provider} returned a response that is not valid JSON."
MSG_PARSE_SUMMARY = "{provider} response missing expected summary data or invalid format."
MSG_EMPTY_SUMMARY = "{provider} returned an empty summary."
MSG_PARSE_MODELS = 'Unable to parse model list from {provider}: "{field}" array missing.'
MSG_BUILD_REQUEST = "Unable to build the {provider} request: {detail}"

__all__ = [
    "DEFAULT_HTTP_TIMEOUT",
    "CONTENT_TYPE_HEADER",
    "AUTHORIZATION_HEADER",
    "JSON_CONTENT_TYPE",
    "SENSITIVE_HEADERS",
    "REDACTED",
    "MAX_ERROR_BODY_CHARS",
    "MSG_EMPTY_PROMPT",
    "MSG_MISSING_API_KEY",
    "MSG_TRANSPORT",
    "MSG_HTTP_FALLBACK",
    "MSG_DECODE",
    "MSG_PARSE_SUMMARY",
    "MSG_EMPTY_SUMMARY",
    "MSG_PARSE_MODELS",
    "MSG_BUILD_REQUEST",
]
