"""Small, dependency-free helpers shared by the provider layer."""

from .redaction import redact_headers, redact_secret

__all__ = ["redact_headers", "redact_secret"]
