"""Credential scrubbing for messages, headers and log payloads.

Error text can echo request details back from a vendor (some APIs quote the
offending key in 401 responses), and httpx exception strings may include
request data. Everything surfaced to callers passes through ``redact_secret``.
"""
from __future__ import annotations

import re
from typing import Dict, Iterable, Mapping, Optional

from ..constants import REDACTED, SENSITIVE_HEADERS

# Secrets shorter than this are only scrubbed where they stand as a whole token
_MIN_SUBSTRING_LEN = 4
_TOKEN_CHARS = r"A-Za-z0-9_\-"


def redact_secret(text: str, secrets: Optional[Iterable[Optional[str]]] = None) -> str:
    """Return ``text`` with every occurrence of each secret replaced.

    A secret is also matched by its last eight characters, which is how several
    vendors echo keys back (``"Incorrect API key provided: sk-...abcd1234"``).
    Very short secrets are matched on token boundaries so they do not eat
    fragments of ordinary words.
    """
    if not text or not secrets:
        return text
    out = text
    for secret in secrets:
        if not secret:
            continue
        if len(secret) < _MIN_SUBSTRING_LEN:
            pattern = rf"(?<![{_TOKEN_CHARS}]){re.escape(secret)}(?![{_TOKEN_CHARS}])"
            out = re.sub(pattern, REDACTED, out)
            continue
        out = out.replace(secret, REDACTED)
        tail = secret[-8:]
        if len(secret) > 8 and tail in out:
            out = out.replace(tail, REDACTED)
    return out


def redact_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """Copy ``headers`` with credential-bearing values masked."""
    return {k: (REDACTED if k.lower() in SENSITIVE_HEADERS else v) for k, v in headers.items()}


__all__ = ["redact_secret", "redact_headers"]
