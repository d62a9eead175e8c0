"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration returned with every failed summary or
model-list request. Values are lowercase snake_case and are considered a stable
public contract for logging and calling code.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes, one per terminal failure state."""

    VALIDATION = "validation"
    TRANSPORT = "transport"
    HTTP = "http"
    DECODE = "decode"
    PARSE = "parse"


__all__ = ["ErrorCode"]
