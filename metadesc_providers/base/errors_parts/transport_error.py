"""Transport-level failure raised by HTTP transports.

Transports raise this for connection, DNS, TLS and timeout failures. The
abstract provider converts it into ``ProviderError(code=ErrorCode.TRANSPORT)``.
"""
from __future__ import annotations


class TransportError(Exception):
    """Raised when an HTTP exchange could not complete."""

    def __init__(self, message: str, *, timeout: bool = False) -> None:
        super().__init__(message)
        self.timeout = timeout


__all__ = ["TransportError"]
