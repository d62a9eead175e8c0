"""Typed parameter object for provider adapter initialization.

Purpose
-------
Capture the common initialization parameters used across adapters so the
factory and CLI can pass one validated object instead of long keyword lists.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_dump()`` convenience.

Failure modes & side effects
----------------------------
- Pure data container: no I/O. Pydantic raises ``ValidationError`` when
  inputs have the wrong type or ``timeout_seconds`` is not positive.
"""
from __future__ import annotations

from typing import Mapping, Optional

from pydantic import BaseModel, Field


class AdapterParams(BaseModel):
    """Common provider adapter initialization parameters.

    Attributes
    ----------
    provider:
        Canonical provider name. Optional; the factory receives the name
        separately and drops this field before constructing the adapter.
    model:
        Model identifier to select; defaults to the provider's default model.
    api_key:
        API key for the vendor. Prefer environment/config resolution; this
        field exists for explicit wiring.
    base_url:
        Optional override for the vendor API root (proxies, gateways).
    timeout_seconds:
        Per-request timeout; defaults to the central timeout config.
    headers:
        Static extra headers added to every request before vendor overrides.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    api_key: Optional[str] = Field(default=None, repr=False)
    base_url: Optional[str] = None
    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    headers: Mapping[str, str] = Field(default_factory=dict)


__all__ = ["AdapterParams"]
