"""Typed parameter object for provider adapter initialization.

Purpose
-------
Capture the construction parameters shared by the vendor adapters in one
validated DTO so factory call sites do not pass long keyword lists.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_dump()``.

Failure modes & side effects
----------------------------
- Pure data container: no I/O. Pydantic raises ``ValidationError`` for
  wrongly typed input (e.g. a non-positive ``timeout_seconds``).

Notes
-----
- ``variant`` only applies to the Fireworks adapter; ``model`` only to the
  Claude and Gemini adapters. The factory drops keys an adapter does not take.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AdapterParams(BaseModel):
    """Common provider adapter initialization parameters.

    Attributes
    ----------
    api_key:
        API key. When omitted the factory resolves it from configuration.
    model:
        Model identifier override (Claude, Gemini).
    variant:
        Fireworks model variant (``quick``, ``coding``, ``reasoning``).
    base_url:
        Optional API base URL override (proxies, gateways).
    timeout_seconds:
        Request timeout for the default ``httpx`` transport.
    """

    model_config = ConfigDict(extra="forbid")

    api_key: Optional[str] = None
    model: Optional[str] = None
    variant: Optional[str] = None
    base_url: Optional[str] = None
    timeout_seconds: Optional[float] = Field(default=None, gt=0)


__all__ = ["AdapterParams"]
