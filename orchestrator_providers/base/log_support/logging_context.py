"""Structured logging context carried by adapter log events.

:class:`LogContext` holds the fields every adapter event shares (adapter
name, model identifier) plus an ``extra`` mapping for per-adapter details
such as the Fireworks variant. ``to_dict`` flattens ``extra`` and drops
``None`` values so payloads stay compact.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for provider logging events."""

    provider: Optional[str] = None
    model: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"provider": self.provider, "model": self.model}
        data.update(self.extra or {})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
