"""ProviderDescriptor DTO (single-class module).

Static, per-instance metadata an adapter advertises to routing code: its
name, capability flags, context window, and per-million-token pricing.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .usage import Pricing


@dataclass(frozen=True)
class ProviderDescriptor:
    """Capability and pricing metadata for one adapter instance.

    Attributes:
        name: Adapter identifier (``"fireworks"``, ``"claude"``, ``"gemini"``).
        supports_tool_calling: Whether tool definitions are forwarded.
        supports_streaming: Advertised streaming capability.
        max_context_tokens: Maximum context window in tokens.
        cost_per_1m_tokens: Pricing used for both exact and estimated cost.
    """

    name: str
    supports_tool_calling: bool
    supports_streaming: bool
    max_context_tokens: int
    cost_per_1m_tokens: Pricing

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "supports_tool_calling": self.supports_tool_calling,
            "supports_streaming": self.supports_streaming,
            "max_context_tokens": self.max_context_tokens,
            "cost_per_1m_tokens": self.cost_per_1m_tokens.to_dict(),
        }


__all__ = ["ProviderDescriptor"]
