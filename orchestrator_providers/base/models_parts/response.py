"""
Response DTO returned by every provider adapter.

The response is the normalized view of a single vendor completion: the text
content, any tool calls the model requested, usage and cost, wall-clock
latency, and the identity of the model and adapter that produced it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .tool_call import ToolCall
from .usage import Usage


@dataclass(frozen=True)
class Response:
    """Normalized completion result.

    Attributes:
        content: Concatenated text output; may be empty when the model only
            requested tool calls.
        tool_calls: Requested tool invocations in vendor order, or ``None``
            when the model requested none. An empty sequence is normalized to
            ``None`` so callers only need one absence check.
        usage: Vendor-reported token counts and exact cost.
        latency: Wall-clock milliseconds from just before transmission to
            just after the response body was decoded.
        model: Model identifier used for the call.
        provider: Name of the adapter that produced the response.
    """

    content: str
    tool_calls: Optional[Tuple[ToolCall, ...]]
    usage: Usage
    latency: int
    model: str
    provider: str

    def __post_init__(self) -> None:
        calls = tuple(self.tool_calls) if self.tool_calls else None
        object.__setattr__(self, "tool_calls", calls)
        if self.latency < 0:
            raise ValueError("latency must be non-negative")

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the response."""
        return {
            "content": self.content,
            "tool_calls": [c.to_dict() for c in self.tool_calls] if self.tool_calls else None,
            "usage": self.usage.to_dict(),
            "latency": self.latency,
            "model": self.model,
            "provider": self.provider,
        }


__all__ = ["Response"]
