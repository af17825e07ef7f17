"""ToolCall DTO emitted by adapters when the model requests a tool invocation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class ToolCall:
    """A tool invocation requested by the model.

    ``tool`` references a ``ToolDefinition.name`` from the originating request;
    this layer does not check that the reference resolves. ``arguments`` is
    always a decoded mapping regardless of how the vendor encoded it on the
    wire (nested object or JSON string).

    Calls hash on ``tool`` only; equality still compares ``arguments``.
    """

    tool: str
    arguments: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "arguments", dict(self.arguments))

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the call."""
        return {"tool": self.tool, "arguments": dict(self.arguments)}


__all__ = ["ToolCall"]
