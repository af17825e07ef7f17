"""
Tool definition DTOs supplied by callers on a ``Request``.

A ``ToolDefinition`` describes a caller-owned function the model may ask to
invoke. Parameters are kept in declared order because adapters derive the
JSON-Schema ``required`` array from that order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple


@dataclass(frozen=True)
class ToolParameter:
    """A single named argument of a tool.

    Attributes:
        name: Parameter identifier, unique within its tool.
        type: JSON-Schema primitive type name (``"string"``, ``"integer"`` ...).
        description: Human-readable description forwarded to the vendor.
        required: Whether the model must supply this argument.
    """

    name: str
    type: str
    description: str
    required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the parameter."""
        return {
            "name": self.name,
            "type": self.type,
            "description": self.description,
            "required": self.required,
        }


@dataclass(frozen=True)
class ToolDefinition:
    """A caller-supplied tool the model may request to call.

    Attributes:
        name: Unique identifier of the tool within a request.
        description: Natural-language description shown to the model.
        parameters: Ordered parameters; names must be unique.

    Raises:
        ValueError: When two parameters share a name.
    """

    name: str
    description: str
    parameters: Tuple[ToolParameter, ...] = ()

    def __post_init__(self) -> None:
        params = tuple(self.parameters)
        seen = set()
        for p in params:
            if p.name in seen:
                raise ValueError(f"duplicate parameter '{p.name}' in tool '{self.name}'")
            seen.add(p.name)
        object.__setattr__(self, "parameters", params)

    def required_parameter_names(self) -> Tuple[str, ...]:
        """Return the names of required parameters in declared order."""
        return tuple(p.name for p in self.parameters if p.required)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the tool."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [p.to_dict() for p in self.parameters],
        }


def ensure_unique_tool_names(tools: Iterable[ToolDefinition]) -> Tuple[ToolDefinition, ...]:
    """Return ``tools`` as a tuple, rejecting duplicate tool names.

    Raises:
        ValueError: When two tools share a name.
    """
    out = tuple(tools)
    names = [t.name for t in out]
    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        raise ValueError(f"duplicate tool name(s): {', '.join(dupes)}")
    return out


__all__ = [
    "ToolParameter",
    "ToolDefinition",
    "ensure_unique_tool_names",
]
