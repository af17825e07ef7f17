"""
Request DTO for provider-agnostic generation calls.

Adapters map this normalized request shape to their vendor wire schema. The
request carries the user prompt, ordered background documents, optional tool
definitions, and sampling parameters.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from ..constants import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from .tool_definition import ToolDefinition, ensure_unique_tool_names


@dataclass(frozen=True)
class Request:
    """Normalized generation request sent to provider adapters.

    Attributes:
        prompt: The user prompt.
        context: Ordered freeform documents prepended to the prompt. Lists are
            accepted and stored as a tuple; order is preserved.
        tools: Optional tool definitions with unique names. ``None`` and an
            empty sequence both mean "no tools".
        temperature: Sampling temperature; the valid range is vendor-defined.
        max_tokens: Positive completion budget, ``DEFAULT_MAX_TOKENS`` unless
            set. An explicit ``None`` marks the budget as absent: adapters
            then transmit ``DEFAULT_MAX_TOKENS`` and the cost heuristic falls
            back to ``ESTIMATE_DEFAULT_OUTPUT_TOKENS``.
        stream: Advisory streaming hint; adapters that cannot stream ignore it.

    Raises:
        ValueError: On duplicate tool names, a non-positive ``max_tokens`` or a
            bare string passed as ``context``.
    """

    prompt: str
    context: Tuple[str, ...] = ()
    tools: Optional[Tuple[ToolDefinition, ...]] = None
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: Optional[int] = DEFAULT_MAX_TOKENS
    stream: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.context, str):
            raise ValueError("context must be a sequence of documents, not a single string")
        object.__setattr__(self, "context", tuple(self.context or ()))
        if self.tools is not None:
            object.__setattr__(self, "tools", ensure_unique_tool_names(self.tools))
        if self.max_tokens is not None and self.max_tokens <= 0:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")

    @property
    def has_tools(self) -> bool:
        return bool(self.tools)

    def resolved_max_tokens(self) -> int:
        """Return the completion budget to transmit to a vendor."""
        return self.max_tokens if self.max_tokens is not None else DEFAULT_MAX_TOKENS

    @classmethod
    def build(
        cls,
        prompt: str,
        context: Optional[Sequence[str]] = None,
        tools: Optional[Sequence[ToolDefinition]] = None,
        **kwargs: Any,
    ) -> "Request":
        """Convenience constructor accepting plain lists for sequence fields."""
        return cls(
            prompt=prompt,
            context=context or (),
            tools=tuple(tools) if tools is not None else None,
            **kwargs,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the request."""
        return {
            "prompt": self.prompt,
            "context": list(self.context),
            "tools": [t.to_dict() for t in self.tools] if self.tools is not None else None,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "stream": self.stream,
        }


__all__ = ["Request"]
