"""ParsedCompletion DTO (single-class module).

Intermediate result of decoding a vendor reply: everything the base adapter
needs to assemble a :class:`Response` except cost and latency.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..models import ToolCall


@dataclass(frozen=True)
class ParsedCompletion:
    """Vendor-neutral fields extracted from a decoded wire payload."""

    content: str
    tool_calls: Tuple[ToolCall, ...]
    input_tokens: int
    output_tokens: int


__all__ = ["ParsedCompletion"]
