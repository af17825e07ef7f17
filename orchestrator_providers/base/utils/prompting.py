"""Shared prompt framing, tool schema and cost helpers for adapters.

Every adapter frames context, derives tool parameter schemas and computes
cost through these functions so the behaviour is identical across vendors:

- ``build_context_string`` wraps ordered documents in a literal
  ``<context>`` block (empty string when there are none).
- ``estimate_tokens`` is the ``ceil(chars / 4)`` heuristic.
- ``estimate_request_cost`` is the zero-I/O pre-call estimate; it always
  counts the framed context, never the raw documents.
- ``compute_cost`` is the exact post-call cost from vendor-reported usage.
- ``probe_availability`` runs the minimal health-check request.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..constants import (
    CHARS_PER_TOKEN,
    CONTEXT_CLOSE_TAG,
    CONTEXT_DOCUMENT_SEPARATOR,
    CONTEXT_OPEN_TAG,
    ESTIMATE_DEFAULT_OUTPUT_TOKENS,
    PROBE_MAX_TOKENS,
    PROBE_PROMPT,
    TOKENS_PER_MILLION,
)
from ..errors import classify_exception
from ..log_support import LogContext
from ..logging import normalized_log_event
from ..models import Pricing, Request, ToolDefinition

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..interfaces import LLMProvider


def estimate_tokens(text: str) -> int:
    """Return ``ceil(len(text) / 4)``; zero for empty text."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def build_context_string(context: Sequence[str]) -> str:
    """Frame ordered context documents for inclusion in a prompt.

    Returns ``""`` for an empty sequence, otherwise the documents joined by a
    blank line inside ``<context>`` tags, with document order preserved.
    """
    if not context:
        return ""
    return CONTEXT_OPEN_TAG + CONTEXT_DOCUMENT_SEPARATOR.join(context) + CONTEXT_CLOSE_TAG


def build_parameters_schema(tool: ToolDefinition) -> Dict[str, Any]:
    """Return the JSON-Schema object describing ``tool``'s parameters.

    ``properties`` and ``required`` follow declared parameter order.
    """
    properties: Dict[str, Any] = {}
    for param in tool.parameters:
        properties[param.name] = {"type": param.type, "description": param.description}
    return {
        "type": "object",
        "properties": properties,
        "required": list(tool.required_parameter_names()),
    }


def format_tools(tools: Optional[Sequence[ToolDefinition]]) -> List[Dict[str, Any]]:
    """Render tools in the OpenAI-compatible ``function`` shape.

    Returns an empty list for ``None`` or an empty sequence.
    """
    if not tools:
        return []
    return [
        {
            "type": "function",
            "function": {
                "name": tool.name,
                "description": tool.description,
                "parameters": build_parameters_schema(tool),
            },
        }
        for tool in tools
    ]


def compute_cost(input_tokens: int, output_tokens: int, pricing: Pricing) -> float:
    """Return the exact USD cost for vendor-reported token counts."""
    return (
        input_tokens / TOKENS_PER_MILLION * pricing.input
        + output_tokens / TOKENS_PER_MILLION * pricing.output
    )


def resolve_model_pricing(
    vendor: str,
    model: str,
    table: Mapping[str, Tuple[float, float]],
    pricing: Optional[Pricing] = None,
) -> Pricing:
    """Return the price table for ``model``.

    An explicit ``pricing`` wins. Otherwise ``model`` must appear in ``table``.

    Raises:
        ValueError: When ``model`` has no known price and none was supplied.
    """
    if pricing is not None:
        return pricing
    try:
        return Pricing.from_pair(table[model])
    except KeyError:
        raise ValueError(
            f"no pricing known for {vendor} model '{model}'; pass pricing= explicitly"
        ) from None


def estimate_request_cost(request: Request, pricing: Pricing) -> float:
    """Heuristic pre-call cost for ``request`` under ``pricing``.

    Input tokens are estimated over the prompt followed by the framed
    context; the output estimate is ``max_tokens`` or
    ``ESTIMATE_DEFAULT_OUTPUT_TOKENS`` when the budget is absent.
    """
    input_est = estimate_tokens(request.prompt + build_context_string(request.context))
    output_est = request.max_tokens or ESTIMATE_DEFAULT_OUTPUT_TOKENS
    return compute_cost(input_est, output_est, pricing)


def probe_request() -> Request:
    """Return the minimal request used for availability checks."""
    return Request(prompt=PROBE_PROMPT, context=(), max_tokens=PROBE_MAX_TOKENS)


async def probe_availability(provider: "LLMProvider", logger: logging.Logger) -> bool:
    """Run the availability probe against ``provider``.

    Returns True iff ``execute`` completes and yields non-empty content. Any
    exception is logged as ``availability.failed`` and reported as False.
    """
    try:
        response = await provider.execute(probe_request())
    except Exception as exc:  # noqa: BLE001 - health probe reports, never raises
        normalized_log_event(
            logger,
            "availability.failed",
            LogContext(provider=provider.name, model=provider.model),
            phase="availability",
            attempt=1,
            emitted=False,
            error_code=classify_exception(exc).value,
            level=logging.WARNING,
            error=type(exc).__name__,
        )
        return False
    return bool(response.content)


__all__ = [
    "estimate_tokens",
    "build_context_string",
    "build_parameters_schema",
    "format_tools",
    "compute_cost",
    "estimate_request_cost",
    "probe_request",
    "probe_availability",
    "resolve_model_pricing",
]
