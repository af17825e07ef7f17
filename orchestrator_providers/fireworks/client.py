"""Fireworks.ai provider adapter (chat-completions wire format).

Variants
--------
Each instance is pinned to one model variant chosen at construction:

- ``quick``: small, low-cost model for fast tasks.
- ``coding``: balanced default.
- ``reasoning``: larger, higher-cost model.

Model ids and prices live in :data:`FIREWORKS_VARIANTS`; an unknown variant
raises ``ValueError``.

Wire mapping
------------
- Context documents become a leading ``system`` message holding the framed
  context; the prompt is the ``user`` message.
- Tools are sent in the OpenAI ``function`` shape with ``tool_choice: auto``.
- Tool-call ``arguments`` arrive as JSON strings and are decoded here.
- The body always carries ``stream: false``; replies are decoded as a single
  JSON document, so ``Request.stream`` is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from ..base.http import JsonTransport
from ..base.json_api_parts import BaseJsonApiProvider, ParsedCompletion
from ..base.models import Pricing, ProviderDescriptor, Request, ToolCall
from ..base.constants import TOOL_CHOICE_AUTO
from ..base.utils.prompting import build_context_string, format_tools
from ..config.defaults import (
    FIREWORKS_CHAT_PATH,
    FIREWORKS_CODING_MODEL,
    FIREWORKS_CODING_PRICING,
    FIREWORKS_DEFAULT_BASE_URL,
    FIREWORKS_DEFAULT_VARIANT,
    FIREWORKS_MAX_CONTEXT_TOKENS,
    FIREWORKS_PROVIDER_NAME,
    FIREWORKS_QUICK_MODEL,
    FIREWORKS_QUICK_PRICING,
    FIREWORKS_REASONING_MODEL,
    FIREWORKS_REASONING_PRICING,
)
from .wire import ChatCompletionRequest, ChatCompletionResponse, ChatMessage


@dataclass(frozen=True)
class FireworksVariant:
    """Model id and pricing for one Fireworks variant."""

    model: str
    pricing: Pricing


FIREWORKS_VARIANTS: Mapping[str, FireworksVariant] = {
    "quick": FireworksVariant(FIREWORKS_QUICK_MODEL, Pricing.from_pair(FIREWORKS_QUICK_PRICING)),
    "coding": FireworksVariant(FIREWORKS_CODING_MODEL, Pricing.from_pair(FIREWORKS_CODING_PRICING)),
    "reasoning": FireworksVariant(FIREWORKS_REASONING_MODEL, Pricing.from_pair(FIREWORKS_REASONING_PRICING)),
}


def resolve_variant(variant: str) -> FireworksVariant:
    """Return the :class:`FireworksVariant` for ``variant``.

    Raises:
        ValueError: When ``variant`` is not one of :data:`FIREWORKS_VARIANTS`.
    """
    try:
        return FIREWORKS_VARIANTS[variant]
    except KeyError:
        known = ", ".join(sorted(FIREWORKS_VARIANTS))
        raise ValueError(f"unknown fireworks variant '{variant}' (expected one of: {known})") from None


class FireworksProvider(BaseJsonApiProvider):
    """Adapter for the Fireworks.ai OpenAI-compatible chat endpoint."""

    vendor_label = "Fireworks"

    def __init__(
        self,
        api_key: str,
        variant: str = FIREWORKS_DEFAULT_VARIANT,
        *,
        base_url: Optional[str] = None,
        transport: Optional[JsonTransport] = None,
    ) -> None:
        selected = resolve_variant(variant)
        self._variant = variant
        super().__init__(
            api_key=api_key,
            model=selected.model,
            base_url=base_url or FIREWORKS_DEFAULT_BASE_URL,
            descriptor=ProviderDescriptor(
                name=FIREWORKS_PROVIDER_NAME,
                supports_tool_calling=True,
                supports_streaming=True,
                max_context_tokens=FIREWORKS_MAX_CONTEXT_TOKENS,
                cost_per_1m_tokens=selected.pricing,
            ),
            transport=transport,
        )

    @property
    def variant(self) -> str:
        return self._variant

    def _log_extra(self) -> Mapping[str, Any]:
        return {"variant": self._variant}

    def _endpoint(self) -> str:
        return f"{self.base_url}{FIREWORKS_CHAT_PATH}"

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._api_key}"}

    def _build_messages(self, request: Request) -> List[ChatMessage]:
        messages: List[ChatMessage] = []
        context = build_context_string(request.context)
        if context:
            messages.append(ChatMessage(role="system", content=context))
        messages.append(ChatMessage(role="user", content=request.prompt))
        return messages

    def _build_body(self, request: Request) -> Dict[str, Any]:
        body = ChatCompletionRequest(
            model=self._model,
            messages=self._build_messages(request),
            temperature=request.temperature,
            max_tokens=request.resolved_max_tokens(),
        )
        if request.tools:
            body.tools = format_tools(request.tools)
            body.tool_choice = TOOL_CHOICE_AUTO
        return body.model_dump(exclude_none=True)

    def _parse_payload(self, payload: Any) -> ParsedCompletion:
        data = ChatCompletionResponse.model_validate(payload)
        message = data.choices[0].message
        calls = tuple(
            ToolCall(tool=tc.function.name, arguments=tc.function.decoded_arguments())
            for tc in message.tool_calls or ()
        )
        return ParsedCompletion(
            content=message.content or "",
            tool_calls=calls,
            input_tokens=data.usage.prompt_tokens,
            output_tokens=data.usage.completion_tokens,
        )


def create_quick(api_key: str, **kwargs: Any) -> FireworksProvider:
    """Return a Fireworks adapter pinned to the ``quick`` variant."""
    return FireworksProvider(api_key, "quick", **kwargs)


def create_coding(api_key: str, **kwargs: Any) -> FireworksProvider:
    """Return a Fireworks adapter pinned to the ``coding`` variant."""
    return FireworksProvider(api_key, "coding", **kwargs)


def create_reasoning(api_key: str, **kwargs: Any) -> FireworksProvider:
    """Return a Fireworks adapter pinned to the ``reasoning`` variant."""
    return FireworksProvider(api_key, "reasoning", **kwargs)


__all__ = [
    "FireworksVariant",
    "FIREWORKS_VARIANTS",
    "resolve_variant",
    "FireworksProvider",
    "create_quick",
    "create_coding",
    "create_reasoning",
]
