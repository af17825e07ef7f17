"""Claude provider adapter (Anthropic Messages wire format).

Wire mapping
------------
- The prompt is the single ``user`` message; framed context, when present,
  is sent in the top-level ``system`` field.
- Tools are sent as ``{name, description, input_schema}``.
- Reply text is the newline-joined ``text`` blocks in order; ``tool_use``
  blocks become tool calls (``input`` is already an object).

Authentication uses the ``x-api-key`` header plus a pinned
``anthropic-version``.

Pricing comes from :data:`ANTHROPIC_MODEL_PRICING` for the selected model; a
model outside that table needs an explicit ``pricing=``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.http import JsonTransport
from ..base.json_api_parts import BaseJsonApiProvider, ParsedCompletion
from ..base.models import Pricing, ProviderDescriptor, Request, ToolCall, ToolDefinition
from ..base.utils.prompting import (
    build_context_string,
    build_parameters_schema,
    resolve_model_pricing,
)
from ..config.defaults import (
    ANTHROPIC_API_VERSION,
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MODEL,
    ANTHROPIC_MAX_CONTEXT_TOKENS,
    ANTHROPIC_MESSAGES_PATH,
    ANTHROPIC_MODEL_PRICING,
    CLAUDE_PROVIDER_NAME,
)
from .wire import MessagesRequest, MessagesResponse, ToolSchema, UserMessage


def format_claude_tools(tools: Optional[List[ToolDefinition]]) -> List[ToolSchema]:
    """Render tool definitions in the Messages API ``tools`` shape."""
    return [
        ToolSchema(name=t.name, description=t.description, input_schema=build_parameters_schema(t))
        for t in tools or ()
    ]


class ClaudeProvider(BaseJsonApiProvider):
    """Adapter for Anthropic's ``/v1/messages`` endpoint."""

    vendor_label = "Claude"

    def __init__(
        self,
        api_key: str,
        *,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        pricing: Optional[Pricing] = None,
        transport: Optional[JsonTransport] = None,
    ) -> None:
        model = model or ANTHROPIC_DEFAULT_MODEL
        super().__init__(
            api_key=api_key,
            model=model,
            base_url=base_url or ANTHROPIC_DEFAULT_BASE_URL,
            descriptor=ProviderDescriptor(
                name=CLAUDE_PROVIDER_NAME,
                supports_tool_calling=True,
                supports_streaming=True,
                max_context_tokens=ANTHROPIC_MAX_CONTEXT_TOKENS,
                cost_per_1m_tokens=resolve_model_pricing("Claude", model, ANTHROPIC_MODEL_PRICING, pricing),
            ),
            transport=transport,
        )

    def _endpoint(self) -> str:
        return f"{self.base_url}{ANTHROPIC_MESSAGES_PATH}"

    def _headers(self) -> Dict[str, str]:
        return {"x-api-key": self._api_key, "anthropic-version": ANTHROPIC_API_VERSION}

    def _build_body(self, request: Request) -> Dict[str, Any]:
        body = MessagesRequest(
            model=self._model,
            messages=[UserMessage(content=request.prompt)],
            max_tokens=request.resolved_max_tokens(),
            temperature=request.temperature,
            system=build_context_string(request.context) or None,
            tools=format_claude_tools(request.tools) or None,
        )
        return body.model_dump(exclude_none=True)

    def _parse_payload(self, payload: Any) -> ParsedCompletion:
        data = MessagesResponse.model_validate(payload)
        texts: List[str] = []
        calls: List[ToolCall] = []
        for block in data.content:
            if block.type == "text":
                texts.append(block.text or "")
            elif block.type == "tool_use":
                if not block.name:
                    raise ValueError("tool_use block without a name")
                calls.append(ToolCall(tool=block.name, arguments=block.input or {}))
        return ParsedCompletion(
            content="\n".join(texts),
            tool_calls=tuple(calls),
            input_tokens=data.usage.input_tokens,
            output_tokens=data.usage.output_tokens,
        )


__all__ = ["ClaudeProvider", "format_claude_tools"]
