"""Gemini provider adapter (contents/parts wire format).

Wire mapping
------------
- One ``user`` content whose parts are the framed context (when present)
  followed by the prompt.
- ``generationConfig`` carries ``temperature`` and ``maxOutputTokens``.
- Tools are grouped under a single ``functionDeclarations`` entry.
- Reply text is the newline-joined non-empty ``text`` parts of the first
  candidate; ``functionCall`` parts become tool calls.

The API key travels in the ``key`` query parameter, not a header.

Pricing comes from :data:`GEMINI_MODEL_PRICING` for the selected model; a
model outside that table needs an explicit ``pricing=``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..base.http import JsonTransport
from ..base.json_api_parts import BaseJsonApiProvider, ParsedCompletion
from ..base.models import Pricing, ProviderDescriptor, Request, ToolCall, ToolDefinition
from ..base.utils.prompting import (
    build_context_string,
    build_parameters_schema,
    resolve_model_pricing,
)
from ..config.defaults import (
    GEMINI_DEFAULT_BASE_URL,
    GEMINI_DEFAULT_MODEL,
    GEMINI_GENERATE_PATH_TEMPLATE,
    GEMINI_MAX_CONTEXT_TOKENS,
    GEMINI_MODEL_PRICING,
    GEMINI_PROVIDER_NAME,
)
from .wire import (
    FunctionDeclaration,
    GenerateContentRequest,
    GenerateContentResponse,
    GenerationConfig,
    TextPart,
    ToolGroup,
    UserContent,
)


def format_gemini_tools(tools: Optional[Sequence[ToolDefinition]]) -> Optional[List[ToolGroup]]:
    """Return the ``tools`` array for ``tools``, or ``None`` when there are none."""
    if not tools:
        return None
    declarations = [
        FunctionDeclaration(name=t.name, description=t.description, parameters=build_parameters_schema(t))
        for t in tools
    ]
    return [ToolGroup(function_declarations=declarations)]


class GeminiProvider(BaseJsonApiProvider):
    """Adapter for Google's Gemini ``generateContent`` endpoint."""

    vendor_label = "Gemini"

    def __init__(
        self,
        api_key: str,
        *,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        pricing: Optional[Pricing] = None,
        transport: Optional[JsonTransport] = None,
    ) -> None:
        model = model or GEMINI_DEFAULT_MODEL
        super().__init__(
            api_key=api_key,
            model=model,
            base_url=base_url or GEMINI_DEFAULT_BASE_URL,
            descriptor=ProviderDescriptor(
                name=GEMINI_PROVIDER_NAME,
                supports_tool_calling=True,
                supports_streaming=True,
                max_context_tokens=GEMINI_MAX_CONTEXT_TOKENS,
                cost_per_1m_tokens=resolve_model_pricing("Gemini", model, GEMINI_MODEL_PRICING, pricing),
            ),
            transport=transport,
        )

    def _endpoint(self) -> str:
        return self.base_url + GEMINI_GENERATE_PATH_TEMPLATE.format(model=self._model)

    def _headers(self) -> Dict[str, str]:
        return {}

    def _params(self) -> Optional[Dict[str, str]]:
        return {"key": self._api_key}

    def _build_body(self, request: Request) -> Dict[str, Any]:
        parts: List[TextPart] = []
        context = build_context_string(request.context)
        if context:
            parts.append(TextPart(text=context))
        parts.append(TextPart(text=request.prompt))
        body = GenerateContentRequest(
            contents=[UserContent(parts=parts)],
            generation_config=GenerationConfig(
                temperature=request.temperature,
                max_output_tokens=request.resolved_max_tokens(),
            ),
            tools=format_gemini_tools(request.tools),
        )
        return body.model_dump(by_alias=True, exclude_none=True)

    def _parse_payload(self, payload: Any) -> ParsedCompletion:
        data = GenerateContentResponse.model_validate(payload)
        parts = data.candidates[0].content.parts
        text = "\n".join(p.text for p in parts if p.text)
        calls = tuple(
            ToolCall(tool=p.function_call.name, arguments=p.function_call.args or {})
            for p in parts
            if p.function_call is not None
        )
        usage = data.usage_metadata
        return ParsedCompletion(
            content=text,
            tool_calls=calls,
            input_tokens=usage.prompt_token_count,
            output_tokens=usage.candidates_token_count,
        )


__all__ = ["GeminiProvider", "format_gemini_tools"]
