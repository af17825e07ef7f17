"""Shared testing utilities for adapter tests.

Exports:
    - RecordingVendor: ``httpx.MockTransport`` handler replaying one reply
    - StubTransport: in-memory ``JsonTransport`` for tests without HTTP
    - Canned vendor payload builders (``fireworks_reply``, ``claude_reply``,
      ``gemini_reply``)
    - ``weather_tool``: a two-parameter tool definition used across tests
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional

import httpx

from orchestrator_providers.base.http import JsonTransport, TransportResponse
from orchestrator_providers.base.models import ToolDefinition, ToolParameter


class RecordingVendor:
    """``httpx.MockTransport`` handler that records requests and replays one reply."""

    def __init__(self, status_code: int = 200, json_body: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last_request.content)


class StubTransport(JsonTransport):
    """In-memory ``JsonTransport`` returning a fixed reply or raising ``error``."""

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        text: Optional[str] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def post_json(
        self,
        url: str,
        body: Mapping[str, Any],
        *,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        self.calls.append({"url": url, "body": dict(body), "headers": dict(headers or {}), "params": params})
        if self.error is not None:
            raise self.error
        return TransportResponse(status_code=self.status_code, text=self.text)


def weather_tool() -> ToolDefinition:
    return ToolDefinition(
        name="get_weather",
        description="Look up current weather",
        parameters=(
            ToolParameter(name="city", type="string", description="City name", required=True),
            ToolParameter(name="units", type="string", description="metric or imperial", required=False),
        ),
    )


def fireworks_reply(
    content: Optional[str] = "hi",
    tool_calls: Optional[List[Dict[str, Any]]] = None,
    prompt_tokens: int = 500,
    completion_tokens: int = 10,
) -> Dict[str, Any]:
    message: Dict[str, Any] = {"role": "assistant", "content": content}
    if tool_calls is not None:
        message["tool_calls"] = tool_calls
    return {
        "id": "cmpl-1",
        "choices": [{"index": 0, "message": message, "finish_reason": "stop"}],
        "usage": {
            "prompt_tokens": prompt_tokens,
            "completion_tokens": completion_tokens,
            "total_tokens": prompt_tokens + completion_tokens,
        },
    }


def claude_reply(
    blocks: Optional[List[Dict[str, Any]]] = None,
    input_tokens: int = 500,
    output_tokens: int = 10,
) -> Dict[str, Any]:
    return {
        "id": "msg_1",
        "type": "message",
        "role": "assistant",
        "content": blocks if blocks is not None else [{"type": "text", "text": "hi"}],
        "stop_reason": "end_turn",
        "usage": {"input_tokens": input_tokens, "output_tokens": output_tokens},
    }


def gemini_reply(
    parts: Optional[List[Dict[str, Any]]] = None,
    prompt_tokens: int = 500,
    candidate_tokens: int = 10,
) -> Dict[str, Any]:
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": parts if parts is not None else [{"text": "hi"}]},
                "finishReason": "STOP",
            }
        ],
        "usageMetadata": {
            "promptTokenCount": prompt_tokens,
            "candidatesTokenCount": candidate_tokens,
            "totalTokenCount": prompt_tokens + candidate_tokens,
        },
    }


__all__ = [
    "RecordingVendor",
    "StubTransport",
    "weather_tool",
    "fireworks_reply",
    "claude_reply",
    "gemini_reply",
]
