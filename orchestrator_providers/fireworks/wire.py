"""Pydantic wire schemas for the Fireworks chat-completions API.

Request models are dumped with ``exclude_none`` so optional keys (``tools``,
``tool_choice``) only appear when set. Response models describe the subset of
the reply the adapter reads; unknown keys are ignored.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ----- request -----
class ChatMessage(BaseModel):
    """One entry of the ``messages`` array."""

    role: Literal["system", "user"]
    content: str


class ChatCompletionRequest(BaseModel):
    """Body of ``POST /chat/completions``."""

    model: str
    messages: List[ChatMessage]
    temperature: float
    max_tokens: int
    stream: bool = False
    tools: Optional[List[Dict[str, Any]]] = None
    tool_choice: Optional[str] = None


# ----- response -----
class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class FunctionCall(_WireModel):
    name: str
    arguments: Union[str, Dict[str, Any], None] = None

    def decoded_arguments(self) -> Dict[str, Any]:
        """Return ``arguments`` as a mapping.

        The API sends a JSON-encoded string; an empty or missing value means
        no arguments. Anything that does not decode to a JSON object raises
        ``ValueError``.
        """
        raw = self.arguments
        if raw is None or raw == "":
            return {}
        decoded = json.loads(raw) if isinstance(raw, str) else raw
        if not isinstance(decoded, dict):
            raise ValueError(f"arguments for tool '{self.name}' did not decode to an object")
        return decoded


class ToolCallPayload(_WireModel):
    id: Optional[str] = None
    type: Optional[str] = None
    function: FunctionCall


class AssistantMessage(_WireModel):
    role: Optional[str] = None
    content: Optional[str] = None
    tool_calls: Optional[List[ToolCallPayload]] = None


class Choice(_WireModel):
    index: int = 0
    message: AssistantMessage
    finish_reason: Optional[str] = None


class CompletionUsage(_WireModel):
    prompt_tokens: int = Field(default=0, ge=0)
    completion_tokens: int = Field(default=0, ge=0)


class ChatCompletionResponse(_WireModel):
    """Decoded reply; at least one choice and a usage block are required."""

    id: Optional[str] = None
    model: Optional[str] = None
    choices: List[Choice] = Field(min_length=1)
    usage: CompletionUsage


__all__ = [
    "ChatMessage",
    "ChatCompletionRequest",
    "FunctionCall",
    "ToolCallPayload",
    "AssistantMessage",
    "Choice",
    "CompletionUsage",
    "ChatCompletionResponse",
]
