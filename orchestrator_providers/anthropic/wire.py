"""Pydantic wire schemas for the Anthropic Messages API."""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# ----- request -----
class UserMessage(BaseModel):
    role: Literal["user"] = "user"
    content: str


class ToolSchema(BaseModel):
    """Entry of the ``tools`` array (``input_schema`` is JSON Schema)."""

    name: str
    description: str
    input_schema: Dict[str, Any]


class MessagesRequest(BaseModel):
    """Body of ``POST /v1/messages``."""

    model: str
    messages: List[UserMessage]
    max_tokens: int
    temperature: float
    system: Optional[str] = None
    tools: Optional[List[ToolSchema]] = None


# ----- response -----
class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ContentBlock(_WireModel):
    """One block of the reply ``content`` array.

    Only ``text`` and ``tool_use`` blocks are read; other block types are
    accepted and skipped.
    """

    type: str
    text: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    input: Optional[Dict[str, Any]] = None


class MessagesUsage(_WireModel):
    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)


class MessagesResponse(_WireModel):
    id: Optional[str] = None
    model: Optional[str] = None
    stop_reason: Optional[str] = None
    content: List[ContentBlock]
    usage: MessagesUsage


__all__ = [
    "UserMessage",
    "ToolSchema",
    "MessagesRequest",
    "ContentBlock",
    "MessagesUsage",
    "MessagesResponse",
]
