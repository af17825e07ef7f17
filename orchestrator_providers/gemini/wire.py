"""Pydantic wire schemas for the Gemini ``generateContent`` API.

Gemini uses camelCase keys on the wire. Models declare snake_case fields with
camelCase aliases; request bodies are dumped ``by_alias`` and responses are
validated by alias.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class _GeminiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ----- request -----
class TextPart(_GeminiModel):
    text: str


class UserContent(_GeminiModel):
    role: Literal["user"] = "user"
    parts: List[TextPart]


class GenerationConfig(_GeminiModel):
    temperature: float
    max_output_tokens: int = Field(alias="maxOutputTokens")


class FunctionDeclaration(_GeminiModel):
    name: str
    description: str
    parameters: Dict[str, Any]


class ToolGroup(_GeminiModel):
    function_declarations: List[FunctionDeclaration] = Field(alias="functionDeclarations")


class GenerateContentRequest(_GeminiModel):
    """Body of ``POST /models/{model}:generateContent``."""

    contents: List[UserContent]
    generation_config: GenerationConfig = Field(alias="generationConfig")
    tools: Optional[List[ToolGroup]] = None


# ----- response -----
class FunctionCallPayload(_GeminiModel):
    name: str
    args: Optional[Dict[str, Any]] = None


class ResponsePart(_GeminiModel):
    text: Optional[str] = None
    function_call: Optional[FunctionCallPayload] = Field(default=None, alias="functionCall")


class CandidateContent(_GeminiModel):
    role: Optional[str] = None
    parts: List[ResponsePart] = Field(default_factory=list)


class Candidate(_GeminiModel):
    content: CandidateContent
    finish_reason: Optional[str] = Field(default=None, alias="finishReason")


class UsageMetadata(_GeminiModel):
    prompt_token_count: int = Field(default=0, ge=0, alias="promptTokenCount")
    candidates_token_count: int = Field(default=0, ge=0, alias="candidatesTokenCount")


class GenerateContentResponse(_GeminiModel):
    """Decoded reply; a candidate and ``usageMetadata`` are both required."""

    candidates: List[Candidate] = Field(min_length=1)
    usage_metadata: UsageMetadata = Field(alias="usageMetadata")


__all__ = [
    "TextPart",
    "UserContent",
    "GenerationConfig",
    "FunctionDeclaration",
    "ToolGroup",
    "GenerateContentRequest",
    "FunctionCallPayload",
    "ResponsePart",
    "CandidateContent",
    "Candidate",
    "UsageMetadata",
    "GenerateContentResponse",
]
