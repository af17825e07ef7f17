"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``orchestrator_providers.base.models_parts`` so callers have a single stable
import path for the unified request/response model.
"""

from .models_parts.tool_definition import ToolDefinition, ToolParameter
from .models_parts.tool_call import ToolCall
from .models_parts.usage import Pricing, Usage
from .models_parts.request import Request
from .models_parts.response import Response
from .models_parts.provider_descriptor import ProviderDescriptor

__all__ = [
    "ToolParameter",
    "ToolDefinition",
    "ToolCall",
    "Pricing",
    "Usage",
    "Request",
    "Response",
    "ProviderDescriptor",
]
