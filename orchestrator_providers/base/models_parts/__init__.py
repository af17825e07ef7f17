"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`orchestrator_providers.base.models_parts` if needed, while
`orchestrator_providers.base.models` remains the primary stable import path.
"""

from .tool_definition import ToolDefinition, ToolParameter, ensure_unique_tool_names
from .tool_call import ToolCall
from .usage import Pricing, Usage
from .request import Request
from .response import Response
from .provider_descriptor import ProviderDescriptor

__all__ = [
    "ToolParameter",
    "ToolDefinition",
    "ensure_unique_tool_names",
    "ToolCall",
    "Pricing",
    "Usage",
    "Request",
    "Response",
    "ProviderDescriptor",
]
