"""
Providers Base Package

Exports the provider-agnostic contracts, DTOs, error taxonomy, transport and
factory used by the vendor adapters:

- Models (DTOs): immutable request/response value objects
- Interfaces: the ``LLMProvider`` contract
- Errors: normalized error codes and provider exceptions
- HTTP: the ``JsonTransport`` contract and its ``httpx`` implementation
- Factory: lazy creation of adapters by name
"""

from .errors import (
    ErrorCode,
    MalformedResponseError,
    ProviderError,
    ProviderHTTPError,
    classify_exception,
    classify_status,
)
from .factory import ProviderFactory, UnknownProviderError
from .http import HttpxTransport, JsonTransport, TransportResponse
from .interfaces import HasDescriptor, LLMProvider
from .models import (
    Pricing,
    ProviderDescriptor,
    Request,
    Response,
    ToolCall,
    ToolDefinition,
    ToolParameter,
    Usage,
)
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
    "Request",
    "Response",
    "ToolParameter",
    "ToolDefinition",
    "ToolCall",
    "Pricing",
    "Usage",
    "ProviderDescriptor",
    # Interfaces
    "LLMProvider",
    "HasDescriptor",
    # Errors
    "ErrorCode",
    "ProviderError",
    "ProviderHTTPError",
    "MalformedResponseError",
    "classify_exception",
    "classify_status",
    # HTTP
    "JsonTransport",
    "TransportResponse",
    "HttpxTransport",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
]
