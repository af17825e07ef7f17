"""orchestrator_providers package

One interface over several API-incompatible LLM backends.

Purpose:
    Let callers issue a prompt (with optional context documents and tool
    definitions) against Fireworks, Claude or Gemini through the same
    ``Request``/``Response`` model, and learn afterwards what the call cost
    and how long it took.

Public API (re-exported):
    - Version: ``__version__``
    - Models: :class:`Request`, :class:`Response`, :class:`ToolDefinition`,
      :class:`ToolParameter`, :class:`ToolCall`, :class:`Usage`,
      :class:`Pricing`, :class:`ProviderDescriptor`
    - Contract: :class:`LLMProvider`
    - Exceptions: :class:`ProviderError`, :class:`ProviderHTTPError`,
      :class:`MalformedResponseError`, :class:`ErrorCode`
    - Factory: :func:`create`, :class:`ProviderFactory`, :class:`AdapterParams`

Example:
    ``await create("gemini").execute(Request(prompt="Summarize", context=(doc,)))``
"""

from typing import Optional

from .base.dto import AdapterParams
from .base.errors import (
    ErrorCode,
    MalformedResponseError,
    ProviderError,
    ProviderHTTPError,
)
from .base.factory import ProviderFactory
from .base.interfaces import LLMProvider
from .base.models import (
    Pricing,
    ProviderDescriptor,
    Request,
    Response,
    ToolCall,
    ToolDefinition,
    ToolParameter,
    Usage,
)

__version__ = "0.1.0"


def create(provider_name: str, *, params: Optional[AdapterParams] = None, **kwargs) -> LLMProvider:
    """Instantiate a provider adapter via :class:`ProviderFactory`.

    Parameters
    ----------
    provider_name:
        Adapter name (``"fireworks"``, ``"claude"``/``"anthropic"``, ``"gemini"``).
    params:
        Optional :class:`AdapterParams`. When both ``params`` and ``kwargs``
        provide the same field, ``kwargs`` take precedence.
    **kwargs:
        Adapter constructor overrides (``api_key``, ``variant``, ``transport`` ...).

    Returns
    -------
    LLMProvider
        The configured adapter.

    Raises
    ------
    ProviderError
        Re-raised unchanged when the factory reports one (e.g. missing API
        key); any other factory failure is wrapped with ``ErrorCode.UNKNOWN``.
    """
    try:
        return ProviderFactory.create(provider_name, params=params, **kwargs)
    except ProviderError:
        raise
    except Exception as e:
        raise ProviderError(
            code=ErrorCode.UNKNOWN,
            message=f"Failed to create provider '{provider_name}': {e}",
            provider=provider_name,
        ) from e


__all__ = [
    # Version
    "__version__",
    # Models
    "Request",
    "Response",
    "ToolParameter",
    "ToolDefinition",
    "ToolCall",
    "Usage",
    "Pricing",
    "ProviderDescriptor",
    # Contract
    "LLMProvider",
    # Exceptions
    "ProviderError",
    "ProviderHTTPError",
    "MalformedResponseError",
    "ErrorCode",
    # Factory
    "create",
    "ProviderFactory",
    "AdapterParams",
]
