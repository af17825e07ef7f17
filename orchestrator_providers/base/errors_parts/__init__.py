"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `orchestrator_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode, RETRYABLE_CODES, is_retryable
from .provider_error import ProviderError
from .classification import classify_exception, classify_status
from .http_error import MalformedResponseError, ProviderHTTPError

__all__ = [
    "ErrorCode",
    "RETRYABLE_CODES",
    "is_retryable",
    "ProviderError",
    "ProviderHTTPError",
    "MalformedResponseError",
    "classify_exception",
    "classify_status",
]
