"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``orchestrator_providers.base.errors_parts`` to keep a single stable import
path for callers.
"""

from .errors_parts.error_code import ErrorCode, RETRYABLE_CODES, is_retryable
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import classify_exception, classify_status
from .errors_parts.http_error import MalformedResponseError, ProviderHTTPError

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
