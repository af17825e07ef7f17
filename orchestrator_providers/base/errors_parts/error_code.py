"""
Normalized failure categories for provider calls.

``ErrorCode`` values are lowercase snake_case strings and appear verbatim in
structured log payloads (``error_code``), so they are a stable contract for
anything that parses those logs.
"""
from __future__ import annotations

from enum import Enum
from typing import FrozenSet


class ErrorCode(str, Enum):
    """Enumerated failure categories shared by every adapter."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSIENT = "transient"
    UNSUPPORTED = "unsupported"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    INTERNAL = "internal"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


# Codes a caller may reasonably retry. Adapters never retry on their own.
RETRYABLE_CODES: FrozenSet[ErrorCode] = frozenset(
    {
        ErrorCode.RATE_LIMIT,
        ErrorCode.TIMEOUT,
        ErrorCode.TRANSIENT,
        ErrorCode.SERVER_ERROR,
        ErrorCode.UNAVAILABLE,
    }
)


def is_retryable(code: ErrorCode) -> bool:
    """Return True when ``code`` is in :data:`RETRYABLE_CODES`."""
    return code in RETRYABLE_CODES


__all__ = ["ErrorCode", "RETRYABLE_CODES", "is_retryable"]
