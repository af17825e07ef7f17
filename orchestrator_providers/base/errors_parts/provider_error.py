"""
Structured provider error exception type.

Every failure raised out of an adapter's ``execute`` is a ``ProviderError``
(or subclass) carrying a normalized :class:`ErrorCode`, the adapter name and
the model involved, so callers can branch on ``code`` without parsing text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Adapter name where the error originated (e.g., ``"gemini"``).
        model: Optional model identifier associated with the failure.
        retryable: Hint for caller-side retry logic; adapters never retry.
        raw: Optional underlying exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["ProviderError"]
