"""
Wire-level failures raised by vendor adapters.

``ProviderHTTPError`` covers non-2xx responses and keeps the status code and
raw body text so nothing the vendor said is lost. ``MalformedResponseError``
covers 2xx responses whose body cannot be decoded into the fields an adapter
needs (invalid JSON, schema mismatch, missing candidate or usage block).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .classification import classify_status
from .error_code import ErrorCode, is_retryable
from .provider_error import ProviderError


@dataclass
class ProviderHTTPError(ProviderError):
    """Vendor returned a non-success HTTP status.

    Attributes:
        status_code: HTTP status returned by the vendor.
        body: Response body text, verbatim.
    """

    status_code: int = 0
    body: str = ""

    @classmethod
    def from_response(
        cls,
        *,
        vendor: str,
        provider: str,
        model: Optional[str],
        status_code: int,
        body: str,
    ) -> "ProviderHTTPError":
        """Build the error for ``status_code`` with message ``"<vendor> API error: <status> - <body>"``."""
        code = classify_status(status_code)
        return cls(
            code=code,
            message=f"{vendor} API error: {status_code} - {body}",
            provider=provider,
            model=model,
            retryable=is_retryable(code),
            status_code=status_code,
            body=body,
        )


@dataclass
class MalformedResponseError(ProviderError):
    """Vendor returned success but the body lacks the documented fields."""

    code: ErrorCode = ErrorCode.VALIDATION
    message: str = "malformed response"
    provider: str = "unknown"


__all__ = ["ProviderHTTPError", "MalformedResponseError"]
