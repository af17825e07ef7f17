"""Helpers for one request/response exchange with a vendor JSON API.

These functions are provider-agnostic: they turn a raw
:class:`TransportResponse` into either a decoded value or a
:class:`ProviderError` subclass, and measure latency.
"""
from __future__ import annotations

import json
import time
from typing import Any, Callable, Optional, TypeVar

from pydantic import ValidationError

from ..errors import MalformedResponseError, ProviderHTTPError
from ..http import TransportResponse

T = TypeVar("T")


def ensure_success(
    resp: TransportResponse,
    *,
    vendor: str,
    provider: str,
    model: Optional[str],
) -> None:
    """Raise :class:`ProviderHTTPError` when ``resp`` is not a 2xx status.

    The body text is carried verbatim in both ``body`` and the message.
    """
    if resp.ok:
        return
    raise ProviderHTTPError.from_response(
        vendor=vendor,
        provider=provider,
        model=model,
        status_code=resp.status_code,
        body=resp.text,
    )


def decode_wire(
    text: str,
    parse: Callable[[Any], T],
    *,
    vendor: str,
    provider: str,
    model: Optional[str],
) -> T:
    """Decode ``text`` as JSON and hand the payload to ``parse``.

    ``parse`` validates the payload against the vendor wire schema and
    extracts what the adapter needs. Invalid JSON, schema mismatches and any
    ``ValueError`` raised while extracting become
    :class:`MalformedResponseError`.
    """
    try:
        payload = json.loads(text)
        return parse(payload)
    except (ValueError, ValidationError) as exc:
        raise MalformedResponseError(
            message=f"{vendor} API returned a malformed response: {exc}",
            provider=provider,
            model=model,
            raw=exc,
        ) from exc


def elapsed_ms(started: float) -> int:
    """Milliseconds since ``started`` (a ``time.perf_counter()`` reading)."""
    return int(round((time.perf_counter() - started) * 1000.0))


__all__ = ["ensure_success", "decode_wire", "elapsed_ms"]
