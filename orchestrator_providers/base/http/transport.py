"""Transport contract used by vendor adapters.

Adapters do not talk to sockets. They hand a URL, a JSON-serializable body
and headers to a :class:`JsonTransport` and get back the status code and raw
body text. Decoding, status interpretation and error mapping stay in the
adapter, so any transport that honours this shape can be injected.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """Status and verbatim body text of one HTTP exchange."""

    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class JsonTransport(Protocol):
    """Send a JSON body, receive status plus body text."""

    async def post_json(
        self,
        url: str,
        body: Mapping[str, Any],
        *,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """POST ``body`` as JSON to ``url``.

        Implementations raise only for transport-level failures (connection,
        timeout). Non-2xx statuses are returned, not raised.
        """
        ...


__all__ = ["TransportResponse", "JsonTransport"]
