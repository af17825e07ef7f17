"""Default ``httpx``-backed transport for provider adapters.

Purpose:
    Implement :class:`JsonTransport` on top of ``httpx.AsyncClient`` so the
    adapters are usable without the caller supplying a transport.

External dependencies:
    - ``httpx`` for the asynchronous HTTP client.

Timeout strategy:
    - When the transport owns its client, the timeout derives from
      :func:`get_timeout_config` unless one is passed explicitly. No retries
      are configured; a failed exchange surfaces as an ``httpx`` exception.

Lifecycle & cleanup:
    - With an injected ``httpx.AsyncClient`` the caller owns its lifecycle and
      every call reuses it (connection pooling is the client's concern).
    - Without one, each call opens a short-lived client inside an
      ``async with`` block, which keeps the transport safe to share across
      event loops.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

import httpx

from ..timeouts import get_timeout_config
from .transport import JsonTransport, TransportResponse


class HttpxTransport(JsonTransport):
    """:class:`JsonTransport` implementation backed by ``httpx.AsyncClient``.

    Parameters:
        client: Optional caller-owned client reused for every request.
        timeout: Optional timeout (seconds or ``httpx.Timeout``) for clients
            this transport creates itself. Ignored when ``client`` is given.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Union[float, httpx.Timeout, None] = None,
    ) -> None:
        self._client = client
        if timeout is None:
            self._timeout: Union[float, httpx.Timeout] = get_timeout_config().to_httpx()
        else:
            self._timeout = timeout

    @property
    def timeout(self) -> Union[float, httpx.Timeout]:
        return self._timeout

    async def post_json(
        self,
        url: str,
        body: Mapping[str, Any],
        *,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, str]] = None,
    ) -> TransportResponse:
        """POST ``body`` as JSON and return status plus body text."""
        request_headers = {"Content-Type": "application/json"}
        if headers:
            request_headers.update(headers)
        query = dict(params) if params else None
        if self._client is not None:
            resp = await self._client.post(url, json=dict(body), headers=request_headers, params=query)
            return TransportResponse(status_code=resp.status_code, text=resp.text)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            resp = await client.post(url, json=dict(body), headers=request_headers, params=query)
            return TransportResponse(status_code=resp.status_code, text=resp.text)


__all__ = ["HttpxTransport"]
