"""Unit tests for the httpx-backed JSON transport.

Covers:
- Request serialization (JSON body, merged headers, query parameters).
- Non-2xx statuses are returned rather than raised.
- Default timeout derives from the timeout configuration.
"""
from __future__ import annotations

import json

import httpx
import pytest

from orchestrator_providers.base.http import HttpxTransport, JsonTransport
from orchestrator_providers.base.timeouts import get_timeout_config


@pytest.mark.asyncio
async def test_post_json_sends_body_headers_and_params(vendor):
    transport, recorder = vendor(json_body={"ok": True})
    resp = await transport.post_json(
        "https://api.example.com/v1/run",
        {"a": 1},
        headers={"X-Trace": "t1"},
        params={"key": "secret"},
    )
    assert resp.ok  # nosec B101 - test assertion
    assert json.loads(resp.text) == {"ok": True}  # nosec B101 - test assertion
    sent = recorder.last_request
    assert sent.method == "POST"  # nosec B101 - test assertion
    assert sent.headers["content-type"] == "application/json"  # nosec B101 - test assertion
    assert sent.headers["x-trace"] == "t1"  # nosec B101 - test assertion
    assert sent.url.params["key"] == "secret"  # nosec B101 - test assertion
    assert recorder.last_json == {"a": 1}  # nosec B101 - test assertion


@pytest.mark.asyncio
async def test_no_query_string_without_params(vendor):
    transport, recorder = vendor(json_body={})
    await transport.post_json("https://api.example.com/v1/run", {})
    assert str(recorder.last_request.url) == "https://api.example.com/v1/run"  # nosec B101 - test assertion


@pytest.mark.asyncio
async def test_error_status_is_returned_verbatim(vendor):
    transport, _ = vendor(status_code=502, text="bad gateway")
    resp = await transport.post_json("https://api.example.com/v1/run", {})
    assert resp.status_code == 502  # nosec B101 - test assertion
    assert resp.text == "bad gateway"  # nosec B101 - test assertion
    assert resp.ok is False  # nosec B101 - test assertion


@pytest.mark.asyncio
async def test_transport_errors_propagate():
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(_refuse))
    transport = HttpxTransport(client=client)
    with pytest.raises(httpx.ConnectError):
        await transport.post_json("https://api.example.com/v1/run", {})


def test_default_timeout_and_protocol():
    transport = HttpxTransport()
    assert transport.timeout == get_timeout_config().to_httpx()  # nosec B101 - test assertion
    assert HttpxTransport(timeout=3.0).timeout == 3.0  # nosec B101 - test assertion
    assert isinstance(transport, JsonTransport)  # nosec B101 - test assertion
