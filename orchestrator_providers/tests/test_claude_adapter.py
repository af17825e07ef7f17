from __future__ import annotations

import json
import math

import pytest

from orchestrator_providers.anthropic import ClaudeProvider
from orchestrator_providers.base.errors import (
    ErrorCode,
    MalformedResponseError,
    ProviderHTTPError,
)
from orchestrator_providers.base.models import Pricing, Request
from orchestrator_providers.tests.utils import StubTransport, claude_reply, weather_tool


def test_descriptor_defaults():
    provider = ClaudeProvider("k", transport=StubTransport())
    assert provider.name == "claude"  # nosec B101 - assert is appropriate in unit tests
    assert provider.model == "claude-sonnet-4-20250514"  # nosec B101 - assert is appropriate in unit tests
    assert provider.max_context_tokens == 200_000  # nosec B101 - assert is appropriate in unit tests
    assert provider.cost_per_1m_tokens.input == 3.0  # nosec B101 - assert is appropriate in unit tests
    assert provider.cost_per_1m_tokens.output == 15.0  # nosec B101 - assert is appropriate in unit tests


def test_model_override_uses_that_models_pricing():
    haiku = ClaudeProvider("k", model="claude-3-5-haiku-latest", transport=StubTransport())
    assert haiku.model == "claude-3-5-haiku-latest"  # nosec B101 - assert is appropriate in unit tests
    assert haiku.cost_per_1m_tokens == Pricing(input=0.8, output=4.0)  # nosec B101 - assert is appropriate in unit tests
    custom = Pricing(input=1.0, output=2.0)
    assert ClaudeProvider("k", model="claude-next", pricing=custom).cost_per_1m_tokens == custom  # nosec B101 - assert is appropriate in unit tests


def test_unpriced_model_override_rejected():
    with pytest.raises(ValueError, match="no pricing known for Claude model 'claude-next'"):
        ClaudeProvider("k", model="claude-next")


@pytest.mark.asyncio
async def test_request_wire_shape(vendor):
    transport, recorder = vendor(json_body=claude_reply())
    provider = ClaudeProvider("sk-ant", transport=transport)
    await provider.execute(Request(prompt="Summarize", context=("alpha",), max_tokens=256))

    sent = recorder.last_request
    assert str(sent.url) == "https://api.anthropic.com/v1/messages"  # nosec B101 - assert is appropriate in unit tests
    assert sent.headers["x-api-key"] == "sk-ant"  # nosec B101 - assert is appropriate in unit tests
    assert sent.headers["anthropic-version"] == "2023-06-01"  # nosec B101 - assert is appropriate in unit tests
    assert "authorization" not in sent.headers  # nosec B101 - assert is appropriate in unit tests
    body = recorder.last_json
    assert body["messages"] == [{"role": "user", "content": "Summarize"}]  # nosec B101 - assert is appropriate in unit tests
    assert body["system"] == "\n\n<context>\nalpha\n</context>\n\n"  # nosec B101 - assert is appropriate in unit tests
    assert body["max_tokens"] == 256  # nosec B101 - assert is appropriate in unit tests
    assert body["temperature"] == 0.7  # nosec B101 - assert is appropriate in unit tests
    assert "tools" not in body  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.asyncio
async def test_system_omitted_without_context():
    stub = StubTransport(payload=claude_reply())
    await ClaudeProvider("k", transport=stub).execute(Request(prompt="hi"))
    assert "system" not in stub.calls[0]["body"]  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.asyncio
async def test_tools_use_input_schema():
    stub = StubTransport(payload=claude_reply())
    await ClaudeProvider("k", transport=stub).execute(Request(prompt="hi", tools=(weather_tool(),)))
    tools = stub.calls[0]["body"]["tools"]
    assert tools[0]["name"] == "get_weather"  # nosec B101 - assert is appropriate in unit tests
    assert tools[0]["description"] == "Look up current weather"  # nosec B101 - assert is appropriate in unit tests
    assert tools[0]["input_schema"]["required"] == ["city"]  # nosec B101 - assert is appropriate in unit tests
    assert "function" not in tools[0]  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.asyncio
async def test_text_blocks_joined_and_tool_use_collected():
    blocks = [
        {"type": "text", "text": "First."},
        {"type": "tool_use", "id": "tu_1", "name": "get_weather", "input": {"city": "Lima"}},
        {"type": "text", "text": "Second."},
        {"type": "tool_use", "id": "tu_2", "name": "get_time"},
    ]
    stub = StubTransport(payload=claude_reply(blocks=blocks, input_tokens=1000, output_tokens=200))
    provider = ClaudeProvider("k", transport=stub)
    resp = await provider.execute(Request(prompt="hi"))
    assert resp.content == "First.\nSecond."  # nosec B101 - assert is appropriate in unit tests
    assert resp.tool_calls is not None  # nosec B101 - assert is appropriate in unit tests
    assert [c.tool for c in resp.tool_calls] == ["get_weather", "get_time"]  # nosec B101 - assert is appropriate in unit tests
    assert resp.tool_calls[0].arguments == {"city": "Lima"}  # nosec B101 - assert is appropriate in unit tests
    assert resp.tool_calls[1].arguments == {}  # nosec B101 - assert is appropriate in unit tests
    assert math.isclose(resp.usage.cost, 1000 / 1e6 * 3.0 + 200 / 1e6 * 15.0)  # nosec B101 - assert is appropriate in unit tests
    assert resp.provider == "claude"  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.asyncio
async def test_no_tool_use_blocks_means_none():
    stub = StubTransport(payload=claude_reply(blocks=[{"type": "text", "text": "only text"}]))
    resp = await ClaudeProvider("k", transport=stub).execute(Request(prompt="hi"))
    assert resp.tool_calls is None  # nosec B101 - assert is appropriate in unit tests
    assert resp.content == "only text"  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.asyncio
async def test_empty_content_array_yields_empty_text():
    stub = StubTransport(payload=claude_reply(blocks=[]))
    resp = await ClaudeProvider("k", transport=stub).execute(Request(prompt="hi"))
    assert resp.content == ""  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.asyncio
async def test_overloaded_status_maps_to_server_error():
    stub = StubTransport(status_code=529, text="overloaded")
    with pytest.raises(ProviderHTTPError) as ei:
        await ClaudeProvider("k", transport=stub).execute(Request(prompt="hi"))
    assert ei.value.message == "Claude API error: 529 - overloaded"  # nosec B101 - assert is appropriate in unit tests
    assert ei.value.code is ErrorCode.SERVER_ERROR  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.asyncio
async def test_auth_failure():
    stub = StubTransport(status_code=401, text='{"type":"error"}')
    with pytest.raises(ProviderHTTPError) as ei:
        await ClaudeProvider("bad", transport=stub).execute(Request(prompt="hi"))
    assert ei.value.code is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests
    assert ei.value.retryable is False  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"content": [{"type": "text", "text": "x"}]},
        {"usage": {"input_tokens": 1, "output_tokens": 1}},
        {"content": [{"type": "tool_use", "input": {}}], "usage": {}},
    ],
)
async def test_malformed_success_body(payload):
    stub = StubTransport(text=json.dumps(payload))
    with pytest.raises(MalformedResponseError) as ei:
        await ClaudeProvider("k", transport=stub).execute(Request(prompt="hi"))
    assert ei.value.provider == "claude"  # nosec B101 - assert is appropriate in unit tests
    assert ei.value.message.startswith("Claude API returned a malformed response")  # nosec B101 - assert is appropriate in unit tests
