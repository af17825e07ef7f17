"""Pytest configuration for the providers test suite.

Provides:
- An autouse fixture that strips provider credentials and config variables
  from the environment so tests never depend on the developer's shell.
- ``vendor`` fixture: builds an ``HttpxTransport`` over ``httpx.MockTransport``
  that records outgoing requests and replays a canned vendor reply.
- ``log_stream`` fixture: captures provider log lines emitted during a test.
"""

from __future__ import annotations

import io
import logging
from typing import Any, Callable, Iterator, Optional, Tuple

import httpx
import pytest

from orchestrator_providers.base.http import HttpxTransport
from orchestrator_providers.base.logging import BASE_LOGGER_NAME, get_logger
from orchestrator_providers.config import reset_config_cache
from orchestrator_providers.tests.utils import RecordingVendor

_ISOLATED_ENV = (
    "FIREWORKS_API_KEY",
    "FIREWORKS_BASE_URL",
    "FIREWORKS_VARIANT",
    "FIREWORKS_MODEL",
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_BASE_URL",
    "ANTHROPIC_MODEL",
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "GEMINI_BASE_URL",
    "GEMINI_MODEL",
    "ORCH_PROVIDERS_CONFIG_FILE",
    "ORCH_PROVIDERS_HTTP_TIMEOUT_SECONDS",
    "ORCH_PROVIDERS_CONNECT_TIMEOUT_SECONDS",
    "ORCH_PROVIDERS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_provider_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove provider-related environment variables for the test duration."""

    for name in _ISOLATED_ENV:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def vendor() -> Callable[..., Tuple[HttpxTransport, RecordingVendor]]:
    """Factory returning ``(transport, recorder)`` for a canned vendor reply."""

    def _make(status_code: int = 200, json_body: Any = None, text: Optional[str] = None):
        recorder = RecordingVendor(status_code=status_code, json_body=json_body, text=text)
        client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        return HttpxTransport(client=client), recorder

    return _make


@pytest.fixture()
def log_stream() -> Iterator[io.StringIO]:
    """Attach a plain-message handler to the base provider logger.

    Yields the backing ``StringIO``; each line is one emitted JSON payload.
    """

    get_logger()
    base = logging.getLogger(BASE_LOGGER_NAME)
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(logging.DEBUG)
    previous_level = base.level
    base.setLevel(logging.DEBUG)
    base.addHandler(handler)
    try:
        yield stream
    finally:
        base.removeHandler(handler)
        base.setLevel(previous_level)
