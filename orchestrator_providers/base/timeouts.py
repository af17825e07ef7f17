"""Timeout configuration for outbound provider HTTP calls.

Adapters never enforce their own deadlines; the only timeout on an
``execute`` call is the one configured on the HTTP transport. This module is
the single source of that value.

get_timeout_config()
    Returns a process-cached :class:`TimeoutConfig`. Supported environment
    variables (all optional, positive floats):
        ORCH_PROVIDERS_HTTP_TIMEOUT_SECONDS
        ORCH_PROVIDERS_CONNECT_TIMEOUT_SECONDS

The cache is refreshed when either variable changes, so tests can adjust
them with ``monkeypatch`` without reaching into module state.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

from .constants import DEFAULT_CONNECT_TIMEOUT, DEFAULT_HTTP_TIMEOUT

HTTP_TIMEOUT_ENV = "ORCH_PROVIDERS_HTTP_TIMEOUT_SECONDS"
CONNECT_TIMEOUT_ENV = "ORCH_PROVIDERS_CONNECT_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Read/write/pool timeout for a single request.
        connect_timeout_seconds: Timeout for establishing the connection.
    """

    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT
    connect_timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT

    def to_httpx(self) -> httpx.Timeout:
        """Return the equivalent ``httpx.Timeout``."""
        return httpx.Timeout(self.http_timeout_seconds, connect=self.connect_timeout_seconds)


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, returning ``default`` otherwise."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join([os.getenv(HTTP_TIMEOUT_ENV, ""), os.getenv(CONNECT_TIMEOUT_ENV, "")])
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED

    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float(HTTP_TIMEOUT_ENV, DEFAULT_HTTP_TIMEOUT),
        connect_timeout_seconds=_parse_env_float(CONNECT_TIMEOUT_ENV, DEFAULT_CONNECT_TIMEOUT),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = [
    "HTTP_TIMEOUT_ENV",
    "CONNECT_TIMEOUT_ENV",
    "TimeoutConfig",
    "get_timeout_config",
]
