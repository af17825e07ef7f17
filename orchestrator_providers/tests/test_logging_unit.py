"""Unit coverage for structured logging utilities and helpers."""

from __future__ import annotations

import json
import logging

from orchestrator_providers.base.log_support import JsonFormatter
from orchestrator_providers.base.logging import (
    BASE_LOGGER_NAME,
    LogContext,
    _parse_level,
    get_logger,
    log_event,
    normalized_log_event,
)


def test_get_logger_env_overrides_level(monkeypatch, capsys):
    monkeypatch.setenv("ORCH_PROVIDERS_LOG_LEVEL", "ERROR")
    logger = get_logger(name="orchestrator_providers.test", level=logging.DEBUG)
    # INFO log shouldn't appear
    logger.info("hello")
    out = capsys.readouterr().err
    assert out == ""  # nosec B101 - asserts are appropriate in unit tests
    logger.error("fail")
    out = capsys.readouterr().err
    data = json.loads(out.strip())
    assert data["level"] == "ERROR"  # nosec B101 - asserts are appropriate in unit tests
    assert data["msg"] == "fail"  # nosec B101 - asserts are appropriate in unit tests
    assert data["logger"] == "orchestrator_providers.test"  # nosec B101 - asserts are appropriate in unit tests


def test_child_logger_has_no_handlers_and_propagates():
    logger = get_logger(name="orchestrator_providers.child")
    base = logging.getLogger(BASE_LOGGER_NAME)
    assert logger.handlers == []  # nosec B101 - asserts are appropriate in unit tests
    assert logger.propagate is True  # nosec B101 - asserts are appropriate in unit tests
    assert base.propagate is False  # nosec B101 - asserts are appropriate in unit tests
    managed = [h for h in base.handlers if getattr(h, "_orch_providers_console_handler", False)]
    assert len(managed) == 1  # nosec B101 - asserts are appropriate in unit tests


def test_repeated_get_logger_does_not_duplicate_lines(log_stream):
    for _ in range(3):
        logger = get_logger(name="orchestrator_providers.repeat")
    logger.info("alpha")
    lines = [ln for ln in log_stream.getvalue().splitlines() if ln]
    assert lines == ["alpha"]  # nosec B101 - ensures single emission


def test_log_event_payload_and_none_handling(log_stream):
    logger = get_logger(name="orchestrator_providers.events")
    ctx = LogContext(provider="gemini", model="m1", extra={"variant": None, "region": "eu"})
    log_event(logger, "custom.event", ctx, count=2, dropped=None)
    payload = json.loads(log_stream.getvalue().strip())
    assert payload == {  # nosec B101 - asserts are appropriate in unit tests
        "event": "custom.event",
        "provider": "gemini",
        "model": "m1",
        "region": "eu",
        "count": 2,
    }


def test_normalized_log_event_includes_required_keys(log_stream):
    logger = get_logger(name="orchestrator_providers.test2")
    ctx = LogContext(provider="p", model="m")
    normalized_log_event(
        logger,
        "execute.end",
        ctx,
        phase="finalize",
        attempt=1,
        error_code=None,
        emitted=True,
        tokens={"prompt": 1, "completion": 2, "total": 3},
        extra_field=123,
        phase_override=None,
    )
    payload = json.loads(log_stream.getvalue().strip())
    for k in ("structured", "phase", "attempt", "emitted", "tokens"):
        assert k in payload  # nosec B101 - asserts are fine in tests
    assert "error_code" not in payload  # nosec B101 - asserts are fine in tests
    assert payload["extra_field"] == 123  # nosec B101 - asserts are fine in tests
    assert "phase_override" not in payload  # nosec B101 - asserts are fine in tests


def test_normalized_log_event_keeps_none_tokens_and_error_code(log_stream):
    logger = get_logger(name="orchestrator_providers.test3")
    normalized_log_event(logger, "execute.error", None, phase="finalize", error_code="auth")
    payload = json.loads(log_stream.getvalue().strip())
    assert payload["tokens"] is None  # nosec B101 - asserts are fine in tests
    assert payload["attempt"] is None  # nosec B101 - asserts are fine in tests
    assert payload["error_code"] == "auth"  # nosec B101 - asserts are fine in tests


def test_normalized_extras_do_not_clobber_values(log_stream):
    logger = get_logger(name="orchestrator_providers.test4")
    normalized_log_event(logger, "e", None, phase="start", emitted=False, structured="nope")
    payload = json.loads(log_stream.getvalue().strip())
    assert payload["structured"] is True  # nosec B101 - asserts are fine in tests


def test_json_formatter_hoists_json_message() -> None:
    """Ensure the formatter hoists JSON message keys without double escaping."""

    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="orchestrator_providers.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=json.dumps({"provider": "claude", "event": "execute.start"}),
        args=(),
        exc_info=None,
    )
    payload = json.loads(formatter.format(record))
    assert payload["provider"] == "claude"  # nosec B101 - validates hoisting
    assert payload["level"] == "INFO"  # nosec B101 - validates envelope
    assert "msg" not in payload  # nosec B101 - structured events suppress raw message noise


def test_parse_level_values():
    assert _parse_level("warn") == logging.WARNING  # nosec B101 - asserts are fine in tests
    assert _parse_level(" debug ") == logging.DEBUG  # nosec B101 - asserts are fine in tests
    assert _parse_level("bogus", default=logging.ERROR) == logging.ERROR  # nosec B101 - asserts are fine in tests
    assert _parse_level(None) == logging.INFO  # nosec B101 - asserts are fine in tests


def test_base_handler_always_formats_json():
    get_logger(name="orchestrator_providers.fmt")
    base = logging.getLogger(BASE_LOGGER_NAME)
    managed = [h for h in base.handlers if getattr(h, "_orch_providers_console_handler", False)]
    assert all(isinstance(h.formatter, JsonFormatter) for h in managed)  # nosec B101 - asserts are fine in tests
