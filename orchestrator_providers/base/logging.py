"""Base structured logging utilities for the provider layer.

All adapters log through children of the shared ``orchestrator_providers``
logger. The base logger owns exactly one JSON console handler
writing to ``sys.stderr``; child loggers carry no handlers of their own and
propagate to it, so each event is emitted once.

The level comes from ``ORCH_PROVIDERS_LOG_LEVEL`` when set, otherwise from the
``level`` argument of the most recent :func:`get_logger` call.

``normalized_log_event`` wraps ``log_event`` and guarantees the canonical keys
``structured``, ``phase``, ``attempt``, ``emitted`` and ``tokens`` (plus
``error_code`` when an error is being reported) so adapter events can be
aggregated uniformly.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from typing import Any, Dict, Mapping

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "orchestrator_providers"
LOG_LEVEL_ENV = "ORCH_PROVIDERS_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_orch_providers_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_orch_providers_console_handler"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level name into an integer constant.

    Accepts DEBUG, INFO, WARN/WARNING, ERROR and CRITICAL case-insensitively.
    Falls back to ``default`` on unknown or empty values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _ensure_base_logger(level: int) -> logging.Logger:
    """Initialize (once) and return the shared base logger.

    Subsequent calls re-apply the environment level and re-point the managed
    console handler at the current ``sys.stderr``, which keeps output visible
    under pytest's ``capsys`` stream swapping.
    """
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)

    if getattr(logger, _BASE_LOGGER_ATTR, False):
        logger.setLevel(desired_level)
        for existing in logger.handlers:
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            existing.setLevel(desired_level)
            if isinstance(existing, logging.StreamHandler) and existing.stream is not sys.stderr:
                if getattr(existing.stream, "closed", False):
                    existing.stream = sys.stderr
                else:
                    with contextlib.suppress(ValueError):
                        existing.setStream(sys.stderr)
            if not isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(JsonFormatter())
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(JsonFormatter())
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(
    name: str = BASE_LOGGER_NAME,
    level: int = logging.INFO,
) -> logging.Logger:
    """Return a logger wired to the shared provider handler.

    Parameters
    ----------
    name: str
        Logger name. Names under ``orchestrator_providers.`` become children
        that propagate to the base handler.
    level: int
        Fallback level when ``ORCH_PROVIDERS_LOG_LEVEL`` is unset.
    """
    base_logger = _ensure_base_logger(level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger

    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit one structured event as a single JSON message.

    Parameters
    ----------
    logger: logging.Logger
        Logger obtained from :func:`get_logger`.
    event: str
        Event name, e.g. ``execute.end``.
    ctx: LogContext | None
        Adapter/model context merged into the payload.
    level: int
        Logging level for the record.
    keep_none: bool
        Preserve ``None``-valued keys (as JSON ``null``) instead of dropping them.
    **fields: Any
        Additional JSON-serializable key/value pairs.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload.update(ctx.to_dict())
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = (
    "structured",
    "phase",
    "attempt",
    "emitted",
    "tokens",
)


def _coerce_tokens(tokens: Any) -> Any:
    """Coerce token usage info into a JSON-friendly mapping (or ``None``)."""
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: bool | None = None,
    tokens: Any = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit an event that always carries the normalized key set.

    ``error_code`` is included only when not ``None``. ``extra_fields`` never
    overwrite a normalized key that already has a value; ``None`` extras are
    dropped.
    """
    base_fields: Dict[str, Any] = {
        "structured": True,
        "phase": phase,
        "attempt": attempt,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None:
            continue
        if base_fields.get(k) is not None:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
    "LogContext",
    "get_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
