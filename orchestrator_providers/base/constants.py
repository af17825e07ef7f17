"""Base shared constants for provider adapters.

Central location to avoid scattering magic strings and default numbers across
the model, helper, and adapter layers.

Security
--------
This module contains only generic sentinel strings and numeric defaults.
There are no credentials or tokens embedded.

# pragma: allowlist secret
"""
from __future__ import annotations

# Request defaults applied when a caller does not set the field explicitly.
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 4096

# Heuristic cost estimation: 1 token ~= 4 characters; output falls back to
# this many tokens when the request carries no explicit ``max_tokens``.
CHARS_PER_TOKEN = 4
ESTIMATE_DEFAULT_OUTPUT_TOKENS = 2048

# Pricing tables are expressed per one million tokens.
TOKENS_PER_MILLION = 1_000_000

# Availability probe request shape.
PROBE_PROMPT = "Hello"
PROBE_MAX_TOKENS = 10

# Context framing used for both cost estimation and vendor submission.
CONTEXT_OPEN_TAG = "\n\n<context>\n"
CONTEXT_CLOSE_TAG = "\n</context>\n\n"
CONTEXT_DOCUMENT_SEPARATOR = "\n\n"

# Tool auto-selection value for chat-completions vendors.
TOOL_CHOICE_AUTO = "auto"

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

# Default HTTP timeouts (seconds)
DEFAULT_HTTP_TIMEOUT = 60.0
DEFAULT_CONNECT_TIMEOUT = 10.0

__all__ = [
    "DEFAULT_TEMPERATURE",
    "DEFAULT_MAX_TOKENS",
    "CHARS_PER_TOKEN",
    "ESTIMATE_DEFAULT_OUTPUT_TOKENS",
    "TOKENS_PER_MILLION",
    "PROBE_PROMPT",
    "PROBE_MAX_TOKENS",
    "CONTEXT_OPEN_TAG",
    "CONTEXT_CLOSE_TAG",
    "CONTEXT_DOCUMENT_SEPARATOR",
    "TOOL_CHOICE_AUTO",
    "MISSING_API_KEY_ERROR",
    "DEFAULT_HTTP_TIMEOUT",
    "DEFAULT_CONNECT_TIMEOUT",
]
