"""orchestrator_providers.config.defaults
=====================================

Central place for the small, stable default values used by the vendor
adapters: endpoints, protocol versions, model identifiers, pricing tables and
context-window limits.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Keep adapters free of magic literals so that a pricing or model change is a
  data edit in one file.

Pricing values are USD per one million tokens as published by each vendor at
the time the adapter was written. This module intentionally avoids importing
from other packages to prevent circular dependencies.
"""

from __future__ import annotations

# ---- Fireworks.ai (chat-completions wire format) ----
FIREWORKS_PROVIDER_NAME = "fireworks"
FIREWORKS_DEFAULT_BASE_URL = "https://api.fireworks.ai/inference/v1"
FIREWORKS_CHAT_PATH = "/chat/completions"
FIREWORKS_MAX_CONTEXT_TOKENS = 128_000

FIREWORKS_QUICK_MODEL = "accounts/fireworks/models/llama-v3p1-8b-instruct"
FIREWORKS_CODING_MODEL = "accounts/fireworks/models/llama-v3p3-70b-instruct"
FIREWORKS_REASONING_MODEL = "accounts/fireworks/models/deepseek-v3"

# (input, output) per 1M tokens
FIREWORKS_QUICK_PRICING = (0.20, 0.20)
FIREWORKS_CODING_PRICING = (0.90, 0.90)
FIREWORKS_REASONING_PRICING = (1.14, 1.14)

FIREWORKS_DEFAULT_VARIANT = "coding"

# ---- Anthropic Claude (messages wire format) ----
CLAUDE_PROVIDER_NAME = "claude"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
ANTHROPIC_MESSAGES_PATH = "/messages"
ANTHROPIC_API_VERSION = "2023-06-01"
ANTHROPIC_DEFAULT_MODEL = "claude-sonnet-4-20250514"
ANTHROPIC_PRICING = (3.00, 15.00)
# Known Claude models and their (input, output) prices per 1M tokens.
ANTHROPIC_MODEL_PRICING = {
    ANTHROPIC_DEFAULT_MODEL: ANTHROPIC_PRICING,
    "claude-opus-4-20250514": (15.00, 75.00),
    "claude-3-7-sonnet-latest": (3.00, 15.00),
    "claude-3-5-sonnet-latest": (3.00, 15.00),
    "claude-3-5-haiku-latest": (0.80, 4.00),
}
ANTHROPIC_MAX_CONTEXT_TOKENS = 200_000

# ---- Google Gemini (contents/parts wire format) ----
GEMINI_PROVIDER_NAME = "gemini"
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_GENERATE_PATH_TEMPLATE = "/models/{model}:generateContent"
GEMINI_DEFAULT_MODEL = "gemini-2.0-flash-exp"
GEMINI_PRICING = (0.10, 0.40)
GEMINI_MODEL_PRICING = {
    GEMINI_DEFAULT_MODEL: GEMINI_PRICING,
    "gemini-2.0-flash": (0.10, 0.40),
    "gemini-1.5-pro": (1.25, 5.00),
    "gemini-1.5-flash": (0.075, 0.30),
}
GEMINI_MAX_CONTEXT_TOKENS = 1_000_000


__all__ = [
    # Fireworks
    "FIREWORKS_PROVIDER_NAME",
    "FIREWORKS_DEFAULT_BASE_URL",
    "FIREWORKS_CHAT_PATH",
    "FIREWORKS_MAX_CONTEXT_TOKENS",
    "FIREWORKS_QUICK_MODEL",
    "FIREWORKS_CODING_MODEL",
    "FIREWORKS_REASONING_MODEL",
    "FIREWORKS_QUICK_PRICING",
    "FIREWORKS_CODING_PRICING",
    "FIREWORKS_REASONING_PRICING",
    "FIREWORKS_DEFAULT_VARIANT",
    # Anthropic
    "CLAUDE_PROVIDER_NAME",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_MESSAGES_PATH",
    "ANTHROPIC_API_VERSION",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_PRICING",
    "ANTHROPIC_MODEL_PRICING",
    "ANTHROPIC_MAX_CONTEXT_TOKENS",
    # Gemini
    "GEMINI_PROVIDER_NAME",
    "GEMINI_DEFAULT_BASE_URL",
    "GEMINI_GENERATE_PATH_TEMPLATE",
    "GEMINI_DEFAULT_MODEL",
    "GEMINI_PRICING",
    "GEMINI_MODEL_PRICING",
    "GEMINI_MAX_CONTEXT_TOKENS",
]
