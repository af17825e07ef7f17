"""orchestrator_providers.config.env
=================================

Centralized environment variable mapping and helpers for provider settings.

Purpose
-------
- Single source of truth for mapping adapter names to environment variable
  names (canonical and aliases).
- Small lookup helpers used by :func:`orchestrator_providers.config.get_provider_config`.

Design Notes
------------
- ``ENV_PREFIX`` maps an adapter name to the prefix of its variables
  (``<PREFIX>_API_KEY``, ``<PREFIX>_BASE_URL`` ...). The Claude adapter reads
  ``ANTHROPIC_*`` variables.
- ``ENV_ALIASES`` lists extra accepted API key variables with the canonical
  name first to establish precedence.

Failure Modes
-------------
- Helpers return ``None`` for unknown adapters or unset variables and never
  raise; callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Adapter name → environment variable prefix
ENV_PREFIX: Dict[str, str] = {
    "fireworks": "FIREWORKS",
    "claude": "ANTHROPIC",
    "anthropic": "ANTHROPIC",
    "gemini": "GEMINI",
}

# Adapter name → ordered tuple of acceptable API key variables (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a placeholder rather than a credential.

    Heuristics (case-insensitive, surrounding spaces ignored): contains
    ``placeholder``, ``changeme`` or ``example``, or starts with ``your_``.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("your_")


def get_env_prefix(provider: str) -> str:
    """Return the variable prefix for ``provider`` (upper-cased name if unmapped)."""
    p = (provider or "").lower().strip()
    return ENV_PREFIX.get(p, p.upper())


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable API key variable names for ``provider``, canonical first."""
    canonical = f"{get_env_prefix(provider)}_API_KEY"
    yield canonical
    for alias in ENV_ALIASES.get((provider or "").lower().strip(), ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve an API key for ``provider`` from the process environment.

    Returns ``(value, env_var_used)`` for the first candidate holding a
    non-empty, non-placeholder value, or ``(None, None)``.
    """
    for name in get_env_var_candidates(provider):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


def get_env_setting(provider: str, suffix: str) -> Optional[str]:
    """Return ``<PREFIX>_<SUFFIX>`` from the environment, or ``None`` when unset/empty."""
    return os.environ.get(f"{get_env_prefix(provider)}_{suffix}") or None


__all__ = [
    "ENV_PREFIX",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_prefix",
    "get_env_var_candidates",
    "resolve_provider_key",
    "get_env_setting",
]
