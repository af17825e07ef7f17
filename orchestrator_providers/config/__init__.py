"""Unified configuration layer for provider adapters.

Goals
-----
* Centralize defaults (models, base URLs, Fireworks variant).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ORCH_PROVIDERS_CONFIG_FILE
    3. Environment variables
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_provider_config(provider: str)``.

Environment Variable Conventions
--------------------------------
<PREFIX>_API_KEY, <PREFIX>_BASE_URL, <PREFIX>_MODEL, <PREFIX>_VARIANT
where the prefix is FIREWORKS, ANTHROPIC (for ``claude``) or GEMINI.
GOOGLE_API_KEY is accepted as an alias for GEMINI_API_KEY.

External Config File (Optional)
-------------------------------
If ORCH_PROVIDERS_CONFIG_FILE names an existing file it is parsed as JSON
when the suffix is ``.json`` and as YAML otherwise. Structure example:

```
fireworks:
  variant: reasoning
claude:
  base_url: https://proxy.internal/anthropic/v1
gemini:
  model: gemini-2.0-flash
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* canonical_provider_name(provider: str) -> str
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MODEL,
    CLAUDE_PROVIDER_NAME,
    FIREWORKS_DEFAULT_BASE_URL,
    FIREWORKS_DEFAULT_VARIANT,
    FIREWORKS_PROVIDER_NAME,
    GEMINI_DEFAULT_BASE_URL,
    GEMINI_DEFAULT_MODEL,
    GEMINI_PROVIDER_NAME,
)
from .env import get_env_setting, resolve_provider_key

CONFIG_FILE_ENV = "ORCH_PROVIDERS_CONFIG_FILE"

# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    FIREWORKS_PROVIDER_NAME: {
        "variant": FIREWORKS_DEFAULT_VARIANT,
        "base_url": FIREWORKS_DEFAULT_BASE_URL,
    },
    CLAUDE_PROVIDER_NAME: {
        "model": ANTHROPIC_DEFAULT_MODEL,
        "base_url": ANTHROPIC_DEFAULT_BASE_URL,
    },
    GEMINI_PROVIDER_NAME: {
        "model": GEMINI_DEFAULT_MODEL,
        "base_url": GEMINI_DEFAULT_BASE_URL,
    },
}

# Alternate names accepted wherever an adapter name is expected
PROVIDER_ALIASES: Dict[str, str] = {"anthropic": CLAUDE_PROVIDER_NAME}

ENV_FIELD_MAP = {
    "model": "MODEL",
    "base_url": "BASE_URL",
    "variant": "VARIANT",
}

_FILE_CACHE: Dict[Tuple[str, float], Dict[str, Any]] = {}


def canonical_provider_name(provider: str) -> str:
    """Normalize ``provider`` (case, whitespace, aliases) to an adapter name."""
    name = (provider or "").lower().strip()
    return PROVIDER_ALIASES.get(name, name)


def reset_config_cache() -> None:
    """Forget any previously parsed external config file."""
    _FILE_CACHE.clear()


def _load_external_config() -> Dict[str, Any]:
    """Parse the file named by ``ORCH_PROVIDERS_CONFIG_FILE`` (cached per path/mtime).

    A missing variable or file yields ``{}``. A file that does not parse, or
    whose top level is not a mapping, raises ``ValueError``.
    """
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.is_file():
        return {}
    key = (str(p.resolve()), p.stat().st_mtime)
    if key in _FILE_CACHE:
        return _FILE_CACHE[key]
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text) if p.suffix.lower() == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ValueError(f"could not parse provider config file '{p}': {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"provider config file '{p}' must contain a mapping at the top level")
    _FILE_CACHE[key] = data
    return data


def _file_section(name: str) -> Dict[str, Any]:
    """Return the merged file sections for ``name`` and any alias of it."""
    data = _load_external_config()
    merged: Dict[str, Any] = {}
    for alias, target in PROVIDER_ALIASES.items():
        if target == name and isinstance(data.get(alias), dict):
            merged |= data[alias]
    if isinstance(data.get(name), dict):
        merged |= data[name]
    return merged


def _env_overrides(name: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, suffix in ENV_FIELD_MAP.items():
        val = get_env_setting(name, suffix)
        if val is not None:
            out[field] = val
    key, _ = resolve_provider_key(name)
    if key:
        out["api_key"] = key
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for an adapter.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored.
    """
    name = canonical_provider_name(provider)
    cfg: Dict[str, Any] = {}

    # 1. Defaults
    cfg |= DEFAULTS.get(name, {})

    # 2. External config file section
    cfg |= _file_section(name)

    # 3. Env overrides
    cfg |= _env_overrides(name)

    # 4. Explicit overrides arg
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


__all__ = [
    "CONFIG_FILE_ENV",
    "DEFAULTS",
    "PROVIDER_ALIASES",
    "canonical_provider_name",
    "get_provider_config",
    "reset_config_cache",
]
