"""Provider Factory utilities.

Purpose
-------
Centralize creation of adapter instances implementing ``LLMProvider``.
Adapters are imported lazily with ``importlib`` so importing the factory does
not import every vendor module.

Configuration
-------------
Constructor arguments come from :func:`orchestrator_providers.config.get_provider_config`
merged with caller-supplied values (explicit arguments win). A missing API key
is reported as a :class:`ProviderError` with ``ErrorCode.AUTH`` before any
adapter is constructed.

Timeout and fallback semantics
------------------------------
- When ``timeout_seconds`` is configured and no transport is supplied, the
  adapter gets an ``HttpxTransport`` with that timeout.
- The factory performs no retries or fallbacks; it either returns an instance
  or raises a clear error.

Scope
-----
Supported names: ``fireworks``, ``claude`` (alias ``anthropic``), ``gemini``.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from ..config import canonical_provider_name, get_provider_config
from .constants import MISSING_API_KEY_ERROR
from .dto.adapter_params import AdapterParams
from .errors import ErrorCode, ProviderError
from .http import HttpxTransport


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized.

    Failure modes include:
    - The provider name is not registered in the factory mapping.
    - The provider module cannot be imported or the adapter class is missing.
    - The adapter constructor rejected its arguments (e.g. unknown variant).
    """


class ProviderFactory:
    """Create provider adapters based on a name (e.g., ``"gemini"``).

    Design notes
    ------------
    - Uses ``importlib.import_module`` for explicit import semantics.
    - ``accepts`` lists the configuration keys each adapter constructor takes
      besides ``api_key`` and ``transport``; other configured keys are not
      forwarded.
    - Raises :class:`UnknownProviderError` with precise messages for unknown
      providers, import failures, missing classes and constructor errors.
    """

    _PROVIDERS: Dict[str, Dict[str, Any]] = {
        "fireworks": {
            "module": "orchestrator_providers.fireworks.client",
            "class": "FireworksProvider",
            "accepts": ("variant", "base_url"),
        },
        "claude": {
            "module": "orchestrator_providers.anthropic.client",
            "class": "ClaudeProvider",
            "accepts": ("model", "base_url"),
        },
        "gemini": {
            "module": "orchestrator_providers.gemini.client",
            "class": "GeminiProvider",
            "accepts": ("model", "base_url"),
        },
    }

    _CONFIG_KEYS = ("api_key", "model", "variant", "base_url", "timeout_seconds")

    @classmethod
    def create(
        cls,
        provider: str,
        *,
        params: Optional[AdapterParams] = None,
        **kwargs: Any,
    ) -> Any:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Adapter name (case-insensitive; ``anthropic`` maps to ``claude``).
        params:
            Optional :class:`AdapterParams`; explicit ``kwargs`` take precedence.
        **kwargs:
            Constructor overrides. ``transport`` is passed through unchanged.

        Returns
        -------
        Any
            Instance implementing ``LLMProvider``.

        Raises
        ------
        UnknownProviderError
            Unknown provider, import failure, missing class or constructor error.
        ProviderError
            No API key could be resolved (``ErrorCode.AUTH``).
        """
        merged = cls._coerce_params(params, kwargs)

        name = canonical_provider_name(provider)
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        overrides = {k: merged.pop(k) for k in cls._CONFIG_KEYS if k in merged}
        cfg = get_provider_config(name, overrides)

        api_key = cfg.get("api_key")
        if not api_key:
            raise ProviderError(
                code=ErrorCode.AUTH,
                message=MISSING_API_KEY_ERROR,
                provider=name,
                model=cfg.get("model"),
            )

        ctor_kwargs: Dict[str, Any] = {"api_key": api_key}
        for key in spec.get("accepts", ()):
            if cfg.get(key) is not None:
                ctor_kwargs[key] = cfg[key]
        timeout = cfg.get("timeout_seconds")
        if "transport" not in merged and timeout is not None:
            ctor_kwargs["transport"] = HttpxTransport(timeout=float(timeout))
        ctor_kwargs.update(merged)

        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        try:
            return klass(**ctor_kwargs)
        except (TypeError, ValueError) as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' adapter constructor: {exc}"
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported adapter names in deterministic order."""
        return tuple(cls._PROVIDERS.keys())

    @staticmethod
    def _coerce_params(params: Optional[AdapterParams], kwargs: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge ``AdapterParams`` into ``kwargs``.

        Values explicitly provided in ``kwargs`` take precedence; ``None``
        fields of ``params`` are ignored so they never mask configuration.
        """
        if params is None:
            return dict(kwargs)
        merged: Dict[str, Any] = dict(params.model_dump(exclude_none=True))
        merged.update(kwargs)
        return merged


__all__ = ["ProviderFactory", "UnknownProviderError"]
