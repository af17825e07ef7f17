"""Interfaces (Protocols) split into single-class modules.

This package provides one Protocol per file while allowing
``orchestrator_providers.base.interfaces`` to re-export a stable API.
"""

from .llm_provider import LLMProvider
from .has_descriptor import HasDescriptor

__all__ = [
    "LLMProvider",
    "HasDescriptor",
]
