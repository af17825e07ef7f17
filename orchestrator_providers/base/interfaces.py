"""
Provider-agnostic interfaces (Protocols) for the providers layer.

This module re-exports Protocols split into single-class modules under
``orchestrator_providers.base.interfaces_parts`` while keeping imports stable
for upstream code.
"""

from __future__ import annotations

from .interfaces_parts import HasDescriptor, LLMProvider

__all__ = [
    "LLMProvider",
    "HasDescriptor",
]
