"""Fireworks.ai provider adapter package."""

from .client import (
    FIREWORKS_VARIANTS,
    FireworksProvider,
    FireworksVariant,
    create_coding,
    create_quick,
    create_reasoning,
    resolve_variant,
)

__all__ = [
    "FIREWORKS_VARIANTS",
    "FireworksProvider",
    "FireworksVariant",
    "create_coding",
    "create_quick",
    "create_reasoning",
    "resolve_variant",
]
