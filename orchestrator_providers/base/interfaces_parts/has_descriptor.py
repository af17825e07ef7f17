"""HasDescriptor Protocol (single-class module).

Adapters fix a :class:`ProviderDescriptor` at construction. This Protocol
supplies the read-only accessors derived from it so each adapter only has to
provide ``descriptor`` itself.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import Pricing, ProviderDescriptor


@runtime_checkable
class HasDescriptor(Protocol):
    """Structural contract for objects exposing a ``ProviderDescriptor``.

    Explicit subclasses inherit the default property implementations below.
    """

    @property
    def descriptor(self) -> ProviderDescriptor:
        ...

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def supports_tool_calling(self) -> bool:
        return self.descriptor.supports_tool_calling

    @property
    def supports_streaming(self) -> bool:
        return self.descriptor.supports_streaming

    @property
    def max_context_tokens(self) -> int:
        return self.descriptor.max_context_tokens

    @property
    def cost_per_1m_tokens(self) -> Pricing:
        return self.descriptor.cost_per_1m_tokens


__all__ = ["HasDescriptor"]
