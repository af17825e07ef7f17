"""LLMProvider Protocol (single-class module).

Defines the contract every vendor adapter implements: one asynchronous
``execute`` call, a zero-I/O cost estimate, a boolean health probe, and the
read-only descriptor fields routing code uses to pick an adapter.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..models import Pricing, ProviderDescriptor, Request, Response


@runtime_checkable
class LLMProvider(Protocol):
    """Uniform interface over API-incompatible LLM backends.

    Implementations map ``Request`` to their vendor wire schema, decode the
    vendor reply into ``Response`` with exact cost, and never leak vendor
    payload shapes upstream. Adapters keep no state between calls.
    """

    @property
    def name(self) -> str:
        """Adapter identifier, e.g. ``"fireworks"``."""
        ...

    @property
    def model(self) -> str:
        """Model identifier fixed at construction."""
        ...

    @property
    def descriptor(self) -> ProviderDescriptor:
        ...

    @property
    def supports_tool_calling(self) -> bool:
        ...

    @property
    def supports_streaming(self) -> bool:
        ...

    @property
    def max_context_tokens(self) -> int:
        ...

    @property
    def cost_per_1m_tokens(self) -> Pricing:
        ...

    async def execute(self, request: Request) -> Response:
        """Issue exactly one vendor call and return the normalized response.

        Raises:
            ProviderHTTPError: Vendor answered with a non-2xx status.
            MalformedResponseError: Body is not valid JSON or lacks the
                documented fields.
            httpx.HTTPError: Transport-level failure, propagated unchanged.
        """
        ...

    def estimate_cost(self, request: Request) -> float:
        """Pre-call heuristic cost in USD; performs no I/O."""
        ...

    async def check_availability(self) -> bool:
        """Return True iff a minimal real call yields non-empty content.

        Never raises; any failure is reported as ``False``.
        """
        ...


__all__ = ["LLMProvider"]
