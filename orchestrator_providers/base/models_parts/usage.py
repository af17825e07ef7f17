"""
Pricing and usage accounting DTOs.

``Pricing`` is fixed per adapter instance and expresses USD per one million
tokens. ``Usage`` carries vendor-reported token counts for a completed call
together with the exact cost derived from the adapter's pricing.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Pricing:
    """Per-million-token price table.

    Attributes:
        input: USD per 1M prompt (input) tokens.
        output: USD per 1M completion (output) tokens.
    """

    input: float
    output: float

    def __post_init__(self) -> None:
        if self.input < 0 or self.output < 0:
            raise ValueError("pricing must be non-negative")

    @classmethod
    def from_pair(cls, pair: Tuple[float, float]) -> "Pricing":
        """Build a ``Pricing`` from an ``(input, output)`` tuple."""
        input_price, output_price = pair
        return cls(input=float(input_price), output=float(output_price))

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class Usage:
    """Token usage and cost for a completed call.

    Attributes:
        input_tokens: Vendor-reported prompt tokens; never estimated post-hoc.
        output_tokens: Vendor-reported completion tokens.
        cost: Exact cost in USD computed from the adapter's fixed pricing.

    Raises:
        ValueError: When any field is negative.
    """

    input_tokens: int
    output_tokens: int
    cost: float

    def __post_init__(self) -> None:
        if self.input_tokens < 0 or self.output_tokens < 0:
            raise ValueError("token counts must be non-negative")
        if self.cost < 0:
            raise ValueError("cost must be non-negative")

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the usage."""
        return asdict(self)


__all__ = ["Pricing", "Usage"]
