"""HTTP utilities package for providers.

Exposes the transport contract adapters depend on and the default
``httpx``-backed implementation.
"""

from .transport import JsonTransport, TransportResponse
from .client import HttpxTransport

__all__ = ["JsonTransport", "TransportResponse", "HttpxTransport"]
