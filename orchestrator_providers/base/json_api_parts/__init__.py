"""Shared building blocks for JSON-over-HTTPS vendor adapters.

Re-exports provide a stable import surface for the concrete adapters.
"""

from .base import BaseJsonApiProvider
from .parsed_completion import ParsedCompletion

__all__ = ["BaseJsonApiProvider", "ParsedCompletion"]
