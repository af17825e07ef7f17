"""DTO validation package for providers."""

from .adapter_params import AdapterParams

__all__ = ["AdapterParams"]
