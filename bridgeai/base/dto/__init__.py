"""Validated parameter objects for adapter construction."""

from .adapter_params import AdapterParams

__all__ = ["AdapterParams"]
