"""Offline mock adapter for tests and local development."""

from .client import MockProvider

__all__ = ["MockProvider"]
