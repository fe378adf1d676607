"""
Provider-agnostic interfaces (Protocols) for backend adapters.

Re-exports the single-class modules under ``bridgeai.base.interfaces_parts``
to keep one stable import path.
"""

from __future__ import annotations

from .interfaces_parts import (
    HasDefaultModel,
    LLMProvider,
    SupportsStreaming,
)

__all__ = [
    "LLMProvider",
    "SupportsStreaming",
    "HasDefaultModel",
]
