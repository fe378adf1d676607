"""Interfaces (Protocols) split into single-class modules.

``bridgeai.base.interfaces`` re-exports these as the stable import path.
"""

from .llm_provider import LLMProvider
from .supports_streaming import SupportsStreaming
from .has_default_model import HasDefaultModel

__all__ = [
    "LLMProvider",
    "SupportsStreaming",
    "HasDefaultModel",
]
