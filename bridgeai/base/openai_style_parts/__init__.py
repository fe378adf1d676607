"""OpenAI-compatible backend implementation.

Re-exports provide a stable import surface for the concrete backends.
"""

from .base import OpenAIStyleProvider
from .profile import OpenAIStyleProfile

__all__ = [
    "OpenAIStyleProvider",
    "OpenAIStyleProfile",
]
