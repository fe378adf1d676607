"""DeepSeek adapter package (OpenAI-compatible API)."""

from .client import DeepSeekProvider

__all__ = ["DeepSeekProvider"]
