"""Perplexity adapter package (OpenAI-compatible API, no tool calling)."""

from .client import PerplexityProvider

__all__ = ["PerplexityProvider"]
