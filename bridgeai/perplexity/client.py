"""Perplexity adapter using the OpenAI-compatible Chat Completions API.

Perplexity's online models do not accept function tools, so tool
definitions are not sent and responses carry no tool-call list.
"""

from __future__ import annotations

from ..base.openai_style_parts import OpenAIStyleProfile, OpenAIStyleProvider
from ..config.defaults import PERPLEXITY_DEFAULT_BASE_URL

PERPLEXITY_PROFILE = OpenAIStyleProfile(
    provider_key="perplexity",
    default_base_url=PERPLEXITY_DEFAULT_BASE_URL,
    supports_tools=False,
)


class PerplexityProvider(OpenAIStyleProvider):
    profile = PERPLEXITY_PROFILE


__all__ = ["PerplexityProvider", "PERPLEXITY_PROFILE"]
