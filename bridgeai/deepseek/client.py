"""DeepSeek adapter using the OpenAI-compatible Chat Completions API.

Only the profile differs from the OpenAI adapter: endpoint
``https://api.deepseek.com`` and default model ``deepseek-chat``.
"""

from __future__ import annotations

from ..base.openai_style_parts import OpenAIStyleProfile, OpenAIStyleProvider
from ..config.defaults import DEEPSEEK_DEFAULT_BASE_URL

DEEPSEEK_PROFILE = OpenAIStyleProfile(provider_key="deepseek", default_base_url=DEEPSEEK_DEFAULT_BASE_URL)


class DeepSeekProvider(OpenAIStyleProvider):
    profile = DEEPSEEK_PROFILE


__all__ = ["DeepSeekProvider", "DEEPSEEK_PROFILE"]
