"""OpenAI adapter.

Uses the shared OpenAI-style implementation with the SDK's default endpoint.
A ``base_url`` (argument, ``OPENAI_BASE_URL`` or config file) points it at
any compatible gateway.
"""

from __future__ import annotations

from ..base.openai_style_parts import OpenAIStyleProfile, OpenAIStyleProvider

OPENAI_PROFILE = OpenAIStyleProfile(provider_key="openai")


class OpenAIProvider(OpenAIStyleProvider):
    """OpenAI Chat Completions backend (default model ``gpt-4-turbo-preview``)."""

    profile = OPENAI_PROFILE


__all__ = ["OpenAIProvider", "OPENAI_PROFILE"]
