"""Static profile of an OpenAI-compatible backend.

Backends that speak the Chat Completions protocol differ only in identity,
endpoint and default model; a profile captures exactly that so the shared
implementation can be reused without per-backend subclass logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OpenAIStyleProfile:
    """Identity of one OpenAI-compatible backend.

    Attributes:
        provider_key: Canonical provider identifier (also the config section).
        package: Distribution to install when the SDK is missing.
        default_base_url: Endpoint used when config and caller name none;
            ``None`` keeps the SDK default.
        supports_tools: Whether function tools are sent to the backend.
    """

    provider_key: str
    package: str = "openai"
    default_base_url: Optional[str] = None
    supports_tools: bool = True


__all__ = ["OpenAIStyleProfile"]
