"""
Static cost estimation for chat completions.

Prices are USD per 1,000 tokens, keyed ``"provider:model"``. The table is an
estimate for budgeting and logging, not a billing source of truth; unknown
provider/model pairs cost ``0.0``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class ModelRate:
    """Per-1K-token prices for one provider/model pair.

    Attributes:
        prompt: USD per 1,000 prompt (input) tokens.
        completion: USD per 1,000 completion (output) tokens.
    """

    prompt: float
    completion: float


PRICING: Dict[str, ModelRate] = {
    "openai:gpt-4-turbo-preview": ModelRate(prompt=0.01, completion=0.03),
    "openai:gpt-4-turbo": ModelRate(prompt=0.01, completion=0.03),
    "openai:gpt-4o": ModelRate(prompt=0.0025, completion=0.01),
    "openai:gpt-4o-mini": ModelRate(prompt=0.00015, completion=0.0006),
    "openai:gpt-3.5-turbo": ModelRate(prompt=0.0005, completion=0.0015),
    "claude:claude-3-5-sonnet-20240620": ModelRate(prompt=0.003, completion=0.015),
    "claude:claude-3-5-haiku-20241022": ModelRate(prompt=0.0008, completion=0.004),
    "claude:claude-3-opus-20240229": ModelRate(prompt=0.015, completion=0.075),
    "gemini:gemini-1.5-flash": ModelRate(prompt=0.000075, completion=0.0003),
    "gemini:gemini-1.5-pro": ModelRate(prompt=0.00125, completion=0.005),
    "deepseek:deepseek-chat": ModelRate(prompt=0.00027, completion=0.0011),
    "perplexity:llama-3-sonar-large-32k-online": ModelRate(prompt=0.001, completion=0.001),
}


def rate_for(provider: str, model: Optional[str]) -> Optional[ModelRate]:
    if not model:
        return None
    return PRICING.get(f"{provider}:{model}")


def calculate_cost(provider: str, model: Optional[str], prompt_tokens: int, completion_tokens: int) -> float:
    """Estimate the USD cost of one completion.

    Returns ``prompt_tokens / 1000 * rate.prompt + completion_tokens / 1000 *
    rate.completion`` or ``0.0`` when the pair is not in :data:`PRICING`.
    """
    rate = rate_for(provider, model)
    if rate is None:
        return 0.0
    return (prompt_tokens / 1000) * rate.prompt + (completion_tokens / 1000) * rate.completion


__all__ = ["PRICING", "ModelRate", "rate_for", "calculate_cost"]
