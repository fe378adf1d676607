"""bridgeai.config.env
===================

Provider identifier to credential environment variable mapping.

- ``ENV_MAP`` holds the canonical variable per provider.
- ``ENV_ALIASES`` lists additional accepted names, canonical first.

Helpers return ``None`` for unknown providers or unset variables and never
raise; the client decides whether a missing credential is an error.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "claude": "ANTHROPIC_API_KEY",
    "perplexity": "PERPLEXITY_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
}

ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a placeholder rather than a real key.

    Case-insensitive: contains ``placeholder``, ``changeme`` or ``your-``.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or v.startswith("your-")


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the canonical credential variable for ``provider``, if any."""
    return ENV_MAP.get(provider.lower()) if provider else None


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield accepted credential variable names, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, variable_name)`` of the first non-empty credential.

    ``(None, None)`` when none of the candidate variables is set.
    """
    for name in get_env_var_candidates(provider):
        if val := os.environ.get(name):
            return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
]
