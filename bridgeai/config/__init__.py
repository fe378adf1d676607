"""Layered configuration for backends.

Sources are merged in a predictable order (later wins):

1. Built-in defaults (``bridgeai.config.defaults``)
2. Optional external file (JSON or YAML) named by ``BRIDGEAI_CONFIG_FILE``
3. Environment variables: ``<PROVIDER>_MODEL``, ``<PROVIDER>_BASE_URL``,
   ``<PROVIDER>_SYSTEM_MESSAGE`` and the credential variables of
   ``bridgeai.config.env.ENV_MAP``
4. Explicit overrides passed by the caller

A ``.env`` file (path from ``BRIDGEAI_DOTENV_FILE``, default ``.env``) is read
once before the environment is consulted; it never replaces a real value
already present in the process environment.

External file example::

    openai:
      model: gpt-4o-mini
    deepseek:
      base_url: https://proxy.internal/deepseek

Public API
----------
* get_provider_config(provider, overrides=None) -> dict
* get_model(provider) -> str | None
* reset_config_cache()
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    CLAUDE_DEFAULT_MODEL,
    DEEPSEEK_DEFAULT_BASE_URL,
    DEEPSEEK_DEFAULT_MODEL,
    GEMINI_DEFAULT_MODEL,
    MOCK_DEFAULT_MODEL,
    OPENAI_DEFAULT_MODEL,
    PERPLEXITY_DEFAULT_BASE_URL,
    PERPLEXITY_DEFAULT_MODEL,
)
from .env import is_placeholder, resolve_provider_key

CONFIG_FILE_ENV = "BRIDGEAI_CONFIG_FILE"
DOTENV_FILE_ENV = "BRIDGEAI_DOTENV_FILE"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {"model": OPENAI_DEFAULT_MODEL},
    "gemini": {"model": GEMINI_DEFAULT_MODEL},
    "claude": {"model": CLAUDE_DEFAULT_MODEL},
    "perplexity": {"model": PERPLEXITY_DEFAULT_MODEL, "base_url": PERPLEXITY_DEFAULT_BASE_URL},
    "deepseek": {"model": DEEPSEEK_DEFAULT_MODEL, "base_url": DEEPSEEK_DEFAULT_BASE_URL},
    "mock": {"model": MOCK_DEFAULT_MODEL},
}

ENV_FIELD_MAP = {
    "model": "MODEL",
    "base_url": "BASE_URL",
    "system_message": "SYSTEM_MESSAGE",
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Parse ``KEY=VALUE`` lines from the dotenv file into ``os.environ``.

    Comments and blank lines are skipped. Existing variables are only
    replaced when they hold a placeholder value.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    path = os.getenv(DOTENV_FILE_ENV, ".env")
    if not os.path.isfile(path):
        return
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            if k.startswith("export "):
                k = k[len("export "):].strip()
            v = v.strip().strip('"').strip("'")
            if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                os.environ[k] = v


def _load_external_config() -> Dict[str, Any]:
    """Load and cache the external config file; JSON first, then YAML."""
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    data: Any = {}
    if path and Path(path).is_file():
        text = Path(path).read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            data = yaml.safe_load(text) or {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val:
            out[field] = val
    key, _ = resolve_provider_key(provider)
    if key:
        out["api_key"] = key
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for ``provider``.

    Merge order (later wins): defaults -> external file -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored.
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = dict(DEFAULTS.get(name, {}))

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


def reset_config_cache() -> None:
    """Forget the cached external file and dotenv state (used by tests)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
    "DEFAULTS",
    "get_provider_config",
    "get_model",
    "reset_config_cache",
]
