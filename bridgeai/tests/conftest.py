"""Pytest configuration for the bridgeai unit suite.

Every test runs with an isolated configuration: provider credential
variables are cleared, no ``.env`` or external config file is read, and the
provider registry is restored to its built-in entries afterwards.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List

import pytest

from bridgeai.base.factory import ProviderFactory
from bridgeai.base.logging import get_logger
from bridgeai.base.resilience import retry as retry_module
from bridgeai.config import CONFIG_FILE_ENV, DOTENV_FILE_ENV, reset_config_cache
from bridgeai.config.env import ENV_ALIASES, ENV_MAP
from fakes import ListHandler


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear credentials and file-based config; restore the registry afterwards."""
    names = set(ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for name in names:
        monkeypatch.delenv(name, raising=False)
    for provider in ("OPENAI", "GEMINI", "CLAUDE", "PERPLEXITY", "DEEPSEEK", "MOCK"):
        for suffix in ("MODEL", "BASE_URL", "SYSTEM_MESSAGE"):
            monkeypatch.delenv(f"{provider}_{suffix}", raising=False)
    monkeypatch.delenv(CONFIG_FILE_ENV, raising=False)
    monkeypatch.setenv(DOTENV_FILE_ENV, str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    ProviderFactory.reset()
    reset_config_cache()


@pytest.fixture()
def register_adapter() -> Callable[..., Any]:
    """Return ``register(name, adapter, requires_api_key=False)``."""

    def _register(name: str, adapter: Any, requires_api_key: bool = False) -> Any:
        ProviderFactory.register(name, lambda **_: adapter, requires_api_key=requires_api_key)
        return adapter

    return _register


@pytest.fixture()
def sleeps(monkeypatch: pytest.MonkeyPatch) -> List[float]:
    """Record retry waits (seconds) instead of sleeping."""
    recorded: List[float] = []

    async def _fake_sleep(delay: float) -> None:
        recorded.append(delay)

    monkeypatch.setattr(retry_module, "_sleep", _fake_sleep)
    return recorded


@pytest.fixture()
def log_capture() -> Iterator[ListHandler]:
    """Collect structured events logged anywhere under ``bridgeai``."""
    root = get_logger()
    handler = ListHandler()
    root.addHandler(handler)
    try:
        yield handler
    finally:
        root.removeHandler(handler)
