"""Offline fixtures for adapter tests: no ``.env``, no config file, no provider env overrides."""

from __future__ import annotations

from typing import Iterator

import pytest

from bridgeai.config import CONFIG_FILE_ENV, DOTENV_FILE_ENV, reset_config_cache


@pytest.fixture(autouse=True)
def offline_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    for provider in ("OPENAI", "GEMINI", "CLAUDE", "PERPLEXITY", "DEEPSEEK"):
        for suffix in ("MODEL", "BASE_URL", "SYSTEM_MESSAGE"):
            monkeypatch.delenv(f"{provider}_{suffix}", raising=False)
    monkeypatch.delenv(CONFIG_FILE_ENV, raising=False)
    monkeypatch.setenv(DOTENV_FILE_ENV, str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()
