from __future__ import annotations

import json

from bridgeai.config import (
    CONFIG_FILE_ENV,
    DOTENV_FILE_ENV,
    get_model,
    get_provider_config,
    reset_config_cache,
)
from bridgeai.config.env import (
    ENV_ALIASES,
    ENV_MAP,
    get_env_var_candidates,
    get_env_var_name,
    is_placeholder,
    resolve_provider_key,
)


def test_env_map_contains_expected_keys():
    assert ENV_MAP == {  # nosec B101
        "openai": "OPENAI_API_KEY",
        "gemini": "GEMINI_API_KEY",
        "claude": "ANTHROPIC_API_KEY",
        "perplexity": "PERPLEXITY_API_KEY",
        "deepseek": "DEEPSEEK_API_KEY",
    }
    assert get_env_var_name("mock") is None  # nosec B101


def test_get_env_var_name_and_aliases():
    assert get_env_var_name("OpenAI") == "OPENAI_API_KEY"  # nosec B101
    assert ENV_ALIASES["gemini"][0] == "GEMINI_API_KEY"  # nosec B101
    assert list(get_env_var_candidates("gemini")) == ["GEMINI_API_KEY", "GOOGLE_API_KEY"]  # nosec B101


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")  # nosec B101
    assert is_placeholder("ChangeMe123")  # nosec B101
    assert is_placeholder("your-api-key")  # nosec B101
    assert not is_placeholder("real-value")  # nosec B101
    assert not is_placeholder(None)  # nosec B101


def test_resolve_provider_key_prefers_canonical(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "canon")
    monkeypatch.setenv("GOOGLE_API_KEY", "alias")
    assert resolve_provider_key("gemini") == ("canon", "GEMINI_API_KEY")  # nosec B101


def test_resolve_provider_key_uses_alias(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "alias")
    assert resolve_provider_key("gemini") == ("alias", "GOOGLE_API_KEY")  # nosec B101
    assert resolve_provider_key("openai") == (None, None)  # nosec B101


def test_defaults_per_provider():
    assert get_model("openai") == "gpt-4-turbo-preview"  # nosec B101
    assert get_model("gemini") == "gemini-1.5-flash"  # nosec B101
    assert get_model("claude") == "claude-3-5-sonnet-20240620"  # nosec B101
    deepseek = get_provider_config("deepseek")
    assert deepseek["model"] == "deepseek-chat"  # nosec B101
    assert deepseek["base_url"] == "https://api.deepseek.com"  # nosec B101
    assert get_provider_config("perplexity")["base_url"] == "https://api.perplexity.ai"  # nosec B101
    assert get_provider_config("unknown") == {}  # nosec B101


def test_layering_file_then_env_then_overrides(monkeypatch, tmp_path):
    cfg_file = tmp_path / "providers.yaml"
    cfg_file.write_text("openai:\n  model: gpt-4o-mini\n  base_url: https://file.local\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(cfg_file))
    monkeypatch.setenv("OPENAI_BASE_URL", "https://env.local")
    monkeypatch.setenv("OPENAI_API_KEY", "env-key")  # pragma: allowlist secret
    reset_config_cache()

    cfg = get_provider_config("openai", overrides={"base_url": None, "system_message": "hi"})
    assert cfg["model"] == "gpt-4o-mini"  # nosec B101
    assert cfg["base_url"] == "https://env.local"  # nosec B101
    assert cfg["api_key"] == "env-key"  # nosec B101
    assert cfg["system_message"] == "hi"  # nosec B101

    assert get_provider_config("openai", overrides={"model": "explicit"})["model"] == "explicit"  # nosec B101


def test_json_config_file(monkeypatch, tmp_path):
    cfg_file = tmp_path / "providers.json"
    cfg_file.write_text(json.dumps({"claude": {"model": "claude-3-opus-20240229"}}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(cfg_file))
    reset_config_cache()
    assert get_model("claude") == "claude-3-opus-20240229"  # nosec B101


def test_dotenv_file_fills_missing_variables(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text(
        "# comment\nexport PERPLEXITY_API_KEY='pplx-123'\nDEEPSEEK_MODEL=deepseek-reasoner\n\nnot a pair\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(DOTENV_FILE_ENV, str(dotenv))
    # registered with monkeypatch so the values loaded from the file are undone
    monkeypatch.setenv("PERPLEXITY_API_KEY", "your-key-here")
    monkeypatch.setenv("DEEPSEEK_MODEL", "placeholder")
    reset_config_cache()

    assert get_provider_config("perplexity")["api_key"] == "pplx-123"  # nosec B101
    assert get_model("deepseek") == "deepseek-reasoner"  # nosec B101


def test_dotenv_does_not_override_real_values(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("OPENAI_API_KEY=from-file\n", encoding="utf-8")
    monkeypatch.setenv(DOTENV_FILE_ENV, str(dotenv))
    monkeypatch.setenv("OPENAI_API_KEY", "from-process")  # pragma: allowlist secret
    reset_config_cache()
    assert get_provider_config("openai")["api_key"] == "from-process"  # nosec B101
