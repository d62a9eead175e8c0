from __future__ import annotations

import json

import pytest

from metadesc_providers.config import get_provider_config, reset_config_cache
from metadesc_providers.config.env import (
    ENV_ALIASES,
    ENV_MAP,
    env_var_hint,
    get_env_var_name,
    is_placeholder,
    resolve_provider_key,
)


def test_env_map_contains_expected_keys():
    for p in ["openai", "anthropic", "gemini", "deepseek", "xai"]:
        assert p in ENV_MAP  # nosec B101


def test_get_env_var_name_and_aliases():
    assert get_env_var_name("openai") == "OPENAI_API_KEY"  # nosec B101
    assert get_env_var_name("Anthropic") == "ANTHROPIC_API_KEY"  # nosec B101
    assert ENV_ALIASES["gemini"][0] == "GEMINI_API_KEY"  # nosec B101
    assert env_var_hint("gemini") == ["GEMINI_API_KEY", "GOOGLE_API_KEY"]  # nosec B101
    assert env_var_hint("nope") == []  # nosec B101


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")  # nosec B101
    assert is_placeholder("ChangeMe123")  # nosec B101
    assert is_placeholder("example-key")  # nosec B101
    assert is_placeholder("your-openai-key")  # nosec B101
    assert not is_placeholder("sk-real-value")  # nosec B101
    assert not is_placeholder(None)  # nosec B101


def test_resolve_provider_key_skips_placeholders(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "your-key-here")
    monkeypatch.setenv("GOOGLE_API_KEY", "real-google-key")
    assert resolve_provider_key("gemini") == ("real-google-key", "GOOGLE_API_KEY")  # nosec B101
    assert resolve_provider_key("openai") == (None, None)  # nosec B101


def test_defaults_without_env():
    cfg = get_provider_config("anthropic")
    assert cfg["model"] == "claude-3-sonnet-20240229"  # nosec B101
    assert cfg["base_url"] == "https://api.anthropic.com/v1/"  # nosec B101
    assert "api_key" not in cfg  # nosec B101
    assert get_provider_config("openai")["model"] == "gpt-3.5-turbo"  # nosec B101


def test_precedence_file_env_override(monkeypatch, tmp_path):
    cfg_file = tmp_path / "providers.json"
    cfg_file.write_text(
        json.dumps({"openai": {"model": "gpt-4o-mini", "timeout_seconds": 20, "base_url": "https://file.invalid/"}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("METADESC_CONFIG_FILE", str(cfg_file))
    reset_config_cache()

    cfg = get_provider_config("openai")
    assert cfg["model"] == "gpt-4o-mini"  # nosec B101
    assert cfg["timeout_seconds"] == 20.0  # nosec B101

    monkeypatch.setenv("OPENAI_MODEL", "gpt-4")
    monkeypatch.setenv("OPENAI_TIMEOUT_SECONDS", "9.5")
    cfg = get_provider_config("openai")
    assert cfg["model"] == "gpt-4" and cfg["timeout_seconds"] == 9.5  # nosec B101
    assert cfg["base_url"] == "https://file.invalid/"  # nosec B101

    cfg = get_provider_config("openai", overrides={"model": "gpt-4-turbo", "base_url": None})
    assert cfg["model"] == "gpt-4-turbo"  # nosec B101
    assert cfg["base_url"] == "https://file.invalid/"  # nosec B101


def test_invalid_timeout_is_dropped(monkeypatch):
    monkeypatch.setenv("DEEPSEEK_TIMEOUT_SECONDS", "soon")
    assert "timeout_seconds" not in get_provider_config("deepseek")  # nosec B101
    monkeypatch.setenv("DEEPSEEK_TIMEOUT_SECONDS", "-3")
    assert "timeout_seconds" not in get_provider_config("deepseek")  # nosec B101


def test_malformed_config_file_raises(monkeypatch, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv("METADESC_CONFIG_FILE", str(bad))
    reset_config_cache()
    with pytest.raises(ValueError):
        get_provider_config("openai")


def test_dotenv_file_is_loaded_once(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text('# keys\nANTHROPIC_API_KEY="sk-ant-from-dotenv"\n\nNOT_A_PAIR\n', encoding="utf-8")
    # Registered with monkeypatch so the loader's write is undone after the test
    monkeypatch.setenv("ANTHROPIC_API_KEY", "placeholder")
    monkeypatch.setenv("DOTENV_FILE", str(env_file))
    reset_config_cache()

    assert get_provider_config("anthropic")["api_key"] == "sk-ant-from-dotenv"  # nosec B101


def test_real_env_key_wins_over_dotenv(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("OPENAI_API_KEY=sk-from-file\n", encoding="utf-8")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")
    monkeypatch.setenv("DOTENV_FILE", str(env_file))
    reset_config_cache()

    assert get_provider_config("openai")["api_key"] == "sk-from-env"  # nosec B101
