from __future__ import annotations

import pytest

from event_thumbnail.config import AppConfig, GeminiConfig


def test_gemini_config_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    with pytest.raises(ValueError, match="GEMINI_API_KEY"):
        GeminiConfig.from_env()


def test_blank_api_key_counts_as_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "   ")

    with pytest.raises(ValueError):
        GeminiConfig.from_env()


def test_gemini_config_uses_fixed_generation_parameters(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", " secret ")

    config = GeminiConfig.from_env()

    assert config.api_key == "secret"
    assert config.model == "gemini-2.5-flash-image"
    assert config.aspect_ratio == "16:9"


def test_app_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.delenv("THUMBNAIL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("THUMBNAIL_SHOW_DATA_URI", raising=False)

    config = AppConfig.from_env()

    assert config.log_level == "INFO"
    assert config.show_data_uri is False


def test_app_config_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv("THUMBNAIL_LOG_LEVEL", "debug")
    monkeypatch.setenv("THUMBNAIL_SHOW_DATA_URI", "yes")

    config = AppConfig.from_env()

    assert config.log_level == "debug"
    assert config.show_data_uri is True
