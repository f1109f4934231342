from __future__ import annotations

import pydantic
import pytest

from meta_collector.config import GOOGLEBOT_UA, Settings, load_settings


def test_settings_defaults() -> None:
    settings = Settings.model_validate({})
    assert settings.user_agent == GOOGLEBOT_UA
    assert settings.read_chunk_size == 65536
    assert settings.log_json is False


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("META_COLLECTOR_USER_AGENT", "bot/2")
    monkeypatch.setenv("META_COLLECTOR_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("META_COLLECTOR_LOG_JSON", "true")
    settings = load_settings()
    assert settings.user_agent == "bot/2"
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True


def test_chunk_size_must_be_positive() -> None:
    with pytest.raises(pydantic.ValidationError):
        Settings.model_validate({"META_COLLECTOR_READ_CHUNK_SIZE": 0})
