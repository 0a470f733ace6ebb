"""Tests for emitkit.config.settings."""

import logging

import pytest
from pydantic import ValidationError

from emitkit.config.settings import Settings, get_settings, resolve_log_level
from emitkit.core.exceptions import ConfigurationError


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("EMITKIT_LOG_LEVEL", raising=False)
        monkeypatch.delenv("EMITKIT_LOG_JSON", raising=False)
        settings = Settings(_env_file=None)

        assert settings.log_level == "WARNING"
        assert settings.log_json is False
        assert settings.log_level_number == logging.WARNING

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EMITKIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("EMITKIT_LOG_JSON", "true")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == logging.DEBUG
        assert settings.log_json is True

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestResolveLogLevel:
    def test_names_are_case_insensitive(self) -> None:
        assert resolve_log_level(" info ") == logging.INFO
        assert resolve_log_level("ERROR") == logging.ERROR

    def test_unknown_name(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_log_level("chatty")

        assert exc_info.value.details == {"log_level": "chatty"}
