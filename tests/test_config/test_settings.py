"""Testes para config.settings (FSMSettings e carga via ambiente)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from config.settings import FSMSettings, get_fsm_settings
from config.settings.fsm import _load_fsm_settings_from_env


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_fsm_settings.cache_clear()
    yield
    get_fsm_settings.cache_clear()


class TestFSMSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("FSM_SERVICE_NAME", "FSM_LOG_LEVEL", "FSM_HISTORY_LIMIT", "FSM_LOG_GUARD_DENIALS"):
            monkeypatch.delenv(key, raising=False)

        settings = _load_fsm_settings_from_env()

        assert settings.service_name == "simplefsm"
        assert settings.log_level == "INFO"
        assert settings.history_limit == 100
        assert settings.log_guard_denials is False

    def test_values_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FSM_SERVICE_NAME", "worker")
        monkeypatch.setenv("FSM_LOG_LEVEL", "debug")
        monkeypatch.setenv("FSM_HISTORY_LIMIT", "5")
        monkeypatch.setenv("FSM_LOG_GUARD_DENIALS", "yes")

        settings = get_fsm_settings()

        assert settings.service_name == "worker"
        assert settings.log_level == "DEBUG"
        assert settings.history_limit == 5
        assert settings.log_guard_denials is True

    def test_get_fsm_settings_is_cached(self) -> None:
        assert get_fsm_settings() is get_fsm_settings()

    def test_invalid_values_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FSMSettings(history_limit=-1)
        with pytest.raises(ValidationError, match="FSM_LOG_LEVEL"):
            FSMSettings(log_level="LOUD")
        with pytest.raises(ValidationError):
            FSMSettings(service_name="")

    def test_settings_are_frozen(self) -> None:
        settings = FSMSettings()
        with pytest.raises(ValidationError):
            settings.history_limit = 3  # type: ignore[misc]
