"""Unit tests for config settings and loaders."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from callwire.config import (
    CallwireSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
    load_settings,
)


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    ratio: float = 0.5
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"
    api_key: str


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_loads_numbers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("APP_RATIO", "0.25")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.port == 9000
        assert settings.ratio == 0.25

    @pytest.mark.parametrize("raw,expected", [("true", True), ("ON", True), ("1", True), ("no", False), ("0", False)])
    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
        monkeypatch.setenv("APP_DEBUG", raw)
        assert EnvSettingsLoader().load(AppSettings).debug is expected

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "http://a.com, http://b.com,")
        assert EnvSettingsLoader().load(AppSettings).allowed_origins == ["http://a.com", "http://b.com"]

    def test_defaults_preserved(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("APP_HOST", "APP_PORT", "APP_DEBUG", "APP_ALLOWED_ORIGINS"):
            monkeypatch.delenv(key, raising=False)
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "localhost"
        assert settings.port == 8080
        assert settings.allowed_origins == []

    def test_bad_int_is_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "eighty")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(AppSettings)
        assert exc_info.value.setting_name == "APP_PORT"

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_API_KEY", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_API_KEY"


class TestDotenvSettingsLoader:
    def test_env_file_overrides_environment(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CALLWIRE_REQUEST_ID_ENV_KEY", "HTTP_X_STALE")
        env_file = tmp_path / ".env"
        env_file.write_text("CALLWIRE_REQUEST_ID_ENV_KEY=HTTP_X_TRACE\n")
        settings = DotenvSettingsLoader(str(env_file), override=True).load(CallwireSettings)
        assert settings.request_id_env_key == "HTTP_X_TRACE"

    def test_environment_wins_without_override(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CALLWIRE_REQUEST_ID_ENV_KEY", "HTTP_X_KEPT")
        env_file = tmp_path / ".env"
        env_file.write_text("CALLWIRE_REQUEST_ID_ENV_KEY=HTTP_X_TRACE\n")
        settings = DotenvSettingsLoader(str(env_file)).load(CallwireSettings)
        assert settings.request_id_env_key == "HTTP_X_KEPT"


# ---------------------------------------------------------------------------
# CallwireSettings
# ---------------------------------------------------------------------------


class TestCallwireSettings:
    def test_defaults(self) -> None:
        settings = CallwireSettings()
        assert settings.request_id_env_key == "HTTP_X_REQUEST_ID"
        assert settings.log_level == "INFO"
        assert settings.log_json is True

    def test_log_level_is_normalised(self) -> None:
        assert CallwireSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            CallwireSettings(log_level="chatty")
        assert exc_info.value.setting_name == "log_level"

    def test_empty_env_key(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            CallwireSettings(request_id_env_key="")

    def test_load_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CALLWIRE_LOG_LEVEL", "error")
        monkeypatch.setenv("CALLWIRE_LOG_JSON", "false")
        settings = load_settings()
        assert settings.log_level == "ERROR"
        assert settings.log_json is False

    def test_invalid_environment_value_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CALLWIRE_LOG_LEVEL", "loud")
        with pytest.raises(InvalidSettingValueError):
            load_settings()
