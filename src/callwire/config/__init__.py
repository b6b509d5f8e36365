"""Config – 12-factor settings and loaders."""

from callwire.config.settings import (
    CallwireSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from callwire.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError


def load_settings() -> CallwireSettings:
    """Build :class:`CallwireSettings` from the process environment."""
    return SettingsFactory.create(CallwireSettings, [EnvSettingsLoader()])


__all__ = [
    "CallwireSettings",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_settings",
]
