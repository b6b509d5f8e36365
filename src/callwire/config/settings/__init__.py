"""Config settings – 12-factor env-based configuration."""
from callwire.config.settings.base import CallwireSettings, Settings
from callwire.config.settings.factory import SettingsFactory
from callwire.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "CallwireSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
