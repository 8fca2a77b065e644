"""Config settings – 12-factor env-based configuration."""
from headless_toolkit.config.settings.base import HeadlessSettings, Settings
from headless_toolkit.config.settings.factory import SettingsFactory
from headless_toolkit.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "HeadlessSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
