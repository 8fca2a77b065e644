"""Config – 12-factor settings and loaders."""

from headless_toolkit.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    HeadlessSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from headless_toolkit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "HeadlessSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
