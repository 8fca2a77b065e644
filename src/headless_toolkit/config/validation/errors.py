"""Config validation errors.

Both setting errors carry the settings field name and, when the value came
from the environment, the variable that supplied it, so an operator sees
``HEADLESS_GRAPHQL_CACHE_TTL`` rather than ``graphql_cache_ttl``.
"""
from __future__ import annotations

from headless_toolkit.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


def _label(setting_name: str, env_key: str | None) -> str:
    return f"'{setting_name}' ({env_key})" if env_key else f"'{setting_name}'"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default received no value from any source."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, env_key: str | None = None) -> None:
        super().__init__(
            f"Required setting {_label(setting_name, env_key)} is missing",
            detail={"setting": setting_name, "env_key": env_key},
        )
        self.setting_name = setting_name
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be coerced or fails validation."""
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        env_key: str | None = None,
    ) -> None:
        super().__init__(
            f"Setting {_label(setting_name, env_key)} has invalid value {value!r}: {reason}",
            # the raw value stays off detail; secrets pass through here too
            detail={"setting": setting_name, "env_key": env_key, "reason": reason},
        )
        self.setting_name = setting_name
        self.env_key = env_key
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
