"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from headless_toolkit.config.settings.base import Settings
from headless_toolkit.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


def env_key(settings_class: type[Settings], field_name: str) -> str:
    """``HeadlessSettings.revalidation_url`` -> ``HEADLESS_REVALIDATION_URL``."""
    prefix = getattr(settings_class, "_prefix", "")
    return f"{prefix}_{field_name}".upper().lstrip("_")


def _is_required(field: dataclasses.Field) -> bool:  # type: ignore[type-arg]
    return (
        field.default is dataclasses.MISSING
        and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
    )


class SettingsLoader(abc.ABC):
    """Port: one source of setting values.

    :meth:`values` returns only the fields the source sets explicitly, so
    :class:`~headless_toolkit.config.settings.factory.SettingsFactory` can
    layer several sources without a later one resetting earlier values to
    their defaults.
    """

    @abc.abstractmethod
    def values(self, settings_class: type[Settings]) -> dict[str, Any]: ...

    def load(self, settings_class: type[T]) -> T:
        provided = self.values(settings_class)
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            if field.name not in provided and _is_required(field):
                raise MissingRequiredSettingError(
                    field.name, env_key=env_key(settings_class, field.name)
                )
        try:
            return settings_class(**provided)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}") from exc


class EnvSettingsLoader(SettingsLoader):
    """Read settings from ``{PREFIX}_{FIELD}`` environment variables.

    Empty variables count as unset. Values are coerced to the field's
    declared type; lists are comma separated.
    """

    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        provided: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = env_key(settings_class, field.name)
            raw = os.environ.get(key)
            if raw:
                provided[field.name] = self._coerce(field.name, raw, field.type, key)
        return provided

    def _coerce(self, name: str, value: str, type_hint: Any, key: str | None = None) -> Any:  # noqa: PLR0911
        hint = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", str(type_hint))
        origin = getattr(type_hint, "__origin__", None)
        if type_hint is bool or hint == "bool":
            return value.lower() in ("1", "true", "yes", "on")
        try:
            if type_hint is int or hint == "int":
                return int(value)
            if type_hint is float or hint == "float":
                return float(value)
        except ValueError as exc:
            raise InvalidSettingValueError(name, value, str(exc), env_key=key) from exc
        if origin is list or hint.startswith("list"):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


class DotenvSettingsLoader(EnvSettingsLoader):
    """Load a ``.env`` file into the environment, then read it like :class:`EnvSettingsLoader`."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        load_dotenv(self._env_file, override=self._override)
        return super().values(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "env_key"]
