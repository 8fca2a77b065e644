"""Config settings – SettingsFactory layers loaders and overrides."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from headless_toolkit.config.settings.base import Settings
from headless_toolkit.config.settings.loaders import SettingsLoader, env_key
from headless_toolkit.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)
from headless_toolkit.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

_log = get_logger(__name__)


class SettingsFactory:
    """Build a settings dataclass from layered sources.

    Each loader contributes only the values it sets explicitly; later loaders
    win field by field and *overrides* win over everything. A loader raising
    :class:`ConfigError` is logged and skipped.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        MissingRequiredSettingError
            A field without a default is absent from every source.
        InvalidSettingValueError
            A value cannot be coerced, or validation rejects the merged values.
        ConfigError
            On any other construction failure.
        """
        merged: dict[str, Any] = {}
        for loader in loaders or []:
            try:
                provided = loader.values(settings_cls)
            except ConfigError as exc:
                _log.warning("settings_loader_skipped", loader=type(loader).__name__, error=exc.message)
                continue
            merged.update(provided)
        merged.update(overrides or {})

        missing = [
            field.name
            for field in dataclasses.fields(settings_cls)  # type: ignore[arg-type]
            if field.name not in merged
            and field.default is dataclasses.MISSING
            and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
        ]
        if missing:
            raise MissingRequiredSettingError(missing[0], env_key=env_key(settings_cls, missing[0]))

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
