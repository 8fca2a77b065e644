"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class UnitOfWorkProcessor:
    """structlog processor that tags log events with the active unit of work id."""

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from headless_toolkit.kernel.content import UnitOfWorkContext

        unit = UnitOfWorkContext.get()
        if unit is not None:
            event_dict.setdefault("unit_of_work", unit.id)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["UnitOfWorkProcessor", "get_logger"]
