"""Kernel content – UnitOfWork and UnitOfWorkContext.

A unit of work is one logical pass of host activity (typically one incoming
HTTP request to the backend). It carries the CDN purge debounce flag so that
bulk edits touching many entities purge at most once.
"""
from __future__ import annotations

import dataclasses
from contextvars import ContextVar
from uuid import uuid4


@dataclasses.dataclass
class UnitOfWork:
    """Mutable, request-scoped invalidation state."""

    id: str = dataclasses.field(default_factory=lambda: str(uuid4()))
    purge_requested: bool = False


_UOW_VAR: ContextVar[UnitOfWork | None] = ContextVar("_headless_unit_of_work", default=None)


class UnitOfWorkContext:
    """Ambient unit of work stored in a ``ContextVar``."""

    @staticmethod
    def begin() -> UnitOfWork:
        """Install a fresh unit of work (debounce flag cleared) and return it."""
        unit = UnitOfWork()
        _UOW_VAR.set(unit)
        return unit

    @staticmethod
    def get() -> UnitOfWork | None:
        return _UOW_VAR.get()

    @staticmethod
    def current() -> UnitOfWork:
        unit = _UOW_VAR.get()
        if unit is None:
            unit = UnitOfWorkContext.begin()
        return unit

    @staticmethod
    def clear() -> None:
        _UOW_VAR.set(None)


__all__ = ["UnitOfWork", "UnitOfWorkContext"]
