"""Kernel content – change events and unit-of-work state."""
from headless_toolkit.kernel.content.event import CacheTag, ChangeType, ContentChangeEvent, EntityKind
from headless_toolkit.kernel.content.unit_of_work import UnitOfWork, UnitOfWorkContext

__all__ = [
    "CacheTag",
    "ChangeType",
    "ContentChangeEvent",
    "EntityKind",
    "UnitOfWork",
    "UnitOfWorkContext",
]
