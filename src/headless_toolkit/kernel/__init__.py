"""Kernel – framework-agnostic building blocks."""

from headless_toolkit.kernel.content import (
    ChangeType,
    ContentChangeEvent,
    EntityKind,
    UnitOfWork,
    UnitOfWorkContext,
)
from headless_toolkit.kernel.errors import (
    ApplicationError,
    BaseError,
    ForbiddenError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ChangeType",
    "ContentChangeEvent",
    "EntityKind",
    "ForbiddenError",
    "InfrastructureError",
    "SerializationError",
    "UnitOfWork",
    "UnitOfWorkContext",
]
