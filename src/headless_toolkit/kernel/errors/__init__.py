"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ForbiddenError
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError

None of these escape the invalidation pipeline or preview-token
verification; they describe failures at the configuration and adapter edges.
"""

from headless_toolkit.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
)
from headless_toolkit.kernel.errors.base import BaseError
from headless_toolkit.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ForbiddenError",
    "InfrastructureError",
    "SerializationError",
]
