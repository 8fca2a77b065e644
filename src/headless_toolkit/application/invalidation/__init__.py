"""Application invalidation – ordered multi-layer cache invalidation."""
from headless_toolkit.application.invalidation.pipeline import (
    PURGE_PRIORITY,
    REVALIDATION_PRIORITY,
    InvalidationHandler,
    InvalidationPipeline,
)

__all__ = [
    "PURGE_PRIORITY",
    "REVALIDATION_PRIORITY",
    "InvalidationHandler",
    "InvalidationPipeline",
]
