"""Application – invalidation use cases (framework-agnostic)."""

from headless_toolkit.application.cache import ResponseCache, TagDeriver
from headless_toolkit.application.invalidation import InvalidationPipeline
from headless_toolkit.application.purge import CdnIntegration, CdnPurgeCoordinator
from headless_toolkit.application.revalidation import ContentGuard, RevalidationDispatcher

__all__ = [
    "CdnIntegration",
    "CdnPurgeCoordinator",
    "ContentGuard",
    "InvalidationPipeline",
    "ResponseCache",
    "RevalidationDispatcher",
    "TagDeriver",
]
