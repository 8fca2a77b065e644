"""FastAPI adapter – preview verification, cache flush and unit-of-work middleware."""
from headless_toolkit.adapters.fastapi.middleware import UnitOfWorkMiddleware
from headless_toolkit.adapters.fastapi.routers import DEFAULT_PREFIX, GraphqlCacheRouter, PreviewRouter

__all__ = [
    "DEFAULT_PREFIX",
    "GraphqlCacheRouter",
    "PreviewRouter",
    "UnitOfWorkMiddleware",
]
