"""Application cache – tag derivation and the query response cache."""
from headless_toolkit.application.cache.keys import ResponseCacheKey
from headless_toolkit.application.cache.response import FlushResult, ResponseCache
from headless_toolkit.application.cache.store import InMemoryObjectCacheStore, ObjectCacheStore
from headless_toolkit.application.cache.tags import TagDeriver, TagExtender

__all__ = [
    "FlushResult",
    "InMemoryObjectCacheStore",
    "ObjectCacheStore",
    "ResponseCache",
    "ResponseCacheKey",
    "TagDeriver",
    "TagExtender",
]
