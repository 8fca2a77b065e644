"""Redis adapter – object-cache store for the response cache."""
from headless_toolkit.adapters.redis.object_cache import RedisObjectCacheStore

__all__ = ["RedisObjectCacheStore"]
