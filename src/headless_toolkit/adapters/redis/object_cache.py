"""Redis adapter – RedisObjectCacheStore."""
from __future__ import annotations

import json
from typing import Any

from headless_toolkit.kernel.errors import SerializationError
from headless_toolkit.observability.logging import get_logger

_log = get_logger(__name__)


def _require_redis() -> Any:
    try:
        import redis.asyncio as aioredis
        return aioredis
    except ImportError as exc:
        raise ImportError("Install 'headless-toolkit[redis]' to use the Redis adapter") from exc


class RedisObjectCacheStore:
    """ObjectCacheStore on ``redis.asyncio``.

    Entries live under ``{namespace}:{key}`` as compact JSON with a native
    Redis expiry, so a namespace can be flushed with ``SCAN`` + ``DEL``
    without touching anything else in the database.
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        client: Any = None,
        scan_count: int = 500,
        **kwargs: Any,
    ) -> None:
        if client is None:
            aioredis = _require_redis()
            client = aioredis.from_url(url or "redis://localhost:6379/0", **kwargs)
        self._client = client
        self._scan_count = scan_count

    @staticmethod
    def _key(namespace: str, key: str) -> str:
        return f"{namespace}:{key}"

    async def get(self, key: str, namespace: str) -> Any:
        raw = await self._client.get(self._key(namespace, key))
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            _log.warning("redis_cache_entry_undecodable", namespace=namespace, key=key)
            return None

    async def set(self, key: str, value: Any, namespace: str, ttl: int) -> None:
        try:
            data = json.dumps(value, separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Cannot cache value for key {key!r}",
                payload_type=type(value).__name__,
                cause=exc,
            ) from exc
        await self._client.set(self._key(namespace, key), data, ex=ttl)

    async def flush_namespace(self, namespace: str) -> bool:
        batch: list[Any] = []
        removed = 0
        async for redis_key in self._client.scan_iter(match=f"{namespace}:*", count=self._scan_count):
            batch.append(redis_key)
            if len(batch) >= self._scan_count:
                removed += await self._client.delete(*batch)
                batch = []
        if batch:
            removed += await self._client.delete(*batch)
        _log.debug("redis_namespace_flushed", namespace=namespace, removed=removed)
        return True

    async def flush_all(self) -> bool:
        await self._client.flushdb()
        return True

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisObjectCacheStore"]
