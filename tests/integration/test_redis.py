"""Integration tests for RedisObjectCacheStore.

Uses testcontainers to spawn a real Redis instance.
Run with: pytest tests/integration/test_redis.py -m integration -v
"""
from __future__ import annotations

import asyncio

import pytest
from testcontainers.redis import RedisContainer

from headless_toolkit.adapters.redis import RedisObjectCacheStore
from headless_toolkit.application.cache import ResponseCache


def _run(coro):  # type: ignore[no-untyped-def]
    return asyncio.run(coro)


def _redis_url(container) -> str:  # type: ignore[no-untyped-def]
    host = container.get_container_host_ip()
    port = container.get_exposed_port(container.port)
    return f"redis://{host}:{port}/0"


@pytest.mark.integration
class TestRedisObjectCacheStoreIntegration:
    """Real Redis object-cache tests."""

    def test_response_cache_round_trip_and_namespace_flush(self) -> None:
        with RedisContainer() as container:
            url = _redis_url(container)

            async def run() -> None:
                store = RedisObjectCacheStore(url)
                cache = ResponseCache(store, ttl=60, namespace="it_graphql")
                calls = 0

                def compute() -> dict:
                    nonlocal calls
                    calls += 1
                    return {"data": {"posts": [1, 2]}}

                await store.set("session", "keep", "it_sessions", 60)
                assert await cache.lookup_or_populate("{ posts }", None, compute) == {"data": {"posts": [1, 2]}}
                assert await cache.lookup_or_populate("{ posts }", None, compute) == {"data": {"posts": [1, 2]}}
                assert calls == 1

                result = await cache.flush()
                assert result.full_store is False
                assert await store.get(cache.key_for("{ posts }"), "it_graphql") is None
                assert await store.get("session", "it_sessions") == "keep"
                await store.close()

            _run(run())
