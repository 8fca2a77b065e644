"""Unit tests for the query ResponseCache."""
from __future__ import annotations

import asyncio
from typing import Any

import pytest

from headless_toolkit.application.cache import (
    InMemoryObjectCacheStore,
    ObjectCacheStore,
    ResponseCache,
    ResponseCacheKey,
)
from headless_toolkit.observability.events import CACHE_FLUSHED, EventEmitter
from headless_toolkit.testing.fakes import FakeClock

QUERY = "query Posts($first: Int) { posts(first: $first) { nodes { id } } }"
RESPONSE = {"data": {"posts": {"nodes": [{"id": "cG9zdDox"}]}}}


class Counter:
    def __init__(self, value: Any = RESPONSE) -> None:
        self.calls = 0
        self.value = value

    def __call__(self) -> Any:
        self.calls += 1
        return self.value


def _cache(**kwargs: Any) -> tuple[ResponseCache, InMemoryObjectCacheStore]:
    store = kwargs.pop("store", None) or InMemoryObjectCacheStore(FakeClock())
    return ResponseCache(store, **kwargs), store


# ---------------------------------------------------------------------------
# ResponseCacheKey
# ---------------------------------------------------------------------------

class TestResponseCacheKey:
    def test_deterministic_for_reordered_variables(self):
        k1 = ResponseCacheKey.for_query(QUERY, {"first": 10, "after": "x"})
        k2 = ResponseCacheKey.for_query(QUERY, {"after": "x", "first": 10})
        assert k1 == k2

    def test_differs_by_variables(self):
        assert ResponseCacheKey.for_query(QUERY, {"first": 1}) != ResponseCacheKey.for_query(QUERY, {"first": 2})

    def test_differs_by_query(self):
        assert ResponseCacheKey.for_query("{ a }") != ResponseCacheKey.for_query("{ b }")

    def test_canonical_forms(self):
        assert ResponseCacheKey.canonical_variables(None) == ""
        assert ResponseCacheKey.canonical_variables({"b": 1, "a": 2}) == '{"a":2,"b":1}'
        assert ResponseCacheKey.canonical_variables("raw") == "raw"

    def test_sha256_hex(self):
        key = ResponseCacheKey.for_query(QUERY)
        assert len(key) == 64
        int(key, 16)


# ---------------------------------------------------------------------------
# Mutation detection
# ---------------------------------------------------------------------------

class TestMutationDetection:
    @pytest.mark.parametrize(
        "query",
        ["mutation { createPost { id } }", "   \n\tmutation Login { login }", "mutationFoo"],
    )
    def test_mutations(self, query):
        cache, _ = _cache()
        assert cache.is_mutation(query) is True

    @pytest.mark.parametrize("query", ["", None, "query { posts }", "{ mutation }", "# mutation\n{ a }"])
    def test_non_mutations(self, query):
        cache, _ = _cache()
        assert cache.is_mutation(query) is False

    def test_custom_keyword(self):
        cache, _ = _cache(mutation_keyword="write")
        assert cache.is_mutation("write { x }") is True
        assert cache.is_mutation("mutation { x }") is False

    def test_blank_keyword_falls_back_to_default(self):
        cache, _ = _cache(mutation_keyword="  ")
        assert cache.is_mutation("mutation { x }") is True

    def test_cache_control(self):
        cache, _ = _cache(ttl=120)
        assert cache.cache_control("mutation { x }") == "no-store, no-cache"
        assert cache.cache_control(QUERY) == "public, max-age=120"


# ---------------------------------------------------------------------------
# lookup_or_populate
# ---------------------------------------------------------------------------

class TestLookupOrPopulate:
    def test_second_call_served_from_cache(self):
        async def run() -> None:
            cache, _ = _cache()
            compute = Counter()
            first = await cache.lookup_or_populate(QUERY, {"first": 1}, compute)
            second = await cache.lookup_or_populate(QUERY, {"first": 1}, compute)
            assert first == RESPONSE
            assert second == RESPONSE
            assert compute.calls == 1
        asyncio.run(run())

    def test_different_variables_miss(self):
        async def run() -> None:
            cache, _ = _cache()
            compute = Counter()
            await cache.lookup_or_populate(QUERY, {"first": 1}, compute)
            await cache.lookup_or_populate(QUERY, {"first": 2}, compute)
            assert compute.calls == 2
        asyncio.run(run())

    def test_async_compute(self):
        async def run() -> None:
            cache, store = _cache()

            async def compute() -> dict:
                return {"data": {"ok": True}}

            assert await cache.lookup_or_populate(QUERY, None, compute) == {"data": {"ok": True}}
            assert store.size(cache.namespace) == 1
        asyncio.run(run())

    def test_mutation_never_reads_or_writes(self):
        async def run() -> None:
            cache, store = _cache()
            mutation = "mutation { updatePost { id } }"
            await store.set(cache.key_for(mutation, None), {"stale": True}, cache.namespace, 600)
            compute = Counter({"data": {"fresh": True}})
            assert await cache.lookup_or_populate(mutation, None, compute) == {"data": {"fresh": True}}
            assert await cache.lookup_or_populate(mutation, None, compute) == {"data": {"fresh": True}}
            assert compute.calls == 2
            assert await store.get(cache.key_for(mutation, None), cache.namespace) == {"stale": True}
            assert store.size() == 1
        asyncio.run(run())

    def test_unserialisable_result_returned_but_not_stored(self):
        async def run() -> None:
            cache, store = _cache()
            value = {"data": {"resolver": lambda: None}}
            compute = Counter(value)
            assert await cache.lookup_or_populate(QUERY, None, compute) is value
            assert store.size() == 0
            await cache.lookup_or_populate(QUERY, None, compute)
            assert compute.calls == 2
        asyncio.run(run())

    def test_lossy_result_not_stored(self):
        async def run() -> None:
            cache, store = _cache()
            await cache.lookup_or_populate(QUERY, None, Counter({"ids": (1, 2)}))
            await cache.lookup_or_populate(QUERY, None, Counter({1: "int key"}))
            assert store.size() == 0
        asyncio.run(run())

    def test_none_result_not_stored(self):
        async def run() -> None:
            cache, store = _cache()
            assert await cache.lookup_or_populate(QUERY, None, Counter(None)) is None
            assert store.size() == 0
        asyncio.run(run())

    def test_entry_expires_after_ttl(self):
        async def run() -> None:
            clock = FakeClock()
            cache, _ = _cache(store=InMemoryObjectCacheStore(clock), ttl=60)
            compute = Counter()
            await cache.lookup_or_populate(QUERY, None, compute)
            clock.advance(seconds=59)
            await cache.lookup_or_populate(QUERY, None, compute)
            assert compute.calls == 1
            clock.advance(seconds=1)
            await cache.lookup_or_populate(QUERY, None, compute)
            assert compute.calls == 2
        asyncio.run(run())

    def test_ttl_defaults(self):
        assert _cache()[0].ttl == 600
        assert _cache(ttl=0)[0].ttl == 600
        assert _cache(ttl=-5)[0].ttl == 600
        assert _cache(ttl=30)[0].ttl == 30


# ---------------------------------------------------------------------------
# flush
# ---------------------------------------------------------------------------

class TestFlush:
    def test_flush_only_own_namespace(self):
        async def run() -> None:
            emitter = EventEmitter()
            cache, store = _cache(emitter=emitter)
            await store.set("other", "keep", "sessions", 600)
            await cache.lookup_or_populate(QUERY, None, Counter())
            result = await cache.flush()
            assert result.flushed is True
            assert result.full_store is False
            assert store.size(cache.namespace) == 0
            assert await store.get("other", "sessions") == "keep"
            [event] = emitter.named(CACHE_FLUSHED)
            assert event.fields == {"flushed": True, "namespace": cache.namespace, "full_store": False}
        asyncio.run(run())

    def test_full_store_fallback_reported(self):
        async def run() -> None:
            emitter = EventEmitter()
            store = InMemoryObjectCacheStore(FakeClock(), supports_namespace_flush=False)
            cache, _ = _cache(store=store, emitter=emitter)
            await store.set("other", "gone", "sessions", 600)
            result = await cache.flush()
            assert result.full_store is True
            assert result.flushed is True
            assert store.size() == 0
            assert emitter.named(CACHE_FLUSHED)[0].fields["full_store"] is True
        asyncio.run(run())

    def test_custom_namespace(self):
        cache, _ = _cache(namespace="site_a_graphql")
        assert cache.namespace == "site_a_graphql"


class TestInMemoryObjectCacheStore:
    def test_protocol_compatible(self):
        assert isinstance(InMemoryObjectCacheStore(), ObjectCacheStore)

    def test_namespaces_are_isolated(self):
        async def run() -> None:
            store = InMemoryObjectCacheStore(FakeClock())
            await store.set("k", 1, "a", 60)
            await store.set("k", 2, "b", 60)
            assert await store.get("k", "a") == 1
            assert await store.get("k", "b") == 2
            assert await store.get("missing", "a") is None
        asyncio.run(run())
