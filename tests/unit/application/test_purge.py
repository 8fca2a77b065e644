"""Unit tests for CdnPurgeCoordinator."""
from __future__ import annotations

import asyncio

from headless_toolkit.application.cache import InMemoryObjectCacheStore, ResponseCache
from headless_toolkit.application.purge import CdnIntegration, CdnPurgeCoordinator
from headless_toolkit.kernel.content import ChangeType, ContentChangeEvent, UnitOfWork
from headless_toolkit.observability.events import CACHE_FLUSHED, CDN_PURGED, EventEmitter
from headless_toolkit.testing.fakes import FakeCdnIntegration, FakeClock


def _coordinator(cdn, emitter=None):
    emitter = emitter or EventEmitter()
    store = InMemoryObjectCacheStore(FakeClock())
    cache = ResponseCache(store, emitter=emitter)
    return CdnPurgeCoordinator(cdn, response_cache=cache, emitter=emitter), cache, store


class TestCdnPurgeCoordinator:
    def test_fake_satisfies_port(self):
        assert isinstance(FakeCdnIntegration(), CdnIntegration)

    def test_many_triggers_in_one_unit_purge_once(self):
        async def run() -> None:
            cdn = FakeCdnIntegration()
            emitter = EventEmitter()
            coordinator, _, _ = _coordinator(cdn, emitter)
            unit = UnitOfWork()
            results = [await coordinator.handle(ContentChangeEvent.post(i), unit) for i in range(5)]
            assert results == [True, False, False, False, False]
            assert cdn.purge_calls == 1
            assert len(emitter.named(CDN_PURGED)) == 1
            assert len(emitter.named(CACHE_FLUSHED)) == 1
        asyncio.run(run())

    def test_new_unit_purges_again(self):
        async def run() -> None:
            cdn = FakeCdnIntegration()
            coordinator, _, _ = _coordinator(cdn)
            await coordinator.purge(UnitOfWork())
            await coordinator.purge(UnitOfWork())
            assert cdn.purge_calls == 2
        asyncio.run(run())

    def test_purge_flushes_response_cache(self):
        async def run() -> None:
            coordinator, cache, store = _coordinator(FakeCdnIntegration())
            await cache.lookup_or_populate("{ posts }", None, lambda: {"data": {}})
            assert store.size(cache.namespace) == 1
            await coordinator.purge(UnitOfWork())
            assert store.size(cache.namespace) == 0
        asyncio.run(run())

    def test_inert_without_cdn(self):
        async def run() -> None:
            emitter = EventEmitter()
            coordinator, _, _ = _coordinator(None, emitter)
            assert coordinator.active is False
            assert await coordinator.handle(ContentChangeEvent.post(1), UnitOfWork()) is False
            assert await coordinator.purge(UnitOfWork()) is False
            assert emitter.buffered == []
        asyncio.run(run())

    def test_inert_when_cdn_disabled(self):
        async def run() -> None:
            cdn = FakeCdnIntegration(enabled=False)
            coordinator, _, _ = _coordinator(cdn)
            assert coordinator.active is False
            assert await coordinator.handle(ContentChangeEvent.post(1), UnitOfWork()) is False
            assert cdn.purge_calls == 0
        asyncio.run(run())

    def test_guard_rejected_event_does_not_consume_unit(self):
        async def run() -> None:
            cdn = FakeCdnIntegration()
            coordinator, _, _ = _coordinator(cdn)
            unit = UnitOfWork()
            assert await coordinator.handle(ContentChangeEvent.post(1, status="draft"), unit) is False
            assert unit.purge_requested is False
            assert await coordinator.handle(ContentChangeEvent.post(1), unit) is True
            assert cdn.purge_calls == 1
        asyncio.run(run())

    def test_delete_triggers_purge(self):
        async def run() -> None:
            cdn = FakeCdnIntegration()
            coordinator, _, _ = _coordinator(cdn)
            event = ContentChangeEvent.post(9, status="trash", change=ChangeType.DELETE)
            assert await coordinator.handle(event, UnitOfWork()) is True
        asyncio.run(run())

    def test_cdn_failure_still_flushes_and_emits(self):
        async def run() -> None:
            cdn = FakeCdnIntegration(fail_with=RuntimeError("zone locked"))
            emitter = EventEmitter()
            coordinator, _, _ = _coordinator(cdn, emitter)
            unit = UnitOfWork()
            assert await coordinator.purge(unit) is True
            assert unit.purge_requested is True
            assert len(emitter.named(CACHE_FLUSHED)) == 1
            [event] = emitter.named(CDN_PURGED)
            assert event.fields == {}
        asyncio.run(run())
