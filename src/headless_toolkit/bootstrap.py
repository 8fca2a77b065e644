"""Bootstrap – wire the toolkit's components from HeadlessSettings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from headless_toolkit.application.cache import (
    InMemoryObjectCacheStore,
    ObjectCacheStore,
    ResponseCache,
    TagDeriver,
)
from headless_toolkit.application.invalidation import InvalidationPipeline
from headless_toolkit.application.purge import CdnIntegration, CdnPurgeCoordinator
from headless_toolkit.application.revalidation import ContentGuard, RevalidationDispatcher
from headless_toolkit.config import EnvSettingsLoader, HeadlessSettings, SettingsFactory
from headless_toolkit.kernel.time import Clock, SystemClock
from headless_toolkit.observability.events import EventEmitter
from headless_toolkit.observability.logging import get_logger
from headless_toolkit.security.preview import PreviewLinkBuilder, PreviewTokenService

__all__ = ["Toolkit", "build_toolkit", "load_settings"]

_log = get_logger(__name__)


@dataclass
class Toolkit:
    settings: HeadlessSettings
    emitter: EventEmitter
    deriver: TagDeriver
    guard: ContentGuard
    response_cache: ResponseCache
    dispatcher: RevalidationDispatcher
    coordinator: CdnPurgeCoordinator
    pipeline: InvalidationPipeline
    tokens: PreviewTokenService
    links: PreviewLinkBuilder

    def create_app(self, **fastapi_kwargs: Any) -> Any:
        """FastAPI app exposing preview verification and cache flush."""
        from fastapi import FastAPI

        from headless_toolkit.adapters.fastapi import (
            GraphqlCacheRouter,
            PreviewRouter,
            UnitOfWorkMiddleware,
        )

        app = FastAPI(**fastapi_kwargs)
        app.add_middleware(UnitOfWorkMiddleware)
        app.include_router(PreviewRouter(self.tokens))
        app.include_router(GraphqlCacheRouter(self.response_cache, self.settings.revalidation_secret))
        return app


def load_settings(**overrides: Any) -> HeadlessSettings:
    """Settings from ``HEADLESS_*`` environment variables plus *overrides*."""
    return SettingsFactory.create(HeadlessSettings, [EnvSettingsLoader()], overrides or None)


def _default_store(settings: HeadlessSettings, clock: Clock) -> ObjectCacheStore:
    if settings.redis_url:
        from headless_toolkit.adapters.redis import RedisObjectCacheStore

        return RedisObjectCacheStore(settings.redis_url)
    return InMemoryObjectCacheStore(clock)


def build_toolkit(
    settings: HeadlessSettings | None = None,
    *,
    store: ObjectCacheStore | None = None,
    cdn: CdnIntegration | None = None,
    emitter: EventEmitter | None = None,
    clock: Clock | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Toolkit:
    settings = settings or load_settings()
    clock = clock or SystemClock()
    emitter = emitter or EventEmitter()

    deriver = TagDeriver()
    guard = ContentGuard(allowed_kinds=settings.revalidation_content_kinds)
    response_cache = ResponseCache(
        store or _default_store(settings, clock),
        ttl=settings.cache_ttl,
        mutation_keyword=settings.graphql_mutation_keyword,
        namespace=settings.graphql_cache_namespace,
        emitter=emitter,
    )
    dispatcher = RevalidationDispatcher(
        settings.revalidation_url,
        settings.revalidation_secret,
        deriver=deriver,
        guard=guard,
        emitter=emitter,
        transport=transport,
    )
    coordinator = CdnPurgeCoordinator(cdn, response_cache=response_cache, guard=guard, emitter=emitter)
    tokens = PreviewTokenService(settings.preview_secret, clock=clock, default_ttl=settings.token_expiry)
    links = PreviewLinkBuilder(settings.frontend_url, tokens, default_path=settings.preview_path)

    _log.info(
        "toolkit_built",
        revalidation=dispatcher.configured,
        cdn_purge=coordinator.active,
        preview=tokens.configured,
    )
    return Toolkit(
        settings=settings,
        emitter=emitter,
        deriver=deriver,
        guard=guard,
        response_cache=response_cache,
        dispatcher=dispatcher,
        coordinator=coordinator,
        pipeline=InvalidationPipeline.standard(dispatcher, coordinator),
        tokens=tokens,
        links=links,
    )
