"""Application cache – ResponseCache for read-path query responses."""
from __future__ import annotations

import inspect
import json
from dataclasses import asdict, dataclass
from typing import Any, Awaitable, Callable

from headless_toolkit.application.cache.keys import ResponseCacheKey
from headless_toolkit.application.cache.store import ObjectCacheStore
from headless_toolkit.config.settings.base import (
    DEFAULT_CACHE_NAMESPACE,
    DEFAULT_CACHE_TTL,
    DEFAULT_MUTATION_KEYWORD,
)
from headless_toolkit.observability.events import CACHE_FLUSHED, EventEmitter, StructuredEvent
from headless_toolkit.observability.logging import get_logger

__all__ = ["FlushResult", "ResponseCache"]

_log = get_logger(__name__)

Compute = Callable[[], Any | Awaitable[Any]]

_MISSING = object()


@dataclass(frozen=True)
class FlushResult:
    flushed: bool
    namespace: str
    full_store: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _json_safe(value: Any) -> Any:
    """Return the JSON round-trip of *value*, or ``_MISSING`` if it is lossy or fails."""
    try:
        safe = json.loads(json.dumps(value))
    except (TypeError, ValueError):
        return _MISSING
    return safe if safe == value else _MISSING


class ResponseCache:
    """Caches query responses in a dedicated object-cache namespace.

    Mutation-class requests bypass the cache entirely. Results that cannot be
    losslessly round-tripped through JSON are returned but never stored, so
    unserialisable objects cannot poison the backend.
    """

    def __init__(
        self,
        store: ObjectCacheStore,
        *,
        ttl: int = DEFAULT_CACHE_TTL,
        mutation_keyword: str = DEFAULT_MUTATION_KEYWORD,
        namespace: str = DEFAULT_CACHE_NAMESPACE,
        emitter: EventEmitter | None = None,
    ) -> None:
        self._store = store
        self._ttl = ttl if ttl > 0 else DEFAULT_CACHE_TTL
        self._keyword = mutation_keyword.strip() or DEFAULT_MUTATION_KEYWORD
        self._namespace = namespace
        self._emitter = emitter or EventEmitter()

    @property
    def ttl(self) -> int:
        return self._ttl

    @property
    def namespace(self) -> str:
        return self._namespace

    def is_mutation(self, query: str | None) -> bool:
        if not query:
            return False
        return query.lstrip().startswith(self._keyword)

    def key_for(self, query: str, variables: Any = None) -> str:
        return ResponseCacheKey.for_query(query, variables)

    def cache_control(self, query: str | None) -> str:
        """``Cache-Control`` header value for a response to *query*."""
        if self.is_mutation(query):
            return "no-store, no-cache"
        return f"public, max-age={self._ttl}"

    async def lookup_or_populate(self, query: str, variables: Any, compute: Compute) -> Any:
        if self.is_mutation(query):
            return await self._run(compute)

        key = self.key_for(query, variables)
        cached = await self._store.get(key, self._namespace)
        if cached is not None:
            _log.debug("response_cache_hit", key=key)
            return cached

        result = await self._run(compute)
        safe = _json_safe(result)
        if safe is _MISSING or safe is None:
            _log.debug("response_cache_skip_unserialisable", key=key, result_type=type(result).__name__)
            return result
        await self._store.set(key, safe, self._namespace, self._ttl)
        return result

    async def flush(self) -> FlushResult:
        """Flush this cache's namespace, falling back to the whole store."""
        if await self._store.flush_namespace(self._namespace):
            result = FlushResult(flushed=True, namespace=self._namespace)
        else:
            _log.info("response_cache_full_store_flush", namespace=self._namespace)
            result = FlushResult(
                flushed=await self._store.flush_all(),
                namespace=self._namespace,
                full_store=True,
            )
        self._emitter.emit(StructuredEvent(name=CACHE_FLUSHED, fields=result.to_dict()))
        return result

    @staticmethod
    async def _run(compute: Compute) -> Any:
        result = compute()
        if inspect.isawaitable(result):
            result = await result
        return result
