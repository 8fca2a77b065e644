"""Application cache – ObjectCacheStore port and in-memory implementation."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from headless_toolkit.kernel.time import Clock, SystemClock

__all__ = ["InMemoryObjectCacheStore", "ObjectCacheStore"]


@runtime_checkable
class ObjectCacheStore(Protocol):
    """Port: namespaced key/value store backing the response cache.

    ``get`` returns ``None`` on a miss. ``flush_namespace`` returns ``False``
    when the backend cannot flush a single namespace.
    """

    async def get(self, key: str, namespace: str) -> Any: ...
    async def set(self, key: str, value: Any, namespace: str, ttl: int) -> None: ...
    async def flush_namespace(self, namespace: str) -> bool: ...
    async def flush_all(self) -> bool: ...


class InMemoryObjectCacheStore:
    """In-memory ObjectCacheStore – for unit tests and single-process hosts."""

    def __init__(self, clock: Clock | None = None, *, supports_namespace_flush: bool = True) -> None:
        self._clock = clock or SystemClock()
        self._supports_namespace_flush = supports_namespace_flush
        self._data: dict[str, dict[str, tuple[Any, float]]] = {}  # namespace -> key -> (value, expires_at)

    async def get(self, key: str, namespace: str) -> Any:
        entry = self._data.get(namespace, {}).get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock.timestamp() >= expires_at:
            del self._data[namespace][key]
            return None
        return value

    async def set(self, key: str, value: Any, namespace: str, ttl: int) -> None:
        self._data.setdefault(namespace, {})[key] = (value, self._clock.timestamp() + ttl)

    async def flush_namespace(self, namespace: str) -> bool:
        if not self._supports_namespace_flush:
            return False
        self._data.pop(namespace, None)
        return True

    async def flush_all(self) -> bool:
        self._data.clear()
        return True

    def size(self, namespace: str | None = None) -> int:
        if namespace is not None:
            return len(self._data.get(namespace, {}))
        return sum(len(entries) for entries in self._data.values())
