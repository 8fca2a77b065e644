from __future__ import annotations

import json
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from headless_toolkit.observability.logging import get_logger

__all__ = [
    "CACHE_FLUSHED",
    "CDN_PURGED",
    "DEFAULT_BUFFER_SIZE",
    "REVALIDATION_SENT",
    "EventEmitter",
    "EventListener",
    "StructuredEvent",
]

REVALIDATION_SENT = "revalidation.sent"
CDN_PURGED = "cdn.purged"
CACHE_FLUSHED = "graphql_cache.flushed"

_log = get_logger(__name__)


def _default_serializer(obj: Any) -> Any:
    if isinstance(obj, datetime):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


@dataclass
class StructuredEvent:
    name: str
    service: str = "headless-toolkit"
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    duration_ms: float | None = None
    fields: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "service": self.service,
            "timestamp": self.timestamp.isoformat(),
            "duration_ms": self.duration_ms,
            **self.fields,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=_default_serializer)


EventListener = Callable[[StructuredEvent], None]


DEFAULT_BUFFER_SIZE = 256


class EventEmitter:
    """Fans StructuredEvents out to subscribed listeners and keeps the most recent.

    Listeners run synchronously inside :meth:`emit`, on whichever thread
    emitted. A listener that raises is logged and skipped; it never breaks
    the code path that emitted the event. Only the last *buffer_size* events
    are kept, so a long-running host does not accumulate them.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self._buffer: deque[StructuredEvent] = deque(maxlen=max(0, buffer_size))
        self._listeners: dict[str, list[EventListener]] = {}

    def subscribe(self, name: str, listener: EventListener) -> None:
        """Register *listener* for events called *name* (``"*"`` for all)."""
        self._listeners.setdefault(name, []).append(listener)

    def emit(self, event: StructuredEvent) -> None:
        self._buffer.append(event)
        for listener in [*self._listeners.get(event.name, []), *self._listeners.get("*", [])]:
            try:
                listener(event)
            except Exception:  # noqa: BLE001
                _log.warning("event_listener_failed", event_name=event.name, exc_info=True)

    def clear(self) -> int:
        """Drop buffered events; returns how many were dropped."""
        count = len(self._buffer)
        self._buffer.clear()
        return count

    @property
    def buffered(self) -> list[StructuredEvent]:
        return list(self._buffer)

    def named(self, name: str) -> list[StructuredEvent]:
        """Buffered events called *name*, oldest first."""
        return [e for e in self.buffered if e.name == name]
