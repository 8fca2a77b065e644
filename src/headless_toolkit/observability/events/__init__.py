"""Observability – Structured completion events."""
from headless_toolkit.observability.events.emitter import (
    CACHE_FLUSHED,
    CDN_PURGED,
    DEFAULT_BUFFER_SIZE,
    REVALIDATION_SENT,
    EventEmitter,
    EventListener,
    StructuredEvent,
)

__all__ = [
    "CACHE_FLUSHED",
    "CDN_PURGED",
    "DEFAULT_BUFFER_SIZE",
    "REVALIDATION_SENT",
    "EventEmitter",
    "EventListener",
    "StructuredEvent",
]
