"""Observability – logging and completion events."""

from headless_toolkit.observability.events import EventEmitter, StructuredEvent
from headless_toolkit.observability.logging import JsonLoggerFactory, SensitiveFieldsFilter, get_logger

__all__ = [
    "EventEmitter",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "StructuredEvent",
    "get_logger",
]
