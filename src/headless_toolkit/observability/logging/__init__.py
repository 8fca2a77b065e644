"""Observability – structured logging helpers."""
from headless_toolkit.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from headless_toolkit.observability.logging.factory import JsonLoggerFactory
from headless_toolkit.observability.logging.processors import UnitOfWorkProcessor, get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "UnitOfWorkProcessor",
    "get_logger",
]
