"""Observability – structured logging helpers."""
from callwire.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from callwire.observability.logging.factory import JsonLoggerFactory
from callwire.observability.logging.processors import CorrelationProcessor, get_logger
from callwire.observability.logging.protocol import Logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "CorrelationProcessor",
    "JsonLoggerFactory",
    "Logger",
    "SensitiveFieldsFilter",
    "get_logger",
]
