"""Observability – correlation ids and structured logging."""

from callwire.observability.correlation import CorrelationContext, RequestContext
from callwire.observability.logging import JsonLoggerFactory, Logger, SensitiveFieldsFilter, get_logger

__all__ = [
    "CorrelationContext",
    "JsonLoggerFactory",
    "Logger",
    "RequestContext",
    "SensitiveFieldsFilter",
    "get_logger",
]
