"""Observability – correlation context and request id providers."""
from callwire.observability.correlation.context import CorrelationContext, RequestContext, new_request_id
from callwire.observability.correlation.provider import (
    DEFAULT_REQUEST_ID_ENV_KEY,
    ContextIdProvider,
    EnvIdProvider,
    FixedIdProvider,
    IdProvider,
    ProviderSlot,
    get_request_id_provider,
    install_context_provider,
    reset_request_id_provider,
    set_request_id_provider,
)

__all__ = [
    "DEFAULT_REQUEST_ID_ENV_KEY",
    "ContextIdProvider",
    "CorrelationContext",
    "EnvIdProvider",
    "FixedIdProvider",
    "IdProvider",
    "ProviderSlot",
    "RequestContext",
    "get_request_id_provider",
    "install_context_provider",
    "new_request_id",
    "reset_request_id_provider",
    "set_request_id_provider",
]
