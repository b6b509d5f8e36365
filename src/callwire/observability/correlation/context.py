"""Observability – RequestContext, CorrelationContext."""
from __future__ import annotations

import dataclasses
import secrets
from contextvars import ContextVar, Token


def new_request_id() -> str:
    """Return a fresh 128-bit random id, hex-encoded (32 characters)."""
    return secrets.token_hex(16)


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Ambient context of the inbound request a call is made on behalf of."""
    correlation_id: str
    tenant_id: str | None = None
    user_id: str | None = None
    trace_id: str | None = None

    @classmethod
    def new(cls, tenant_id: str | None = None, user_id: str | None = None) -> "RequestContext":
        return cls(correlation_id=new_request_id(), tenant_id=tenant_id, user_id=user_id)


_CTX_VAR: ContextVar[RequestContext | None] = ContextVar("_callwire_request_ctx", default=None)


class CorrelationContext:
    """Ambient correlation context stored in a ``ContextVar``.

    A web framework sets it once per inbound request; outgoing calls made
    while handling that request reuse its correlation id
    (see :class:`~callwire.observability.correlation.provider.ContextIdProvider`).
    """

    @staticmethod
    def set(ctx: RequestContext) -> Token[RequestContext | None]:
        return _CTX_VAR.set(ctx)

    @staticmethod
    def reset(token: Token[RequestContext | None]) -> None:
        _CTX_VAR.reset(token)

    @staticmethod
    def get() -> RequestContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def require() -> RequestContext:
        ctx = _CTX_VAR.get()
        if ctx is None:
            raise RuntimeError("No RequestContext in current context")
        return ctx

    @staticmethod
    def get_or_new() -> RequestContext:
        ctx = _CTX_VAR.get()
        if ctx is None:
            ctx = RequestContext.new()
            _CTX_VAR.set(ctx)
        return ctx

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(None)

    @staticmethod
    def set_from_headers(headers: dict[str, str]) -> RequestContext:
        """Extract correlation context from inbound HTTP headers and store it.

        Priority order for the correlation id:
        ``X-Request-ID`` → ``X-Correlation-ID`` → generated id.

        The W3C ``traceparent`` header (``ver-trace_id-parent_id-flags``)
        populates :attr:`RequestContext.trace_id`. Header names are matched
        case-insensitively.
        """
        norm: dict[str, str] = {k.lower(): v for k, v in headers.items()}

        correlation_id = (
            norm.get("x-request-id")
            or norm.get("x-correlation-id")
            or new_request_id()
        )

        trace_id: str | None = None
        traceparent = norm.get("traceparent")
        if traceparent:
            parts = traceparent.split("-")
            if len(parts) >= 2 and parts[1]:
                trace_id = parts[1]

        ctx = RequestContext(correlation_id=correlation_id, trace_id=trace_id)
        _CTX_VAR.set(ctx)
        return ctx


__all__ = ["CorrelationContext", "RequestContext", "new_request_id"]
