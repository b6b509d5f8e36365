"""Observability – request id providers and the process-wide provider slot.

A provider is any zero-argument callable returning the correlation id that
goes into the ``X-Request-Id`` header of an outgoing call. One provider is
active per process; a surrounding application replaces it at startup::

    from callwire.observability.correlation import set_request_id_provider

    set_request_id_provider(lambda: my_framework.current_request_id())
"""
from __future__ import annotations

import os
import threading
from typing import Callable, Protocol

from callwire.observability.correlation.context import CorrelationContext, new_request_id

DEFAULT_REQUEST_ID_ENV_KEY = "HTTP_X_REQUEST_ID"


class IdProvider(Protocol):
    """Port: produce the correlation id for one outgoing call."""

    def __call__(self) -> str: ...


class EnvIdProvider:
    """Read the inbound request id from the environment, else generate one."""

    def __init__(self, env_key: str = DEFAULT_REQUEST_ID_ENV_KEY) -> None:
        self.env_key = env_key

    def __call__(self) -> str:
        return os.environ.get(self.env_key) or new_request_id()

    def __repr__(self) -> str:
        return f"EnvIdProvider(env_key={self.env_key!r})"


class FixedIdProvider:
    """Always return the same id. Handy in tests and replays."""

    def __init__(self, value: str) -> None:
        self.value = value

    def __call__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"FixedIdProvider(value={self.value!r})"


class ContextIdProvider:
    """Reuse the correlation id of the active :class:`RequestContext`.

    Falls back to *fallback* (an :class:`EnvIdProvider` by default) when no
    context has been set for the current task or thread.
    """

    def __init__(self, fallback: Callable[[], str] | None = None) -> None:
        self._fallback = fallback or EnvIdProvider()

    def __call__(self) -> str:
        ctx = CorrelationContext.get()
        if ctx is not None and ctx.correlation_id:
            return ctx.correlation_id
        return self._fallback()


class ProviderSlot:
    """A single swappable provider reference; last writer wins.

    Reads and replacements are serialised by a lock, so a reader observes
    either the previous or the new provider.
    """

    def __init__(self, default: Callable[[], IdProvider]) -> None:
        self._default_factory = default
        self._provider: IdProvider | None = None
        self._lock = threading.Lock()

    def get(self) -> IdProvider:
        with self._lock:
            if self._provider is None:
                self._provider = self._default_factory()
            return self._provider

    def set(self, provider: IdProvider) -> None:
        # no validation: a non-callable provider fails at first use
        with self._lock:
            self._provider = provider

    def reset(self) -> None:
        with self._lock:
            self._provider = None


_SLOT = ProviderSlot(EnvIdProvider)


def get_request_id_provider() -> IdProvider:
    """Return the active provider (the environment reader unless replaced)."""
    return _SLOT.get()


def set_request_id_provider(provider: IdProvider) -> None:
    """Replace the active provider for the rest of the process lifetime.

    Descriptors whose request id was already computed keep it.
    """
    _SLOT.set(provider)


def reset_request_id_provider() -> None:
    """Restore the default provider."""
    _SLOT.reset()


def install_context_provider(fallback: Callable[[], str] | None = None) -> ContextIdProvider:
    """Install a :class:`ContextIdProvider`, the hook a web app calls at startup."""
    provider = ContextIdProvider(fallback)
    set_request_id_provider(provider)
    return provider


__all__ = [
    "DEFAULT_REQUEST_ID_ENV_KEY",
    "ContextIdProvider",
    "EnvIdProvider",
    "FixedIdProvider",
    "IdProvider",
    "ProviderSlot",
    "get_request_id_provider",
    "install_context_provider",
    "reset_request_id_provider",
    "set_request_id_provider",
]
