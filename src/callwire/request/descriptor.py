"""Request – RequestDescriptor.

A descriptor turns a logical call into what a transport sends::

    request = RequestDescriptor("patch", "http://localhost/users/1", {"text": "Hi"})

    request.to_tuple()
    # => ("post", "http://localhost/users/1", {
    #        "body": {"text": "Hi", "_method": "patch"},
    #        "header": {"X-Request-Id": "...", "Content-Type": ..., "Accept": ...},
    #    })

Only ``get`` and ``post`` are ever transmitted. Any other verb goes out as
``post`` with the real verb in the ``_method`` body field.
"""
from __future__ import annotations

import copy
import enum
import logging
import threading
from typing import Any, Iterator, Mapping

from callwire.kernel.errors import PathError
from callwire.observability.correlation import IdProvider, get_request_id_provider
from callwire.observability.logging import SensitiveFieldsFilter, get_logger

REQUEST_ID_HEADER = "X-Request-Id"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
JSON_ACCEPT = "application/json"
METHOD_OVERRIDE_FIELD = "_method"

_NATIVE_VERBS = frozenset({"get", "post"})

_log = get_logger(__name__)
_stdlib_log = logging.getLogger(__name__)
_redactor = SensitiveFieldsFilter()


def normalize_verb(verb: Any) -> str:
    """Lower-case a verb token; enum members contribute their value."""
    if isinstance(verb, enum.Enum):
        verb = verb.value
    return str(verb).lower()


class RequestDescriptor:
    """Immutable description of one outgoing call.

    Args:
        verb: Action name (``"get"``, ``"patch"``, a symbol-like enum, ...).
        address: Fully-qualified target URI. ``PathError`` when empty.
        payload: Data to send; copied on construction.
        id_provider: Correlation id source. The process-wide provider is
            used when omitted, read the first time params are computed.
    """

    def __init__(
        self,
        verb: Any,
        address: str | None,
        payload: Mapping[str, Any] | None = None,
        *,
        id_provider: IdProvider | None = None,
    ) -> None:
        if not address:
            raise PathError(address)
        self._verb = normalize_verb(verb)
        self._address = address
        self._payload: dict[str, Any] = copy.deepcopy(dict(payload or {}))
        self._id_provider = id_provider
        self._params: dict[str, Any] | None = None
        self._lock = threading.Lock()

    @property
    def verb(self) -> str:
        return self._verb

    @property
    def address(self) -> str:
        return self._address

    @property
    def payload(self) -> dict[str, Any]:
        return copy.deepcopy(self._payload)

    @property
    def request_type(self) -> str:
        """The HTTP verb actually transmitted: ``get`` or ``post``."""
        return "get" if self._verb == "get" else "post"

    @property
    def params(self) -> dict[str, Any]:
        """Query or body plus headers.

        Computed once and cached; every read returns a fresh deep copy, so
        callers and transports cannot alter the cached value.
        """
        return copy.deepcopy(self._cached_params())

    def compute_params(self) -> dict[str, Any]:
        """Alias of :attr:`params`; repeated calls never recompute."""
        return self.params

    @property
    def request_id(self) -> str:
        return self._cached_params()["header"][REQUEST_ID_HEADER]

    def to_tuple(self) -> tuple[str, str, dict[str, Any]]:
        """Return ``(request_type, address, params)`` for a transport."""
        return (self.request_type, self._address, self.params)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_tuple())

    def __repr__(self) -> str:
        return f"RequestDescriptor(verb={self._verb!r}, address={self._address!r})"

    def _cached_params(self) -> dict[str, Any]:
        params = self._params
        if params is None:
            with self._lock:
                if self._params is None:
                    self._params = self._compute_params()
                params = self._params
        return params

    def _compute_params(self) -> dict[str, Any]:
        key = "query" if self._verb == "get" else "body"
        params: dict[str, Any] = {key: {**self._payload, **self._method_override()}}
        params["header"] = self._headers()
        if _stdlib_log.isEnabledFor(logging.DEBUG):
            _log.debug(
                "request.built",
                verb=self._verb,
                request_type=self.request_type,
                address=self._address,
                request_id=params["header"][REQUEST_ID_HEADER],
                **{key: _redactor.redact_deep(params[key])},
            )
        return params

    def _method_override(self) -> dict[str, str]:
        if self._verb in _NATIVE_VERBS:
            return {}
        return {METHOD_OVERRIDE_FIELD: self._verb}

    def _headers(self) -> dict[str, str]:
        provider = self._id_provider or get_request_id_provider()
        return {
            REQUEST_ID_HEADER: provider(),
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_ACCEPT,
        }


def build(
    verb: Any,
    address: str | None,
    payload: Mapping[str, Any] | None = None,
    *,
    id_provider: IdProvider | None = None,
) -> RequestDescriptor:
    """Shortcut for :class:`RequestDescriptor`."""
    return RequestDescriptor(verb, address, payload, id_provider=id_provider)


__all__ = [
    "JSON_ACCEPT",
    "JSON_CONTENT_TYPE",
    "METHOD_OVERRIDE_FIELD",
    "REQUEST_ID_HEADER",
    "RequestDescriptor",
    "build",
    "normalize_verb",
]
