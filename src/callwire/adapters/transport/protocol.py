"""Transport adapter – Transport port and dispatch helper."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from callwire.request import RequestDescriptor


class Transport(Protocol):
    """Port: the collaborator that actually issues the HTTP call.

    ``verb`` is always ``"get"`` or ``"post"``; ``params`` carries ``header``
    and one of ``query``/``body``.
    """

    def send(self, verb: str, address: str, params: dict[str, Any]) -> Any: ...


def dispatch(descriptor: "RequestDescriptor", transport: Transport) -> Any:
    """Hand a descriptor's tuple to *transport* and return its result."""
    verb, address, params = descriptor.to_tuple()
    return transport.send(verb, address, params)


__all__ = ["Transport", "dispatch"]
