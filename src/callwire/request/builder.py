"""Request – RequestBuilder, an injectable descriptor factory."""
from __future__ import annotations

from typing import Any, Mapping

from callwire.config.settings import CallwireSettings
from callwire.observability.correlation import EnvIdProvider, IdProvider
from callwire.request.descriptor import RequestDescriptor


class RequestBuilder:
    """Build descriptors that share one correlation id source.

    Passing a builder around replaces reliance on the process-wide provider::

        builder = RequestBuilder(FixedIdProvider("replay-42"))
        builder.patch("http://api/users/1", name="Ann", address="Main St").to_tuple()

    With no provider, *settings* decide which environment variable the
    inbound request id is read from. With neither, descriptors fall back to
    the process-wide provider.
    """

    def __init__(
        self,
        id_provider: IdProvider | None = None,
        settings: CallwireSettings | None = None,
    ) -> None:
        if id_provider is None and settings is not None:
            id_provider = EnvIdProvider(settings.request_id_env_key)
        self._id_provider = id_provider

    @property
    def id_provider(self) -> IdProvider | None:
        return self._id_provider

    def build(
        self,
        verb: Any,
        address: str | None,
        payload: Mapping[str, Any] | None = None,
        /,
        **data: Any,
    ) -> RequestDescriptor:
        merged = {**(payload or {}), **data}
        return RequestDescriptor(verb, address, merged, id_provider=self._id_provider)

    def get(self, address: str | None, payload: Mapping[str, Any] | None = None, /, **data: Any) -> RequestDescriptor:
        return self.build("get", address, payload, **data)

    def post(self, address: str | None, payload: Mapping[str, Any] | None = None, /, **data: Any) -> RequestDescriptor:
        return self.build("post", address, payload, **data)

    def put(self, address: str | None, payload: Mapping[str, Any] | None = None, /, **data: Any) -> RequestDescriptor:
        return self.build("put", address, payload, **data)

    def patch(self, address: str | None, payload: Mapping[str, Any] | None = None, /, **data: Any) -> RequestDescriptor:
        return self.build("patch", address, payload, **data)

    def delete(self, address: str | None, payload: Mapping[str, Any] | None = None, /, **data: Any) -> RequestDescriptor:
        return self.build("delete", address, payload, **data)


__all__ = ["RequestBuilder"]
