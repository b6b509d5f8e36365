"""Transport adapter – LoggingTransport."""
from __future__ import annotations

from typing import Any

from callwire.adapters.transport.protocol import Transport
from callwire.observability.logging import Logger, SensitiveFieldsFilter, get_logger
from callwire.request.descriptor import REQUEST_ID_HEADER


class LoggingTransport:
    """Wrap a transport and log every exchange it performs.

    Payload values under sensitive keys are redacted in the log line only.
    Exceptions from the wrapped transport are logged and re-raised.
    """

    def __init__(
        self,
        inner: Transport,
        logger: Logger | None = None,
        redactor: SensitiveFieldsFilter | None = None,
    ) -> None:
        self._inner = inner
        self._log = logger or get_logger(__name__)
        self._redactor = redactor or SensitiveFieldsFilter()

    def send(self, verb: str, address: str, params: dict[str, Any]) -> Any:
        fields = {
            "verb": verb,
            "address": address,
            "request_id": params.get("header", {}).get(REQUEST_ID_HEADER),
        }
        self._log.info("request.sent", params=self._redactor.redact_deep(params), **fields)
        try:
            result = self._inner.send(verb, address, params)
        except Exception:
            self._log.exception("request.failed", **fields)
            raise
        self._log.info("request.completed", **fields)
        return result


__all__ = ["LoggingTransport"]
