"""Shared test configuration: every test starts with the default id provider."""
from __future__ import annotations

from typing import Iterator

import pytest

from callwire.observability.correlation import CorrelationContext, reset_request_id_provider


@pytest.fixture(autouse=True)
def _isolate_request_ids(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("HTTP_X_REQUEST_ID", raising=False)
    reset_request_id_provider()
    CorrelationContext.clear()
    yield
    reset_request_id_provider()
    CorrelationContext.clear()
