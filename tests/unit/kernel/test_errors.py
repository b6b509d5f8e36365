"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from callwire.config.validation import ConfigError
from callwire.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    PathError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        assert BaseError("something went wrong").message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "callwire_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {
            "error": "BaseError",
            "code": "my_code",
            "message": "m",
            "detail": {"key": "val"},
        }

    def test_cause_is_chained(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"


class TestPathError:
    def test_hierarchy(self) -> None:
        err = PathError(None)
        assert isinstance(err, ValidationError)
        assert isinstance(err, DomainError)
        assert isinstance(err, BaseError)

    def test_carries_address(self) -> None:
        err = PathError("")
        assert err.address == ""
        assert err.detail == {"address": ""}
        assert err.code == "path_error"

    def test_field_error(self) -> None:
        assert PathError(None).to_dict()["errors"] == [{"field": "address", "reason": "required"}]

    def test_message_mentions_value(self) -> None:
        assert "None" in PathError(None).message

    def test_raises_like_any_exception(self) -> None:
        with pytest.raises(BaseError):
            raise PathError(None)


class TestConfigError:
    def test_is_application_error(self) -> None:
        assert issubclass(ConfigError, ApplicationError)
        assert not issubclass(ConfigError, DomainError)
