"""Domain errors – rule violations detected while describing a call."""

from __future__ import annotations

from typing import Any

from callwire.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class PathError(ValidationError):
    """A request was described without a target address."""

    default_code = "path_error"

    def __init__(self, address: Any = None, **kwargs: Any) -> None:
        super().__init__(
            f"Request address is missing or empty: {address!r}",
            errors=[{"field": "address", "reason": "required"}],
            detail={"address": address},
            **kwargs,
        )
        self.address = address


__all__ = [
    "DomainError",
    "PathError",
    "ValidationError",
]
