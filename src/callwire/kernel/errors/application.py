"""Application-layer errors – cross-cutting concerns outside the domain."""

from __future__ import annotations

from callwire.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
