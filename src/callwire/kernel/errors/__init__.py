"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       └── PathError
    └── ApplicationError     (application.py)
        └── ConfigError      (callwire.config.validation)
"""

from callwire.kernel.errors.application import ApplicationError
from callwire.kernel.errors.base import BaseError
from callwire.kernel.errors.domain import DomainError, PathError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "PathError",
    "ValidationError",
]
