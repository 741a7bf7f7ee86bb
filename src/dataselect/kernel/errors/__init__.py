"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                      (domain.py)
    │   ├── ValidationError
    │   │   └── InvalidSecretSpecError
    │   ├── NotFoundError
    │   │   └── UnknownResourceKindError
    │   └── ConflictError
    │       └── DuplicateResourceKindError
    └── ApplicationError                 (application.py)
        └── ConfigError                  (dataselect.config.validation)
"""

from dataselect.kernel.errors.application import ApplicationError
from dataselect.kernel.errors.base import BaseError
from dataselect.kernel.errors.domain import (
    ConflictError,
    DomainError,
    DuplicateResourceKindError,
    InvalidSecretSpecError,
    NotFoundError,
    UnknownResourceKindError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "DuplicateResourceKindError",
    "InvalidSecretSpecError",
    "NotFoundError",
    "UnknownResourceKindError",
    "ValidationError",
]
