"""Domain errors – resource kinds, registries and secret definitions."""

from __future__ import annotations

from typing import Any

from dataselect.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A request refers to resources or kinds in a way the model forbids."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """A resource definition failed validation.

    ``errors`` holds one ``{"field": ..., "message": ...}`` entry per problem.
    """

    default_code = "validation_error"

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.errors}


class InvalidSecretSpecError(ValidationError):
    """A secret cannot be created from the given spec (e.g. empty name)."""

    default_code = "invalid_secret_spec"


class NotFoundError(DomainError):
    """A named resource (secret, adapter, ...) does not exist."""

    default_code = "not_found"

    def __init__(self, resource: str, identifier: Any = None, **kwargs: Any) -> None:
        if identifier is None:
            message = f"{resource} not found"
        else:
            message = f"{resource} '{identifier}' not found"
        super().__init__(message, **kwargs)
        self.resource = resource
        self.identifier = identifier


class UnknownResourceKindError(NotFoundError):
    """No cell adapter is registered for the requested resource kind."""

    default_code = "unknown_resource_kind"

    def __init__(self, kind: str, known: list[str] | None = None) -> None:
        super().__init__("cell adapter", kind, detail={"kind": kind, "known_kinds": known or []})
        self.kind = kind


class ConflictError(DomainError):
    """The operation collides with something that already exists."""

    default_code = "conflict"


class DuplicateResourceKindError(ConflictError):
    """A second cell adapter was registered for the same resource kind."""

    default_code = "duplicate_resource_kind"

    def __init__(self, kind: str) -> None:
        super().__init__(f"Cell adapter for kind '{kind}' is already registered", detail={"kind": kind})
        self.kind = kind


__all__ = [
    "ConflictError",
    "DomainError",
    "DuplicateResourceKindError",
    "InvalidSecretSpecError",
    "NotFoundError",
    "UnknownResourceKindError",
    "ValidationError",
]
