"""Kubernetes – SecretClient port and NamespaceQuery."""
from __future__ import annotations

import dataclasses
from typing import Protocol, runtime_checkable

from dataselect.resources.kubernetes.secret import RawSecret

ALL_NAMESPACES = ""


@runtime_checkable
class SecretClient(Protocol):
    """Port onto the cluster API for secrets.

    ``list(ALL_NAMESPACES)`` returns secrets from every namespace.
    """

    async def list(self, namespace: str) -> list[RawSecret]: ...
    async def create(self, secret: RawSecret) -> RawSecret: ...
    async def delete(self, namespace: str, name: str) -> None: ...


@dataclasses.dataclass(frozen=True)
class NamespaceQuery:
    """Namespaces a list request is scoped to; empty means all of them."""

    namespaces: tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw: str | None) -> "NamespaceQuery":
        """Parse a comma-separated ``namespace`` query parameter."""
        if not raw:
            return cls()
        return cls(tuple(ns.strip() for ns in raw.split(",") if ns.strip()))

    def to_request_param(self) -> str:
        """Namespace to pass to the client.

        A single namespace is queried directly; anything else lists every
        namespace and relies on :meth:`matches` afterwards.
        """
        if len(self.namespaces) == 1:
            return self.namespaces[0]
        return ALL_NAMESPACES

    def matches(self, namespace: str) -> bool:
        return not self.namespaces or namespace in self.namespaces

    def __str__(self) -> str:
        return ",".join(self.namespaces) or "<all>"


@dataclasses.dataclass(frozen=True)
class SecretRef:
    """Identifies one secret in a batch delete."""
    name: str
    namespace: str


__all__ = ["ALL_NAMESPACES", "NamespaceQuery", "SecretClient", "SecretRef"]
