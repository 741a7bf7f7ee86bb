"""Kubernetes – ObjectMeta, TypeMeta and ResourceKind."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from enum import Enum
from typing import Any, Mapping


class ResourceKind(str, Enum):
    SECRET = "secret"
    CONFIG_MAP = "configmap"
    NAMESPACE = "namespace"


@dataclasses.dataclass(frozen=True)
class ObjectMeta:
    """Subset of cluster object metadata shown to clients."""
    name: str
    namespace: str = ""
    labels: Mapping[str, str] = dataclasses.field(default_factory=dict)
    annotations: Mapping[str, str] = dataclasses.field(default_factory=dict)
    creation_timestamp: datetime | None = None
    uid: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "namespace": self.namespace,
            "labels": dict(self.labels),
            "annotations": dict(self.annotations),
            "creationTimestamp": (
                self.creation_timestamp.isoformat() if self.creation_timestamp else None
            ),
            "uid": self.uid,
        }


@dataclasses.dataclass(frozen=True)
class TypeMeta:
    kind: ResourceKind

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value}


__all__ = ["ObjectMeta", "ResourceKind", "TypeMeta"]
