"""Kubernetes – secret model, specs and selection cell.

``RawSecret`` is the record returned by the cluster client (payload
included); ``Secret`` is the client-facing view, which never carries data.
"""
from __future__ import annotations

import abc
import dataclasses
from enum import Enum
from typing import Any, Iterable, Mapping

from dataselect.kernel.errors import InvalidSecretSpecError
from dataselect.resources.kubernetes.meta import ObjectMeta, ResourceKind, TypeMeta
from dataselect.selection import (
    Cell,
    CellTypeAdapter,
    MatchMode,
    PropertySpec,
    QueryDescriptor,
    QueryExecutor,
    ResultEnvelope,
    ValueKind,
    schema_of,
)

DOCKER_CONFIG_KEY = ".dockercfg"


class SecretType(str, Enum):
    OPAQUE = "Opaque"
    SERVICE_ACCOUNT_TOKEN = "kubernetes.io/service-account-token"
    DOCKERCFG = "kubernetes.io/dockercfg"
    DOCKER_CONFIG_JSON = "kubernetes.io/dockerconfigjson"
    BASIC_AUTH = "kubernetes.io/basic-auth"
    SSH_AUTH = "kubernetes.io/ssh-auth"
    TLS = "kubernetes.io/tls"


@dataclasses.dataclass(frozen=True)
class RawSecret:
    """Secret as stored in the cluster."""
    metadata: ObjectMeta
    type: SecretType | str = SecretType.OPAQUE
    data: Mapping[str, bytes] = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True)
class Secret:
    """A single secret returned to the frontend."""
    object_meta: ObjectMeta
    type_meta: TypeMeta
    type: SecretType | str

    def to_dict(self) -> dict[str, Any]:
        return {
            "objectMeta": self.object_meta.to_dict(),
            "typeMeta": self.type_meta.to_dict(),
            "type": self.type.value if isinstance(self.type, SecretType) else self.type,
        }


def to_secret(raw: RawSecret) -> Secret:
    return Secret(
        object_meta=raw.metadata,
        type_meta=TypeMeta(ResourceKind.SECRET),
        type=raw.type,
    )


# ---------------------------------------------------------------------------
# Specs used to create secrets
# ---------------------------------------------------------------------------


class SecretSpec(abc.ABC):
    """Common interface for the creation payload of different secrets."""

    name: str
    namespace: str

    @abc.abstractmethod
    def secret_type(self) -> SecretType: ...

    @abc.abstractmethod
    def secret_data(self) -> dict[str, bytes]: ...

    def _require_identity(self) -> None:
        errors = [
            {"field": field, "message": "must not be empty"}
            for field in ("name", "namespace")
            if not getattr(self, field)
        ]
        if errors:
            raise InvalidSecretSpecError(f"Invalid {type(self).__name__}", errors=errors)

    def to_raw_secret(self) -> RawSecret:
        return RawSecret(
            metadata=ObjectMeta(name=self.name, namespace=self.namespace),
            type=self.secret_type(),
            data=self.secret_data(),
        )


@dataclasses.dataclass(frozen=True)
class ImagePullSecretSpec(SecretSpec):
    """Image pull secret; *data* is the base64-encoded ``.dockercfg`` payload."""
    name: str
    namespace: str
    data: bytes

    def __post_init__(self) -> None:
        self._require_identity()

    def secret_type(self) -> SecretType:
        return SecretType.DOCKERCFG

    def secret_data(self) -> dict[str, bytes]:
        return {DOCKER_CONFIG_KEY: self.data}


@dataclasses.dataclass(frozen=True)
class OpaqueSecretSpec(SecretSpec):
    """Generic key/value secret."""
    name: str
    namespace: str
    data: Mapping[str, bytes] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        self._require_identity()

    def secret_type(self) -> SecretType:
        return SecretType.OPAQUE

    def secret_data(self) -> dict[str, bytes]:
        return dict(self.data)


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


class SecretCell(Cell[RawSecret]):
    schema = schema_of(
        PropertySpec("name", ValueKind.STRING, MatchMode.CONTAINS, case_insensitive=True),
        PropertySpec("namespace", ValueKind.STRING),
        PropertySpec("creationTimestamp", ValueKind.TIMESTAMP),
        PropertySpec("type", ValueKind.STRING),
        PropertySpec("labels", ValueKind.STRING, MatchMode.CONTAINS, list_valued=True),
    )

    def _lookup(self, name: str) -> Any:
        meta = self.item.metadata
        match name:
            case "name":
                return meta.name
            case "namespace":
                return meta.namespace
            case "creationTimestamp":
                return meta.creation_timestamp
            case "type":
                return self.item.type
            case "labels":
                return [f"{key}={value}" for key, value in meta.labels.items()]
        return None


class SecretCellAdapter(CellTypeAdapter[RawSecret]):
    kind = ResourceKind.SECRET.value
    cell_type = SecretCell


def to_secret_list(
    raw_secrets: Iterable[RawSecret],
    query: QueryDescriptor | None = None,
) -> ResultEnvelope[Secret]:
    """Select *raw_secrets* with *query* and convert the page to :class:`Secret`."""
    return QueryExecutor(SecretCellAdapter()).execute(raw_secrets, query).map(to_secret)


__all__ = [
    "DOCKER_CONFIG_KEY",
    "ImagePullSecretSpec",
    "OpaqueSecretSpec",
    "RawSecret",
    "Secret",
    "SecretCell",
    "SecretCellAdapter",
    "SecretSpec",
    "SecretType",
    "to_secret",
    "to_secret_list",
]
