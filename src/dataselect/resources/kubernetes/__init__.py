"""Kubernetes resources – secrets and object metadata."""
from dataselect.resources.kubernetes.client import (
    ALL_NAMESPACES,
    NamespaceQuery,
    SecretClient,
    SecretRef,
)
from dataselect.resources.kubernetes.meta import ObjectMeta, ResourceKind, TypeMeta
from dataselect.resources.kubernetes.secret import (
    DOCKER_CONFIG_KEY,
    ImagePullSecretSpec,
    OpaqueSecretSpec,
    RawSecret,
    Secret,
    SecretCell,
    SecretCellAdapter,
    SecretSpec,
    SecretType,
    to_secret,
    to_secret_list,
)
from dataselect.resources.kubernetes.service import SecretService

__all__ = [
    "ALL_NAMESPACES",
    "DOCKER_CONFIG_KEY",
    "ImagePullSecretSpec",
    "NamespaceQuery",
    "ObjectMeta",
    "OpaqueSecretSpec",
    "RawSecret",
    "ResourceKind",
    "Secret",
    "SecretCell",
    "SecretCellAdapter",
    "SecretClient",
    "SecretRef",
    "SecretService",
    "SecretSpec",
    "SecretType",
    "TypeMeta",
    "to_secret",
    "to_secret_list",
]
