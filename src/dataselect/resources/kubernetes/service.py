"""Kubernetes – SecretService: list / create / delete over a SecretClient."""
from __future__ import annotations

from typing import Iterable

from dataselect.observability.logging import get_logger
from dataselect.resources.kubernetes.client import NamespaceQuery, SecretClient, SecretRef
from dataselect.resources.kubernetes.secret import (
    Secret,
    SecretSpec,
    to_secret,
    to_secret_list,
)
from dataselect.selection import QueryDescriptor, ResultEnvelope

_log = get_logger(__name__)


class SecretService:
    """Fetches secrets through *client* and selects them with a query.

    Client failures propagate unchanged; only the selection step is total.
    """

    def __init__(self, client: SecretClient) -> None:
        self._client = client

    async def list_secrets(
        self,
        namespace: NamespaceQuery | None = None,
        query: QueryDescriptor | None = None,
    ) -> ResultEnvelope[Secret]:
        namespace = namespace or NamespaceQuery()
        _log.info("secret.list", namespace=str(namespace))
        raw = await self._client.list(namespace.to_request_param())
        in_scope = [s for s in raw if namespace.matches(s.metadata.namespace)]
        return to_secret_list(in_scope, query)

    async def create_secret(self, spec: SecretSpec) -> Secret:
        raw = spec.to_raw_secret()
        _log.info(
            "secret.create",
            name=raw.metadata.name,
            namespace=raw.metadata.namespace,
            type=spec.secret_type().value,
        )
        created = await self._client.create(raw)
        return to_secret(created)

    async def delete_secret(self, namespace: str, name: str) -> None:
        _log.info("secret.delete", name=name, namespace=namespace)
        await self._client.delete(namespace, name)

    async def delete_secrets(self, refs: Iterable[SecretRef]) -> int:
        """Delete each secret in order, stopping at the first failure.

        Returns the number of secrets deleted.
        """
        _log.info("secret.delete_batch.started")
        deleted = 0
        for ref in refs:
            _log.info("secret.delete", name=ref.name, namespace=ref.namespace)
            try:
                await self._client.delete(ref.namespace, ref.name)
            except Exception as exc:
                _log.error(
                    "secret.delete_batch.failed",
                    name=ref.name,
                    namespace=ref.namespace,
                    deleted=deleted,
                    error=str(exc),
                )
                raise
            deleted += 1
        _log.info("secret.delete_batch.completed", deleted=deleted)
        return deleted


__all__ = ["SecretService"]
