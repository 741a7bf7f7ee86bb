"""Catalog – explicit registration of every built-in resource kind."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from dataselect.config.settings import SelectionSettings
from dataselect.entities.product import ProductCellAdapter
from dataselect.entities.rulechain_log import RuleChainMsgLogCellAdapter
from dataselect.resources.kubernetes.secret import SecretCellAdapter
from dataselect.selection import (
    AdapterRegistry,
    QueryExecutor,
    ResultEnvelope,
    parse_query_params,
)


def build_registry() -> AdapterRegistry:
    """Registry holding the secret, product and rule-chain log adapters."""
    return AdapterRegistry(
        [
            SecretCellAdapter(),
            ProductCellAdapter(),
            RuleChainMsgLogCellAdapter(),
        ]
    )


def select_from_params(
    registry: AdapterRegistry,
    kind: str,
    items: Iterable[Any],
    params: Mapping[str, Any],
    settings: SelectionSettings | None = None,
) -> ResultEnvelope[Any]:
    """Bind *params* against the schema of *kind* and run the query.

    Raises :class:`~dataselect.kernel.errors.UnknownResourceKindError` for an
    unregistered *kind*.
    """
    adapter = registry.get(kind)
    query = parse_query_params(params, adapter.schema, settings)
    return QueryExecutor(adapter).execute(items, query)


__all__ = ["build_registry", "select_from_params"]
