"""Unit tests for the built-in resource kind catalog."""

from __future__ import annotations

import pytest

from dataselect.catalog import build_registry, select_from_params
from dataselect.entities import Product
from dataselect.kernel.errors import NotFoundError
from dataselect.resources.kubernetes import ObjectMeta, RawSecret


class TestCatalog:
    def test_registers_builtin_kinds(self) -> None:
        assert build_registry().kinds() == ["product", "rulechain_msg_log", "secret"]

    def test_select_from_params_uses_kind_schema(self) -> None:
        products = [
            Product(id="1", name="Gateway", org_id=1),
            Product(id="2", name="Sensor", org_id=2),
            Product(id="3", name="Sensor mini", org_id=3),
        ]
        result = select_from_params(
            build_registry(),
            "product",
            products,
            {"filterBy": ["name:sensor", "orgId:2..3"], "sortBy": "orgId", "sortDirection": "desc",
             "metricBy": "name"},
        )
        assert [p.id for p in result.items] == ["3", "2"]
        assert result.metrics == {"Sensor": 1, "Sensor mini": 1}

    def test_secret_kind(self) -> None:
        secrets = [RawSecret(ObjectMeta(name="a", namespace="x")), RawSecret(ObjectMeta(name="b", namespace="y"))]
        result = select_from_params(build_registry(), "secret", secrets, {"filterBy": "namespace:y"})
        assert [s.metadata.name for s in result.items] == ["b"]

    def test_unknown_kind(self) -> None:
        with pytest.raises(NotFoundError):
            select_from_params(build_registry(), "pod", [], {})
