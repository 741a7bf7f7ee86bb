"""Unit tests for entity listings (products, rule-chain message logs)."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from dataselect.entities import (
    Product,
    ProductCellAdapter,
    ResultPage,
    RuleChainMsgLog,
    RuleChainMsgLogCellAdapter,
    criteria_filters,
    find_list,
    find_list_page,
)
from dataselect.selection import FilterQuery, MatchMode, SortDirection, SortQuery


@pytest.fixture()
def products() -> list[Product]:
    return [
        Product(id="p1", name="Temperature Sensor", status="0", device_type="direct",
                create_time=datetime(2024, 1, 1, tzinfo=UTC)),
        Product(id="p2", name="Gateway", status="1", device_type="gateway",
                create_time=datetime(2024, 2, 1, tzinfo=UTC)),
        Product(id="p3", name="Humidity sensor", status="0", device_type="direct",
                create_time=datetime(2024, 3, 1, tzinfo=UTC)),
        Product(id="p4", name="Smart plug", status="0", device_type="direct"),
    ]


class TestCriteriaFilters:
    def test_empty_values_skipped(self) -> None:
        filters = criteria_filters({"status": "", "name": None, "deviceType": "direct"}, ProductCellAdapter())
        assert filters == (FilterQuery("deviceType", "direct"),)

    def test_match_mode_from_schema(self) -> None:
        filters = criteria_filters({"name": "sensor"}, ProductCellAdapter())
        assert filters == (FilterQuery("name", "sensor", MatchMode.CONTAINS),)

    def test_unknown_column_is_equals(self) -> None:
        filters = criteria_filters({"colour": "red"}, ProductCellAdapter())
        assert filters == (FilterQuery("colour", "red", MatchMode.EQUALS),)


class TestFindListPage:
    def test_name_search(self, products) -> None:
        page = find_list_page(products, ProductCellAdapter(), criteria={"name": "SENSOR"})
        assert [p.id for p in page.data] == ["p1", "p3"]
        assert page.total == 2

    def test_paging(self, products) -> None:
        page = find_list_page(products, ProductCellAdapter(), page_num=2, page_size=2)
        assert [p.id for p in page.data] == ["p3", "p4"]
        assert page.total == 4
        assert page.total_pages == 2
        assert page.has_previous
        assert not page.has_next

    def test_sorted_newest_first(self, products) -> None:
        sort = SortQuery("createTime", SortDirection.DESC)
        page = find_list_page(products, ProductCellAdapter(), page_size=3, sort=sort)
        assert [p.id for p in page.data] == ["p3", "p2", "p1"]

    def test_malformed_paging_clamped(self, products) -> None:
        page = find_list_page(products, ProductCellAdapter(), page_num=0, page_size=0)
        assert page.page_num == 1
        assert page.page_size == 1
        assert [p.id for p in page.data] == ["p1"]

    def test_to_dict(self, products) -> None:
        page = find_list_page(products, ProductCellAdapter(), page_size=1, criteria={"status": "1"})
        body = page.to_dict()
        assert body["total"] == 1
        assert body["pageNum"] == 1
        assert body["pageSize"] == 1
        assert body["data"][0]["name"] == "Gateway"
        assert body["data"][0]["createTime"] == "2024-02-01T00:00:00+00:00"


class TestFindList:
    def test_unpaged(self, products) -> None:
        found = find_list(products, ProductCellAdapter(), criteria={"deviceType": "direct", "status": "0"})
        assert [p.id for p in found] == ["p1", "p3", "p4"]


class TestRuleChainMsgLogListing:
    def test_filters_by_device_and_type(self) -> None:
        logs = [
            RuleChainMsgLog(id="1", device_name="Boiler-01", msg_type="telemetry",
                            ts=datetime(2024, 5, 1, tzinfo=UTC), owner="alice"),
            RuleChainMsgLog(id="2", device_name="boiler-02", msg_type="attributes", owner="alice"),
            RuleChainMsgLog(id="3", device_name="Pump", msg_type="telemetry", owner="bob"),
        ]
        page = find_list_page(
            logs,
            RuleChainMsgLogCellAdapter(),
            criteria={"deviceName": "boiler", "msgType": "telemetry", "owner": "alice"},
        )
        assert [log.id for log in page.data] == ["1"]
        assert page.to_dict()["data"][0]["ts"] == "2024-05-01T00:00:00+00:00"


class TestResultPage:
    def test_empty(self) -> None:
        page: ResultPage[int] = ResultPage(data=[], total=0, page_num=1, page_size=10)
        assert page.total_pages == 0
        assert not page.has_next

    def test_map_preserves_pagination(self) -> None:
        page = ResultPage(data=[1, 2], total=30, page_num=2, page_size=2)
        mapped = page.map(str)
        assert mapped.data == ["1", "2"]
        assert (mapped.total, mapped.page_num, mapped.page_size) == (30, 2, 2)
