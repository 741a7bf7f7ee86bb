"""Unit tests for the MetricEngine."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from dataselect.selection import UNKNOWN_GROUP, MetricEngine, MetricQuery, group_key
from dataselect.testing import SampleRecord, SampleRecordAdapter


def _compute(records: list[SampleRecord], *props: str) -> dict[str, Any]:
    cells = SampleRecordAdapter().to_cells(records)
    return MetricEngine().compute(cells, [MetricQuery(p) for p in props])


class TestGroupKey:
    def test_booleans(self) -> None:
        assert group_key(True) == "true"
        assert group_key(False) == "false"

    def test_timestamp_iso(self) -> None:
        assert group_key(datetime(2024, 1, 2, tzinfo=UTC)) == "2024-01-02T00:00:00+00:00"

    def test_number(self) -> None:
        assert group_key(3) == "3"


class TestMetricEngine:
    def test_count_by_property(self) -> None:
        records = [SampleRecord(id=i, status=s) for i, s in enumerate(["ok", "ok", "err", "ok", "err"])]
        assert _compute(records, "status") == {"ok": 3, "err": 2}

    def test_absent_values_grouped_as_unknown(self) -> None:
        records = [SampleRecord(id=0, status="ok"), SampleRecord(id=1)]
        assert _compute(records, "status") == {"ok": 1, UNKNOWN_GROUP: 1}

    def test_unknown_property_counts_everything_as_unknown(self) -> None:
        records = [SampleRecord(id=0), SampleRecord(id=1)]
        assert _compute(records, "nope") == {UNKNOWN_GROUP: 2}

    def test_list_valued_counts_each_member(self) -> None:
        records = [
            SampleRecord(id=0, tags=("x", "y")),
            SampleRecord(id=1, tags=("x",)),
            SampleRecord(id=2, tags=()),
        ]
        assert _compute(records, "tags") == {"x": 2, "y": 1, UNKNOWN_GROUP: 1}

    def test_multiple_requests_keyed_by_property(self) -> None:
        records = [SampleRecord(id=0, status="ok", enabled=True), SampleRecord(id=1, status="ok")]
        result = _compute(records, "status", "enabled")
        assert result == {
            "status": {"ok": 2},
            "enabled": {"true": 1, UNKNOWN_GROUP: 1},
        }

    def test_no_requests(self) -> None:
        assert _compute([SampleRecord(id=0)]) == {}

    def test_empty_cells(self) -> None:
        assert _compute([], "status") == {}

    def test_count_matches_single_request(self) -> None:
        records = [SampleRecord(id=0, enabled=False), SampleRecord(id=1, enabled=False)]
        cells = SampleRecordAdapter().to_cells(records)
        assert MetricEngine().count(cells, MetricQuery("enabled")) == {"false": 2}
        assert _compute(records, "enabled") == {"false": 2}
