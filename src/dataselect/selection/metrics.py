"""Selection – MetricEngine (grouped counts over the filtered set).

One metric request yields a flat ``{group_key: count}`` mapping::

    metricBy=status                 ->  {"ok": 3, "err": 2}

Several requests are keyed by property so their groups never mix::

    metricBy=status&metricBy=type   ->  {"status": {...}, "type": {...}}
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Sequence

from dataselect.selection.cell import Cell, ComparableValue
from dataselect.selection.query import Aggregation, MetricQuery

UNKNOWN_GROUP = "<unknown>"


def group_key(value: ComparableValue) -> str:
    """Render a property value as a JSON-ready group key."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


class MetricEngine:
    """Counts cells per distinct property value."""

    def _keys(self, cell: Cell[Any], prop: str) -> list[str]:
        value = cell.get_property(prop)
        if value is None:
            return [UNKNOWN_GROUP]
        if isinstance(value, tuple):
            members = list(dict.fromkeys(group_key(member) for member in value))
            return members or [UNKNOWN_GROUP]
        return [group_key(value)]

    def count(self, cells: Iterable[Cell[Any]], request: MetricQuery) -> dict[str, int]:
        """``{group_key: count}`` for one request."""
        counts: dict[str, int] = {}
        for cell in cells:
            for key in self._keys(cell, request.property):
                counts[key] = counts.get(key, 0) + 1
        return counts

    def compute(
        self,
        cells: Iterable[Cell[Any]],
        requests: Sequence[MetricQuery],
    ) -> dict[str, Any]:
        """Flat counts for a single request, ``{property: counts}`` for several."""
        supported = [r for r in requests if r.aggregation is Aggregation.COUNT]
        if not supported:
            return {}
        snapshot = list(cells)
        if len(supported) == 1:
            return self.count(snapshot, supported[0])
        return {request.property: self.count(snapshot, request) for request in supported}


__all__ = ["MetricEngine", "UNKNOWN_GROUP", "group_key"]
