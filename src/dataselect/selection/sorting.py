"""Selection – SortEngine."""
from __future__ import annotations

from typing import Any, Iterable

from dataselect.selection.cell import Cell, ValueKind, kind_of
from dataselect.selection.query import SortDirection, SortQuery

# Keeps mixed-kind values from ever being compared with each other.
_KIND_RANK = {
    ValueKind.BOOLEAN: 0,
    ValueKind.NUMBER: 1,
    ValueKind.STRING: 2,
    ValueKind.TIMESTAMP: 3,
}


class SortEngine:
    """Stable single-key sort.

    Cells whose sort property is absent (or list-valued) follow every cell
    with a value, for both directions, in their input order.
    """

    def apply(self, cells: Iterable[Cell[Any]], sort: SortQuery | None) -> list[Cell[Any]]:
        ordered = list(cells)
        if sort is None:
            return ordered

        present: list[tuple[tuple[int, Any], Cell[Any]]] = []
        absent: list[Cell[Any]] = []
        for cell in ordered:
            value = cell.get_property(sort.property)
            kind = kind_of(value)
            if kind is None:
                absent.append(cell)
            else:
                present.append(((_KIND_RANK[kind], value), cell))

        # list.sort keeps equal keys in input order even with reverse=True
        present.sort(key=lambda pair: pair[0], reverse=sort.direction is SortDirection.DESC)
        return [cell for _, cell in present] + absent


__all__ = ["SortEngine"]
