"""Selection – FilterEngine.

Criteria combine with AND.  A criterion never matches an absent property, an
unknown property name or a value of a different kind; none of these raise.
"""
from __future__ import annotations

from typing import Any, Iterable, Sequence

from dataselect.selection.cell import Cell, PropertyValue, ValueKind, comparable, kind_of
from dataselect.selection.query import FilterQuery, MatchMode, Range

_RANGE_KINDS = frozenset({ValueKind.NUMBER, ValueKind.TIMESTAMP})


def _equals(actual: Any, expected: Any, case_insensitive: bool) -> bool:
    if isinstance(actual, tuple) or isinstance(expected, tuple):
        if not (isinstance(actual, tuple) and isinstance(expected, tuple)):
            return False
        return len(actual) == len(expected) and all(
            _equals(a, e, case_insensitive) for a, e in zip(actual, expected)
        )
    if kind_of(actual) is None or kind_of(actual) != kind_of(expected):
        return False
    if case_insensitive and isinstance(actual, str):
        return actual.casefold() == expected.casefold()
    return actual == expected


def _contains(actual: Any, expected: Any, case_insensitive: bool) -> bool:
    if isinstance(actual, tuple):
        return any(_equals(member, expected, case_insensitive) for member in actual)
    if isinstance(actual, str) and isinstance(expected, str):
        if case_insensitive:
            return expected.casefold() in actual.casefold()
        return expected in actual
    return False


# A supplied bound that normalizes to absent (e.g. NaN) closes the range.
_UNUSABLE = object()


def _bound(value: Any) -> Any:
    if value is None:
        return None
    normalized = comparable(value)
    return _UNUSABLE if normalized is None else normalized


def _in_range(actual: Any, expected: Any) -> bool:
    if isinstance(expected, Range):
        low, high = _bound(expected.low), _bound(expected.high)
    elif isinstance(expected, (tuple, list)) and len(expected) == 2:
        low, high = _bound(expected[0]), _bound(expected[1])
    else:
        return False
    if low is _UNUSABLE or high is _UNUSABLE:
        return False
    kind = kind_of(actual)
    if kind not in _RANGE_KINDS:
        return False
    for bound in (low, high):
        if bound is not None and kind_of(bound) != kind:
            return False
    if low is not None and actual < low:
        return False
    if high is not None and actual > high:
        return False
    return True


class FilterEngine:
    """Keeps the cells that satisfy every criterion."""

    def matches(self, cell: Cell[Any], criterion: FilterQuery) -> bool:
        actual: PropertyValue | None = cell.get_property(criterion.property)
        if actual is None:
            return False
        case_insensitive = cell.is_case_insensitive(criterion.property)
        match criterion.match:
            case MatchMode.EQUALS:
                return _equals(actual, comparable(criterion.value), case_insensitive)
            case MatchMode.CONTAINS:
                return _contains(actual, comparable(criterion.value), case_insensitive)
            case MatchMode.IN_RANGE:
                return _in_range(actual, criterion.value)
            case _:
                return False

    def apply(self, cells: Iterable[Cell[Any]], filters: Sequence[FilterQuery]) -> list[Cell[Any]]:
        if not filters:
            return list(cells)
        return [cell for cell in cells if all(self.matches(cell, f) for f in filters)]


__all__ = ["FilterEngine"]
