"""Selection – QueryDescriptor and its filter/sort/page/metric parts."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any


class MatchMode(str, Enum):
    EQUALS = "equals"
    CONTAINS = "contains"
    IN_RANGE = "inRange"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Aggregation(str, Enum):
    COUNT = "count"


@dataclasses.dataclass(frozen=True)
class Range:
    """Inclusive ``[low, high]`` bound; ``None`` leaves that side open."""
    low: Any = None
    high: Any = None


@dataclasses.dataclass(frozen=True)
class FilterQuery:
    """Single filter criterion applied to one cell property."""
    property: str
    value: Any
    match: MatchMode = MatchMode.EQUALS


@dataclasses.dataclass(frozen=True)
class SortQuery:
    """Single sort criterion."""
    property: str
    direction: SortDirection = SortDirection.ASC


@dataclasses.dataclass(frozen=True)
class PaginationQuery:
    """Offset-based pagination parameters.

    Values below 1 are clamped to 1 instead of being rejected.
    """
    page_number: int = 1
    page_size: int = 10

    def __post_init__(self) -> None:
        if self.page_number < 1:
            object.__setattr__(self, "page_number", 1)
        if self.page_size < 1:
            object.__setattr__(self, "page_size", 1)

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size


@dataclasses.dataclass(frozen=True)
class MetricQuery:
    """Aggregation over the filtered set, grouped by ``property``."""
    property: str
    aggregation: Aggregation = Aggregation.COUNT


@dataclasses.dataclass(frozen=True)
class QueryDescriptor:
    """Immutable description of one selection request.

    ``sort=None`` keeps input order; ``page=None`` returns every match.
    """

    filters: tuple[FilterQuery, ...] = ()
    sort: SortQuery | None = None
    page: PaginationQuery | None = None
    metrics: tuple[MetricQuery, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", tuple(self.filters))
        object.__setattr__(self, "metrics", tuple(self.metrics))

    def with_page(self, page_number: int, page_size: int) -> "QueryDescriptor":
        """Return a copy windowed to *page_number* / *page_size*."""
        return dataclasses.replace(self, page=PaginationQuery(page_number, page_size))

    def without_page(self) -> "QueryDescriptor":
        return dataclasses.replace(self, page=None)


NO_QUERY = QueryDescriptor()


__all__ = [
    "Aggregation",
    "FilterQuery",
    "MatchMode",
    "MetricQuery",
    "NO_QUERY",
    "PaginationQuery",
    "QueryDescriptor",
    "Range",
    "SortDirection",
    "SortQuery",
]
