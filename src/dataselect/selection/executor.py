"""Selection – QueryExecutor, ListMeta and ResultEnvelope.

Pipeline order (fixed)::

    to_cells -> filter -> (filtered total, metrics) -> sort -> paginate -> from_cells

Metrics always see the filtered universe; the page window is always cut from
the sorted sequence.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Iterable, Mapping, TypeVar

from dataselect.observability.logging import get_logger
from dataselect.selection.adapter import CellAdapter
from dataselect.selection.filtering import FilterEngine
from dataselect.selection.metrics import MetricEngine
from dataselect.selection.pagination import Paginator
from dataselect.selection.query import NO_QUERY, QueryDescriptor
from dataselect.selection.sorting import SortEngine

T = TypeVar("T")
U = TypeVar("U")

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class ListMeta:
    """Counts before and after filtering."""
    total_items_before_filter: int
    total_items_after_filter: int

    @property
    def total_items(self) -> int:
        return self.total_items_after_filter

    def to_dict(self) -> dict[str, int]:
        return {"totalItems": self.total_items_after_filter}


@dataclasses.dataclass(frozen=True)
class ResultEnvelope(Generic[T]):
    """Items selected by one query plus their count metadata and metrics."""

    list_meta: ListMeta
    items: list[T]
    metrics: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    def map(self, fn: Callable[[T], U]) -> "ResultEnvelope[U]":
        """Return a new envelope with each item transformed by *fn*."""
        return ResultEnvelope(
            list_meta=self.list_meta,
            items=[fn(item) for item in self.items],
            metrics=self.metrics,
        )

    def to_dict(self, serialize: Callable[[T], Any] | None = None) -> dict[str, Any]:
        """Render the JSON response body.

        *serialize* converts each item; by default items exposing ``to_dict``
        are rendered through it and anything else is passed through.
        """
        render = serialize or _default_serialize
        body: dict[str, Any] = {
            "listMeta": self.list_meta.to_dict(),
            "items": [render(item) for item in self.items],
        }
        if self.metrics:
            body["metrics"] = _plain(self.metrics)
        return body


def _default_serialize(item: Any) -> Any:
    to_dict = getattr(item, "to_dict", None)
    return to_dict() if callable(to_dict) else item


def _plain(metrics: Mapping[str, Any]) -> dict[str, Any]:
    return {key: _plain(value) if isinstance(value, Mapping) else value for key, value in metrics.items()}


class QueryExecutor(Generic[T]):
    """Runs a :class:`QueryDescriptor` against items of one resource kind.

    Stateless apart from its collaborators, so one instance may serve
    concurrent callers.
    """

    def __init__(
        self,
        adapter: CellAdapter[T],
        *,
        filter_engine: FilterEngine | None = None,
        sort_engine: SortEngine | None = None,
        paginator: Paginator | None = None,
        metric_engine: MetricEngine | None = None,
    ) -> None:
        self._adapter = adapter
        self._filter = filter_engine or FilterEngine()
        self._sort = sort_engine or SortEngine()
        self._paginator = paginator or Paginator()
        self._metrics = metric_engine or MetricEngine()

    @property
    def adapter(self) -> CellAdapter[T]:
        return self._adapter

    def execute(self, items: Iterable[T], query: QueryDescriptor | None = None) -> ResultEnvelope[T]:
        query = query or NO_QUERY
        cells = self._adapter.to_cells(list(items))
        total_before = len(cells)

        filtered = self._filter.apply(cells, query.filters)
        total_after = len(filtered)
        metrics = self._metrics.compute(filtered, query.metrics)

        ordered = self._sort.apply(filtered, query.sort)
        window = self._paginator.apply(ordered, query.page)

        _log.debug(
            "dataselect.executed",
            kind=self._adapter.kind,
            total_before_filter=total_before,
            total_after_filter=total_after,
            returned=len(window),
            filters=len(query.filters),
            sort=query.sort.property if query.sort else None,
            page=query.page.page_number if query.page else None,
        )
        return ResultEnvelope(
            list_meta=ListMeta(
                total_items_before_filter=total_before,
                total_items_after_filter=total_after,
            ),
            items=self._adapter.from_cells(window),
            metrics=metrics,
        )


def select(
    items: Iterable[T],
    adapter: CellAdapter[T],
    query: QueryDescriptor | None = None,
) -> ResultEnvelope[T]:
    """One-shot helper: ``QueryExecutor(adapter).execute(items, query)``."""
    return QueryExecutor(adapter).execute(items, query)


__all__ = ["ListMeta", "QueryExecutor", "ResultEnvelope", "select"]
