"""Entities – page-number listings driven by criteria.

List endpoints bind one query parameter per filterable column
(``status=...&name=...``); an empty value means "no filter on that column".
The match mode of each column comes from the adapter schema, so ``name``
on products is a case-insensitive substring search while ``status`` is an
exact match.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, TypeVar

from dataselect.entities.page import ResultPage
from dataselect.selection import (
    CellAdapter,
    FilterQuery,
    MatchMode,
    PaginationQuery,
    QueryDescriptor,
    QueryExecutor,
    SortQuery,
)

T = TypeVar("T")


def criteria_filters(
    criteria: Mapping[str, Any] | None,
    adapter: CellAdapter[Any],
) -> tuple[FilterQuery, ...]:
    """Turn ``{column: value}`` criteria into filters, skipping empty values."""
    filters: list[FilterQuery] = []
    for prop, value in (criteria or {}).items():
        if value is None or value == "":
            continue
        spec = adapter.schema.get(prop)
        filters.append(FilterQuery(prop, value, spec.match if spec else MatchMode.EQUALS))
    return tuple(filters)


def find_list_page(
    items: Iterable[T],
    adapter: CellAdapter[T],
    page_num: int = 1,
    page_size: int = 10,
    criteria: Mapping[str, Any] | None = None,
    sort: SortQuery | None = None,
) -> ResultPage[T]:
    """Filter *items* by *criteria* and return page *page_num*.

    ``total`` is the number of matches before paging.
    """
    page = PaginationQuery(page_num, page_size)
    query = QueryDescriptor(filters=criteria_filters(criteria, adapter), sort=sort, page=page)
    envelope = QueryExecutor(adapter).execute(items, query)
    return ResultPage(
        data=envelope.items,
        total=envelope.list_meta.total_items_after_filter,
        page_num=page.page_number,
        page_size=page.page_size,
    )


def find_list(
    items: Iterable[T],
    adapter: CellAdapter[T],
    criteria: Mapping[str, Any] | None = None,
    sort: SortQuery | None = None,
) -> list[T]:
    """Unpaged variant of :func:`find_list_page`."""
    query = QueryDescriptor(filters=criteria_filters(criteria, adapter), sort=sort)
    return QueryExecutor(adapter).execute(items, query).items


__all__ = ["criteria_filters", "find_list", "find_list_page"]
