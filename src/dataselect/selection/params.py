"""Selection – build a QueryDescriptor from request query parameters.

Recognised keys::

    filterBy=<property>:<value>     repeatable
    sortBy=<property>
    sortDirection=asc|desc
    page=<n>
    itemsPerPage=<n>
    metricBy=<property>             repeatable

Query strings are untyped, so a property *schema* (from the resource kind's
cell adapter) is used to coerce filter values and pick the match mode.  A
value of the form ``low..high`` on a number or timestamp property becomes an
``inRange`` filter; either side may be left empty.
"""
from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Mapping, Sequence

from dataselect.config.settings import SelectionSettings
from dataselect.observability.logging import get_logger
from dataselect.selection.cell import PropertySpec, ValueKind
from dataselect.selection.query import (
    FilterQuery,
    MatchMode,
    MetricQuery,
    PaginationQuery,
    QueryDescriptor,
    Range,
    SortDirection,
    SortQuery,
)

FILTER_BY = "filterBy"
SORT_BY = "sortBy"
SORT_DIRECTION = "sortDirection"
PAGE = "page"
ITEMS_PER_PAGE = "itemsPerPage"
METRIC_BY = "metricBy"

RANGE_SEPARATOR = ".."

_log = get_logger(__name__)

_UNCOERCIBLE = object()


def _values(params: Any, key: str) -> list[str]:
    getlist = getattr(params, "getlist", None)
    if callable(getlist):
        raw = getlist(key)
    else:
        raw = params.get(key)
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        return [str(raw)]
    return [str(v) for v in raw]


def _first(params: Any, key: str) -> str | None:
    values = _values(params, key)
    return values[0].strip() if values else None


def _int_param(params: Any, key: str, default: int) -> int:
    raw = _first(params, key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        _log.warning("query_params.invalid_integer", param=key, value=raw, default=default)
        return default


def _coerce_scalar(raw: str, kind: ValueKind) -> Any:
    match kind:
        case ValueKind.STRING:
            return raw
        case ValueKind.NUMBER:
            try:
                return int(raw)
            except ValueError:
                pass
            try:
                number = float(raw)
            except ValueError:
                return _UNCOERCIBLE
            return _UNCOERCIBLE if math.isnan(number) else number
        case ValueKind.TIMESTAMP:
            try:
                return datetime.fromisoformat(raw)
            except ValueError:
                return _UNCOERCIBLE
        case ValueKind.BOOLEAN:
            lowered = raw.lower()
            if lowered in ("true", "1", "yes"):
                return True
            if lowered in ("false", "0", "no"):
                return False
            return _UNCOERCIBLE
    return _UNCOERCIBLE


def _filter_for(prop: str, raw: str, spec: PropertySpec | None) -> FilterQuery:
    if spec is None:
        return FilterQuery(prop, raw)

    if spec.kind in (ValueKind.NUMBER, ValueKind.TIMESTAMP) and RANGE_SEPARATOR in raw:
        low_raw, _, high_raw = raw.partition(RANGE_SEPARATOR)
        bounds = []
        for part in (low_raw.strip(), high_raw.strip()):
            value = _coerce_scalar(part, spec.kind) if part else None
            if value is _UNCOERCIBLE:
                _log.warning("query_params.uncoercible_value", property=prop, value=raw, kind=spec.kind.value)
                return FilterQuery(prop, raw)
            bounds.append(value)
        return FilterQuery(prop, Range(bounds[0], bounds[1]), MatchMode.IN_RANGE)

    value = _coerce_scalar(raw, spec.kind)
    if value is _UNCOERCIBLE:
        # The raw string never matches a value of another kind.
        _log.warning("query_params.uncoercible_value", property=prop, value=raw, kind=spec.kind.value)
        return FilterQuery(prop, raw, spec.match)
    return FilterQuery(prop, value, spec.match)


def parse_filters(
    raw_filters: Sequence[str],
    schema: Mapping[str, PropertySpec] | None = None,
) -> tuple[FilterQuery, ...]:
    """Parse ``<property>:<value>`` expressions; malformed entries are skipped."""
    schema = schema or {}
    filters: list[FilterQuery] = []
    for expression in raw_filters:
        prop, sep, raw = expression.partition(":")
        prop = prop.strip()
        if not sep or not prop:
            _log.warning("query_params.invalid_filter", expression=expression)
            continue
        filters.append(_filter_for(prop, raw, schema.get(prop)))
    return tuple(filters)


def parse_sort(params: Any) -> SortQuery | None:
    prop = _first(params, SORT_BY)
    if not prop:
        return None
    raw_direction = (_first(params, SORT_DIRECTION) or SortDirection.ASC.value).lower()
    try:
        direction = SortDirection(raw_direction)
    except ValueError:
        _log.warning("query_params.invalid_sort_direction", value=raw_direction)
        direction = SortDirection.ASC
    return SortQuery(prop, direction)


def parse_page(params: Any, settings: SelectionSettings) -> PaginationQuery | None:
    """Return ``None`` (no pagination) unless ``page`` or ``itemsPerPage`` is present."""
    if _first(params, PAGE) is None and _first(params, ITEMS_PER_PAGE) is None:
        return None
    page_number = _int_param(params, PAGE, 1)
    page_size = _int_param(params, ITEMS_PER_PAGE, settings.default_items_per_page)
    return PaginationQuery(page_number, min(page_size, settings.max_items_per_page))


def parse_metrics(params: Any) -> tuple[MetricQuery, ...]:
    names = [name.strip() for name in _values(params, METRIC_BY)]
    return tuple(MetricQuery(name) for name in dict.fromkeys(n for n in names if n))


def parse_query_params(
    params: Mapping[str, Any],
    schema: Mapping[str, PropertySpec] | None = None,
    settings: SelectionSettings | None = None,
) -> QueryDescriptor:
    """Build a :class:`QueryDescriptor` from query parameters.

    *params* may be a plain mapping of scalar or list values (non-string
    scalars such as ``{"page": 2}`` are read as their ``str()``), or any
    multi-dict exposing ``getlist`` (e.g. Starlette / Werkzeug query params).
    Unknown keys are ignored and malformed values fall back to defaults, so
    this never raises for client input.
    """
    settings = settings or SelectionSettings()
    return QueryDescriptor(
        filters=parse_filters(_values(params, FILTER_BY), schema),
        sort=parse_sort(params),
        page=parse_page(params, settings),
        metrics=parse_metrics(params),
    )


__all__ = [
    "FILTER_BY",
    "ITEMS_PER_PAGE",
    "METRIC_BY",
    "PAGE",
    "SORT_BY",
    "SORT_DIRECTION",
    "parse_filters",
    "parse_metrics",
    "parse_page",
    "parse_query_params",
    "parse_sort",
]
