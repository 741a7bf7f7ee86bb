"""Selection – generic filter / sort / paginate / metric pipeline over cells."""
from dataselect.selection.adapter import AdapterRegistry, CellAdapter, CellTypeAdapter
from dataselect.selection.cell import (
    Cell,
    ComparableValue,
    PropertySpec,
    PropertyValue,
    ValueKind,
    comparable,
    kind_of,
    schema_of,
)
from dataselect.selection.executor import ListMeta, QueryExecutor, ResultEnvelope, select
from dataselect.selection.filtering import FilterEngine
from dataselect.selection.metrics import UNKNOWN_GROUP, MetricEngine, group_key
from dataselect.selection.pagination import Paginator
from dataselect.selection.params import parse_query_params
from dataselect.selection.query import (
    NO_QUERY,
    Aggregation,
    FilterQuery,
    MatchMode,
    MetricQuery,
    PaginationQuery,
    QueryDescriptor,
    Range,
    SortDirection,
    SortQuery,
)
from dataselect.selection.sorting import SortEngine

__all__ = [
    "NO_QUERY",
    "UNKNOWN_GROUP",
    "AdapterRegistry",
    "Aggregation",
    "Cell",
    "CellAdapter",
    "CellTypeAdapter",
    "ComparableValue",
    "FilterEngine",
    "FilterQuery",
    "ListMeta",
    "MatchMode",
    "MetricEngine",
    "MetricQuery",
    "PaginationQuery",
    "Paginator",
    "PropertySpec",
    "PropertyValue",
    "QueryDescriptor",
    "QueryExecutor",
    "Range",
    "ResultEnvelope",
    "SortDirection",
    "SortEngine",
    "SortQuery",
    "ValueKind",
    "comparable",
    "group_key",
    "kind_of",
    "parse_query_params",
    "schema_of",
    "select",
]
