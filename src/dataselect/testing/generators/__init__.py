"""Testing generators – sample resource kind and Hypothesis strategies."""
from dataselect.testing.generators.records import SampleRecord, SampleRecordAdapter, SampleRecordCell
from dataselect.testing.generators.strategies import (
    filter_strategy,
    page_strategy,
    query_strategy,
    records_strategy,
    sort_strategy,
)

__all__ = [
    "SampleRecord",
    "SampleRecordAdapter",
    "SampleRecordCell",
    "filter_strategy",
    "page_strategy",
    "query_strategy",
    "records_strategy",
    "sort_strategy",
]
