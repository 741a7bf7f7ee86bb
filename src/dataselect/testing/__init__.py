"""Testing support – fakes and generators.

Import in tests::

    from dataselect.testing import InMemorySecretClient, SampleRecord, SampleRecordAdapter
"""

from dataselect.testing.fakes import InMemorySecretClient
from dataselect.testing.generators import (
    SampleRecord,
    SampleRecordAdapter,
    SampleRecordCell,
    query_strategy,
    records_strategy,
)

__all__ = [
    "InMemorySecretClient",
    "SampleRecord",
    "SampleRecordAdapter",
    "SampleRecordCell",
    "query_strategy",
    "records_strategy",
]
