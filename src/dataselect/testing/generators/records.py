"""Testing generators – SampleRecord, a minimal resource kind for tests."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any

from dataselect.selection import (
    Cell,
    CellTypeAdapter,
    MatchMode,
    PropertySpec,
    ValueKind,
    schema_of,
)


@dataclasses.dataclass(frozen=True)
class SampleRecord:
    """Item with one property of each value kind plus a list-valued one.

    ``None`` fields are reported as absent by :class:`SampleRecordCell`.
    """
    id: int
    name: str | None = None
    status: str | None = None
    score: float | None = None
    created: datetime | None = None
    enabled: bool | None = None
    tags: tuple[str, ...] = ()
    title: str | None = None


class SampleRecordCell(Cell[SampleRecord]):
    schema = schema_of(
        PropertySpec("id", ValueKind.NUMBER),
        PropertySpec("name", ValueKind.STRING),
        PropertySpec("status", ValueKind.STRING),
        PropertySpec("score", ValueKind.NUMBER),
        PropertySpec("created", ValueKind.TIMESTAMP),
        PropertySpec("enabled", ValueKind.BOOLEAN),
        PropertySpec("tags", ValueKind.STRING, MatchMode.CONTAINS, list_valued=True),
        PropertySpec("title", ValueKind.STRING, MatchMode.CONTAINS, case_insensitive=True),
    )

    def _lookup(self, name: str) -> Any:
        r = self.item
        match name:
            case "id":
                return r.id
            case "name":
                return r.name
            case "status":
                return r.status
            case "score":
                return r.score
            case "created":
                return r.created
            case "enabled":
                return r.enabled
            case "tags":
                return r.tags
            case "title":
                return r.title
        return None


class SampleRecordAdapter(CellTypeAdapter[SampleRecord]):
    kind = "sample"
    cell_type = SampleRecordCell


__all__ = ["SampleRecord", "SampleRecordAdapter", "SampleRecordCell"]
