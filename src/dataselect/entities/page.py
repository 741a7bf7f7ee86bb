"""Entities – ResultPage (page-number based list response)."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclasses.dataclass
class ResultPage(Generic[T]):
    """Offset-based page of entities with computed navigation properties."""

    data: list[T]
    total: int
    page_num: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0 or self.total <= 0:
            return 0
        return math.ceil(self.total / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page_num < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page_num > 1

    def map(self, fn: Callable[[T], Any]) -> "ResultPage[Any]":
        """Return a new :class:`ResultPage` with each item transformed by *fn*."""
        return ResultPage(
            data=[fn(item) for item in self.data],
            total=self.total,
            page_num=self.page_num,
            page_size=self.page_size,
        )

    def to_dict(self, serialize: Callable[[T], Any] | None = None) -> dict[str, Any]:
        render = serialize or (lambda item: item.to_dict() if hasattr(item, "to_dict") else item)
        return {
            "total": self.total,
            "pageNum": self.page_num,
            "pageSize": self.page_size,
            "data": [render(item) for item in self.data],
        }


__all__ = ["ResultPage"]
