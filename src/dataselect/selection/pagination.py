"""Selection – Paginator."""
from __future__ import annotations

from typing import Sequence, TypeVar

from dataselect.selection.query import PaginationQuery

C = TypeVar("C")


class Paginator:
    """Cuts the ``[(n-1)*size, n*size)`` window out of an ordered sequence.

    A window past the end yields an empty list.
    """

    def apply(self, cells: Sequence[C], page: PaginationQuery | None) -> list[C]:
        if page is None:
            return list(cells)
        start = page.offset
        return list(cells[start:start + page.page_size])


__all__ = ["Paginator"]
