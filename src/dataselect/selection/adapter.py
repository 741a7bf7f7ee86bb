"""Selection – CellAdapter port and explicit AdapterRegistry."""
from __future__ import annotations

import abc
from typing import Any, ClassVar, Generic, Iterable, Mapping, Sequence, TypeVar

from dataselect.kernel.errors import DuplicateResourceKindError, UnknownResourceKindError
from dataselect.selection.cell import Cell, PropertySpec

T = TypeVar("T")


class CellAdapter(abc.ABC, Generic[T]):
    """Port: converts items of one resource kind to cells and back.

    ``from_cells(to_cells(items)) == items`` holds for every input; cells keep
    a reference to their item, so nothing is fabricated or lost.
    """

    kind: ClassVar[str] = ""

    @abc.abstractmethod
    def to_cell(self, item: T) -> Cell[T]: ...

    @property
    @abc.abstractmethod
    def schema(self) -> Mapping[str, PropertySpec]: ...

    def to_cells(self, items: Iterable[T]) -> list[Cell[T]]:
        return [self.to_cell(item) for item in items]

    def from_cells(self, cells: Iterable[Cell[T]]) -> list[T]:
        return [cell.item for cell in cells]


class CellTypeAdapter(CellAdapter[T]):
    """Adapter driven by a :class:`Cell` subclass.

    Subclasses only declare ``kind`` and ``cell_type``::

        class UserAdapter(CellTypeAdapter[User]):
            kind = "user"
            cell_type = UserCell
    """

    cell_type: ClassVar[type[Cell[Any]]]

    def to_cell(self, item: T) -> Cell[T]:
        return self.cell_type(item)

    @property
    def schema(self) -> Mapping[str, PropertySpec]:
        return self.cell_type.schema


class AdapterRegistry:
    """Explicit ``kind -> CellAdapter`` registry."""

    def __init__(self, adapters: Sequence[CellAdapter[Any]] = ()) -> None:
        self._adapters: dict[str, CellAdapter[Any]] = {}
        for adapter in adapters:
            self.register(adapter)

    def register(self, adapter: CellAdapter[Any]) -> None:
        kind = adapter.kind
        if not kind:
            raise ValueError(f"{type(adapter).__name__} must declare a non-empty 'kind'")
        if kind in self._adapters:
            raise DuplicateResourceKindError(kind)
        self._adapters[kind] = adapter

    def get(self, kind: str) -> CellAdapter[Any]:
        try:
            return self._adapters[kind]
        except KeyError:
            raise UnknownResourceKindError(kind, self.kinds()) from None

    def kinds(self) -> list[str]:
        return sorted(self._adapters)

    def __contains__(self, kind: object) -> bool:
        return kind in self._adapters

    def __len__(self) -> int:
        return len(self._adapters)


__all__ = ["AdapterRegistry", "CellAdapter", "CellTypeAdapter"]
