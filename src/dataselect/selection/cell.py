"""Selection – Cell interface, value kinds and property schema.

A :class:`Cell` is the read-only view the filter, sort, page and metric
engines operate on.  Property values are restricted to a closed set of kinds::

    STRING     str
    NUMBER     int | float   (bool excluded, NaN treated as absent)
    TIMESTAMP  datetime      (naive values are read as UTC)
    BOOLEAN    bool

A property may also be list-valued: a tuple of values of those kinds.
``None`` means the property is absent.
"""
from __future__ import annotations

import abc
import dataclasses
import math
from datetime import UTC, date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Generic, Mapping, TypeVar, Union

from dataselect.selection.query import MatchMode

T = TypeVar("T")

ComparableValue = Union[str, int, float, datetime, bool]
PropertyValue = Union[ComparableValue, tuple[ComparableValue, ...]]


class ValueKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    TIMESTAMP = "timestamp"
    BOOLEAN = "boolean"


def kind_of(value: Any) -> ValueKind | None:
    """Return the :class:`ValueKind` of a normalized scalar, or ``None``."""
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, datetime):
        return ValueKind.TIMESTAMP
    if isinstance(value, str):
        return ValueKind.STRING
    return None


def _scalar(value: Any) -> ComparableValue | None:
    if isinstance(value, Enum):
        value = value.value
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if isinstance(value, str):
        return str(value)
    return None


def comparable(value: Any) -> PropertyValue | None:
    """Normalize a raw attribute into a property value.

    Unsupported types are reported as absent rather than raising, so a cell
    can never fail a query.
    """
    if isinstance(value, (list, tuple, set, frozenset)):
        members = (_scalar(member) for member in value)
        return tuple(member for member in members if member is not None)
    return _scalar(value)


@dataclasses.dataclass(frozen=True)
class PropertySpec:
    """Describes one queryable property of a resource kind."""
    name: str
    kind: ValueKind
    match: MatchMode = MatchMode.EQUALS
    case_insensitive: bool = False
    list_valued: bool = False


def schema_of(*specs: PropertySpec) -> Mapping[str, PropertySpec]:
    """Build a read-only ``name -> PropertySpec`` mapping."""
    return MappingProxyType({spec.name: spec for spec in specs})


class Cell(abc.ABC, Generic[T]):
    """Read-only, per-query view of one item.

    Subclasses declare ``schema`` and implement :meth:`_lookup`, returning the
    raw attribute for a property name or ``None`` for unknown names.

    Example::

        class UserCell(Cell[User]):
            schema = schema_of(PropertySpec("name", ValueKind.STRING))

            def _lookup(self, name: str) -> Any:
                match name:
                    case "name":
                        return self.item.name
                return None
    """

    __slots__ = ("_item",)

    schema: ClassVar[Mapping[str, PropertySpec]] = MappingProxyType({})

    def __init__(self, item: T) -> None:
        object.__setattr__(self, "_item", item)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    @property
    def item(self) -> T:
        return self._item

    @abc.abstractmethod
    def _lookup(self, name: str) -> Any: ...

    def get_property(self, name: str) -> PropertyValue | None:
        """Return the normalized value of *name*, or ``None`` when absent."""
        return comparable(self._lookup(name))

    def is_case_insensitive(self, name: str) -> bool:
        spec = self.schema.get(name)
        return spec is not None and spec.case_insensitive

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._item!r})"


__all__ = [
    "Cell",
    "ComparableValue",
    "PropertySpec",
    "PropertyValue",
    "ValueKind",
    "comparable",
    "kind_of",
    "schema_of",
]
