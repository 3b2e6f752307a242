"""Mapper protocols.

Mapper is the dict-row interface the query layer calls (map_one per row,
map_many per result set). RowMapper is the per-row callback interface that
reads columns through a RowSource.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from row_setter.core.row import RowSource

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Mapper(Protocol[T]):
    """Base mapper protocol."""

    def map_one(self, row: Mapping[str, Any]) -> T:
        """Map a single row dict to a target object."""
        ...

    def map_many(self, rows: list[Mapping[str, Any]]) -> list[T]:
        """Map multiple row dicts to a list of target objects."""
        ...


@runtime_checkable
class RowMapper(Protocol[T_co]):
    """Per-row conversion callback."""

    def map_row(self, row: RowSource) -> T_co:
        """Map one row source to a target object."""
        ...
