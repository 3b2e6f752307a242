"""Row sources.

A row source is the per-row view a mapper reads from: a column count, a
column name-or-alias and a value, both addressed by 1-based index. CursorRow
wraps a DB-API row; DictRow wraps a row dict.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RowSource(Protocol):
    """Per-row column access, 1-based."""

    def column_count(self) -> int:
        """Number of columns in the row."""
        ...

    def column_name(self, index: int) -> str:
        """Column name or alias at index."""
        ...

    def value(self, index: int) -> Any:
        """Raw column value at index."""
        ...


def _check_index(index: int, count: int) -> int:
    if index < 1 or index > count:
        raise IndexError(f"Column index {index} out of range 1..{count}")
    return index - 1


class CursorRow:
    """A DB-API row paired with the cursor's column names.

    ``values`` may be tuple-like (plain cursors, ``sqlite3.Row``) or a
    mapping keyed by column name (dict cursors such as psycopg ``dict_row``).
    """

    def __init__(self, columns: Sequence[str], values: Sequence[Any] | Mapping[str, Any]) -> None:
        self._columns = list(columns)
        self._values = values

    def column_count(self) -> int:
        return len(self._columns)

    def column_name(self, index: int) -> str:
        return self._columns[_check_index(index, len(self._columns))]

    def value(self, index: int) -> Any:
        position = _check_index(index, len(self._columns))
        if isinstance(self._values, Mapping):
            return self._values[self._columns[position]]
        return self._values[position]

    def __repr__(self) -> str:
        return f"CursorRow({self._columns!r})"


class DictRow:
    """A row dict in column order."""

    def __init__(self, row: Mapping[str, Any]) -> None:
        self._columns = list(row.keys())
        self._row = row

    def column_count(self) -> int:
        return len(self._columns)

    def column_name(self, index: int) -> str:
        return self._columns[_check_index(index, len(self._columns))]

    def value(self, index: int) -> Any:
        return self._row[self.column_name(index)]

    def __repr__(self) -> str:
        return f"DictRow({self._columns!r})"


def column_names(cursor: Any) -> list[str]:
    """Column names or aliases from a cursor's description."""
    if cursor.description is None:
        return []
    return [desc[0] for desc in cursor.description]


def iter_rows(cursor: Any, batch_size: int = 500) -> Iterator[CursorRow]:
    """Yield a CursorRow for every remaining row of an executed cursor.

    Rows are fetched ``batch_size`` at a time, never all at once.
    """
    columns = column_names(cursor)
    if not columns:
        return
    while batch := cursor.fetchmany(batch_size):
        for values in batch:
            yield CursorRow(columns, values)


def map_cursor(cursor: Any, mapper: Any) -> list[Any]:
    """Apply ``mapper.map_row`` to every row of an executed cursor."""
    return [mapper.map_row(row) for row in iter_rows(cursor)]
