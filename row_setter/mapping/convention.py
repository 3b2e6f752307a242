"""Name-convention row mapper.

Maps a result row onto an object by calling setters whose names match the
row's columns: column ``SOME_VARIABLE`` is applied through
``setSomeVariable`` (or ``set_some_variable``).

The mapper is bound either to a class, which is instantiated with no
arguments for every row, or to an existing instance, which every call
populates and returns. Binding to an instance is meant for single-row
results; mapping several rows onto it just overwrites the same object.

A column that cannot be applied is logged as a warning and skipped, so one
bad row cannot abort a result-set traversal. The only error map_row raises is
InstantiationError, when a class-bound target cannot be created; that is a
fault of the target class, not of the row.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from row_setter.core.config import MapperConfig
from row_setter.core.enums import ParameterKind
from row_setter.core.exceptions import InstantiationError, RowMappingError
from row_setter.core.row import DictRow, RowSource
from row_setter.mapping.coercion import convert_temporal
from row_setter.mapping.naming import column_to_setter_key
from row_setter.mapping.setters import SetterIndex, SetterSpec

T = TypeVar("T")

_SKIP = object()


@dataclass(frozen=True)
class ColumnBinding:
    """A column resolved against the setter index."""

    column_name: str
    setter_key: str
    setter: SetterSpec | None

    @property
    def exists(self) -> bool:
        return self.setter is not None

    @property
    def parameter_type(self) -> Any:
        return self.setter.parameter_type if self.setter is not None else None


def _instantiate(target_class: type[T]) -> T:
    try:
        return target_class()
    except Exception as e:
        raise InstantiationError(target_class.__name__, f"{type(e).__name__}: {e}") from e


class NameConventionMapper(Generic[T]):
    """Row mapper driven by the setter naming convention.

    Args:
        target: The class to instantiate per row, or an instance to populate.
        config: Mapping options.
        logger: Logger receiving per-column warnings. Defaults to this
                module's logger.

    Raises:
        InstantiationError: ``target`` is a class that cannot be called
            with no arguments.
    """

    def __init__(
        self,
        target: type[T] | T,
        *,
        config: MapperConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or MapperConfig()
        self._logger = logger or logging.getLogger(__name__)
        self._bound = not isinstance(target, type)
        if self._bound:
            self._target_class: type[T] = type(target)
            self._instance: T | None = target  # type: ignore[assignment]
        else:
            _instantiate(target)  # type: ignore[arg-type]
            self._target_class = target  # type: ignore[assignment]
            self._instance = None
        self._setters = SetterIndex.from_class(self._target_class, self._config.setter_prefix)

    @property
    def target_class(self) -> type[T]:
        return self._target_class

    @property
    def setters(self) -> SetterIndex:
        return self._setters

    @property
    def config(self) -> MapperConfig:
        return self._config

    def bind(self, column_name: str) -> ColumnBinding:
        """Resolve a column name to its setter, if any."""
        key = column_to_setter_key(column_name, self._config.setter_prefix)
        return ColumnBinding(column_name, key, self._setters.get(key))

    def map_row(self, row: RowSource) -> T:
        """Populate the target from every matching column of ``row``.

        Raises:
            InstantiationError: the target class failed to instantiate for
                this row. Column failures are logged, never raised.
        """
        target = self._instance if self._bound else _instantiate(self._target_class)

        try:
            column_count = row.column_count()
        except Exception as e:
            self._logger.warning(
                "Cannot read columns of row for %s: %s", self._target_class.__name__, e
            )
            return target

        for index in range(1, column_count + 1):
            try:
                self._map_column(target, row, index)
            except RowMappingError as e:
                self._logger.warning("%s", e)

        return target

    __call__ = map_row

    def map_one(self, row: Mapping[str, Any]) -> T:
        """Map a single row dict."""
        return self.map_row(DictRow(row))

    def map_many(self, rows: list[Mapping[str, Any]]) -> list[T]:
        """Map all row dicts via map_one."""
        return [self.map_one(row) for row in rows]

    def _map_column(self, target: T, row: RowSource, index: int) -> None:
        column = f"#{index}"
        try:
            column = row.column_name(index)
            value = row.value(index)
            binding = self.bind(column)
            if binding.setter is None:
                return
            value = self._coerce(binding.setter, value)
            if value is _SKIP:
                return
            getattr(target, binding.setter.name)(value)
        except Exception as e:
            raise RowMappingError(column, self._target_class.__name__, str(e)) from e

    def _coerce(self, setter: SetterSpec, value: Any) -> Any:
        if setter.kind is ParameterKind.PRIMITIVE and value is None:
            return _SKIP
        temporal = setter.kind in (ParameterKind.DATE, ParameterKind.DATETIME)
        if temporal and self._config.convert_temporal:
            return convert_temporal(setter.kind, value, setter.value_type)
        if value is None:
            return None
        return setter.adapter.validate_python(value, strict=self._config.strict_types or None)
