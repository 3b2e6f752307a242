"""row-setter - map database result rows onto objects by setter naming convention."""

from __future__ import annotations

from row_setter.core.config import MapperConfig
from row_setter.core.enums import ParameterKind
from row_setter.core.exceptions import (
    ConstructionError,
    InstantiationError,
    MappingError,
    RowMappingError,
    RowSetterError,
    TemporalConversionError,
)
from row_setter.core.row import CursorRow, DictRow, RowSource, iter_rows, map_cursor
from row_setter.mapping.convention import ColumnBinding, NameConventionMapper
from row_setter.mapping.setters import SetterIndex, SetterSpec

__all__ = [
    # Mapper
    "NameConventionMapper",
    "ColumnBinding",
    "SetterIndex",
    "SetterSpec",
    "ParameterKind",
    # Config
    "MapperConfig",
    # Rows
    "RowSource",
    "CursorRow",
    "DictRow",
    "iter_rows",
    "map_cursor",
    # Exceptions
    "RowSetterError",
    "ConstructionError",
    "InstantiationError",
    "MappingError",
    "RowMappingError",
    "TemporalConversionError",
]
