"""Mapping layer - apply result rows to objects through their setters."""

from __future__ import annotations

from row_setter.mapping.convention import ColumnBinding, NameConventionMapper
from row_setter.mapping.naming import column_to_setter_key, setter_name_for, to_upper_camel
from row_setter.mapping.protocol import Mapper, RowMapper
from row_setter.mapping.setters import SetterIndex, SetterSpec

__all__ = [
    "NameConventionMapper",
    "ColumnBinding",
    "SetterIndex",
    "SetterSpec",
    "Mapper",
    "RowMapper",
    "column_to_setter_key",
    "setter_name_for",
    "to_upper_camel",
]
