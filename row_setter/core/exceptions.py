"""row-setter exception hierarchy.

Construction errors surface to whoever builds a mapper. Mapping errors are
raised per column inside the mapper and stop at the row boundary.
"""

from __future__ import annotations

from typing import Any


class RowSetterError(Exception):
    """Base exception for all row-setter errors."""


# --- Construction ---


class ConstructionError(RowSetterError):
    """Base for errors raised while building a mapper."""


class InstantiationError(ConstructionError):
    """Raised when the target class cannot be instantiated without arguments."""

    def __init__(self, target_class: str, detail: str) -> None:
        self.target_class = target_class
        self.detail = detail
        super().__init__(
            f"Failed to create instance of {target_class}: {detail}. "
            "Ensure that it is a concrete class callable with no arguments."
        )


# --- Mapping ---


class MappingError(RowSetterError):
    """Base for mapping errors."""


class RowMappingError(MappingError):
    """Raised when a single column of a row cannot be applied to the target."""

    def __init__(self, column: str, target_class: str, detail: str) -> None:
        self.column = column
        self.target_class = target_class
        self.detail = detail
        super().__init__(f"Cannot map column '{column}' onto {target_class}: {detail}")


class TemporalConversionError(MappingError):
    """Raised when a column value cannot be converted to a date or datetime."""

    def __init__(self, value: Any, target: str) -> None:
        self.value = value
        self.target = target
        super().__init__(f"Cannot convert {type(value).__name__} value {value!r} to {target}")
