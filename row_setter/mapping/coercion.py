"""Value coercion for setter parameters.

Temporal columns are converted to the setter's date or datetime type.
Everything else goes through a Pydantic TypeAdapter for the declared type,
which applies lax widening (``"42"`` -> ``42``) and rejects incompatible
values with a ValidationError.
"""

from __future__ import annotations

import dataclasses
import logging
import types
from datetime import date, datetime, time
from typing import Any, Union, get_args, get_origin, is_typeddict

from pydantic import BaseModel, ConfigDict, PydanticSchemaGenerationError, TypeAdapter
from pydantic_core import SchemaError

from row_setter.core.enums import ParameterKind
from row_setter.core.exceptions import TemporalConversionError

logger = logging.getLogger(__name__)

_PRIMITIVE_TYPES: tuple[type, ...] = (int, float, bool)


def unwrap_optional(tp: Any) -> tuple[Any, bool]:
    """Split ``X | None`` into ``(X, True)``; other types give ``(tp, False)``."""
    if get_origin(tp) in (Union, types.UnionType):
        args = get_args(tp)
        non_none = tuple(arg for arg in args if arg is not type(None))
        if len(non_none) < len(args):
            if len(non_none) == 1:
                return non_none[0], True
            return Union[non_none], True  # noqa: UP007
    return tp, tp is None or tp is type(None)


def parameter_kind(tp: Any, nullable: bool) -> ParameterKind:
    """Classify an unwrapped setter parameter type."""
    if not isinstance(tp, type):
        return ParameterKind.OBJECT
    if issubclass(tp, datetime):
        return ParameterKind.DATETIME
    if issubclass(tp, date):
        return ParameterKind.DATE
    if not nullable and tp in _PRIMITIVE_TYPES:
        return ParameterKind.PRIMITIVE
    return ParameterKind.OBJECT


def _has_own_config(tp: Any) -> bool:
    if not isinstance(tp, type):
        return False
    return issubclass(tp, BaseModel) or dataclasses.is_dataclass(tp) or is_typeddict(tp)


def build_adapter(tp: Any) -> TypeAdapter[Any]:
    """TypeAdapter for a setter value type. Plain classes are checked with isinstance.

    Types Pydantic cannot build a validator for (e.g. non-runtime Protocols)
    get an Any adapter, so their values reach the setter unchecked.
    """
    try:
        if _has_own_config(tp):
            return TypeAdapter(tp)
        return TypeAdapter(tp, config=ConfigDict(arbitrary_types_allowed=True))
    except (PydanticSchemaGenerationError, SchemaError) as e:
        logger.debug("No validator for %r, values pass through unchecked: %s", tp, e)
        return TypeAdapter(Any)


def to_datetime(value: Any, target: type[datetime] = datetime) -> datetime | None:
    """Convert a timestamp-like column value to ``target`` (a datetime type)."""
    if value is None:
        return None
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        result = datetime.combine(value, time.min)
    elif isinstance(value, str):
        try:
            result = datetime.fromisoformat(value)
        except ValueError as e:
            raise TemporalConversionError(value, target.__name__) from e
    else:
        raise TemporalConversionError(value, target.__name__)
    if not isinstance(result, target):
        result = target.combine(result.date(), result.timetz())
    return result


def to_date(value: Any, target: type[date] = date) -> date | None:
    """Convert a date-like column value to ``target`` (a date type). Times are dropped."""
    if value is None:
        return None
    if isinstance(value, datetime):
        result = value.date()
    elif isinstance(value, date):
        result = value
    elif isinstance(value, str):
        try:
            result = datetime.fromisoformat(value).date()
        except ValueError as e:
            raise TemporalConversionError(value, target.__name__) from e
    else:
        raise TemporalConversionError(value, target.__name__)
    if not isinstance(result, target):
        result = target(result.year, result.month, result.day)
    return result


def convert_temporal(kind: ParameterKind, value: Any, target: type | None = None) -> Any:
    """Apply the conversion matching a DATE or DATETIME parameter of type ``target``."""
    if kind is ParameterKind.DATETIME:
        return to_datetime(value, target or datetime)
    if kind is ParameterKind.DATE:
        return to_date(value, target or date)
    return value
