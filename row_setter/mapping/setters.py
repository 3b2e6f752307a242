"""Setter discovery.

SetterIndex is built once per mapper from the target class and is read-only
afterwards. Keys are upper-cased setter names without underscores, so
``setUserId`` and ``set_user_id`` are both indexed as ``SETUSERID``.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, get_type_hints

from pydantic import TypeAdapter

from row_setter.core.enums import ParameterKind
from row_setter.mapping.coercion import build_adapter, parameter_kind, unwrap_optional
from row_setter.mapping.naming import is_setter_name, setter_key

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


@dataclass(frozen=True)
class SetterSpec:
    """A discovered setter and its single parameter."""

    name: str
    key: str
    parameter_type: Any
    value_type: Any
    nullable: bool
    kind: ParameterKind
    defining_class: type
    adapter: TypeAdapter[Any] = field(compare=False, repr=False)


def _type_hints(func: Any) -> dict[str, Any]:
    """Resolved annotations. Unresolvable string annotations degrade to Any."""
    try:
        return get_type_hints(func)
    except (NameError, TypeError):
        return {
            name: _fallback_hint(hint)
            for name, hint in getattr(func, "__annotations__", {}).items()
        }


def _fallback_hint(hint: Any) -> Any:
    if hint == "None":
        return None
    if isinstance(hint, str):
        return Any
    return hint


def _setter_parameter(func: Any) -> inspect.Parameter | None:
    """The single value parameter of a setter-shaped function, else None."""
    try:
        params = list(inspect.signature(func).parameters.values())
    except (ValueError, TypeError):
        return None
    # First parameter is self.
    if len(params) != 2 or any(p.kind not in _POSITIONAL for p in params):
        return None
    return params[1]


def _returns_none(hints: dict[str, Any]) -> bool:
    if "return" not in hints:
        return True
    return hints["return"] is None or hints["return"] is type(None)


def inspect_setter(owner: type, name: str, func: Any, prefix: str = "set") -> SetterSpec | None:
    """Build a SetterSpec if ``func`` follows the setter convention."""
    if not inspect.isfunction(func) or not is_setter_name(name, prefix):
        return None
    param = _setter_parameter(func)
    if param is None:
        return None
    hints = _type_hints(func)
    if not _returns_none(hints):
        return None

    declared = hints.get(param.name, Any)
    value_type, nullable = unwrap_optional(declared)
    return SetterSpec(
        name=name,
        key=setter_key(name),
        parameter_type=declared,
        value_type=value_type,
        nullable=nullable,
        kind=parameter_kind(value_type, nullable),
        defining_class=owner,
        adapter=build_adapter(value_type),
    )


def _drop_shadowed(setters: dict[str, SetterSpec], name: str) -> None:
    """Forget an inherited setter hidden by a non-setter attribute of the same name."""
    inherited = setters.get(setter_key(name))
    if inherited is not None and inherited.name == name:
        del setters[inherited.key]


class SetterIndex(Mapping[str, SetterSpec]):
    """Immutable key -> SetterSpec table for one target class."""

    def __init__(self, target_class: type, setters: dict[str, SetterSpec]) -> None:
        self.target_class = target_class
        self._setters = MappingProxyType(dict(setters))

    @classmethod
    def from_class(cls, target_class: type, prefix: str = "set") -> SetterIndex:
        """Index the setters of ``target_class`` and all of its ancestors.

        Classes are visited from the most distant ancestor down to
        ``target_class`` so an override replaces the inherited entry.
        """
        setters: dict[str, SetterSpec] = {}
        for owner in reversed(target_class.__mro__):
            if owner is object:
                continue
            for name, func in vars(owner).items():
                spec = inspect_setter(owner, name, func, prefix)
                if spec is not None:
                    setters[spec.key] = spec
                elif is_setter_name(name, prefix):
                    _drop_shadowed(setters, name)

        logger.debug("Indexed %d setters on %s", len(setters), target_class.__name__)
        return cls(target_class, setters)

    def __getitem__(self, key: str) -> SetterSpec:
        return self._setters[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._setters)

    def __len__(self) -> int:
        return len(self._setters)

    def __repr__(self) -> str:
        return f"SetterIndex({self.target_class.__name__}, {sorted(self._setters)!r})"
