"""Unit tests for SetterIndex discovery."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Protocol

import pytest

from row_setter.core.enums import ParameterKind
from row_setter.mapping.setters import SetterIndex


class Base:
    def setId(self, value: int) -> None:
        self.id = value

    def setName(self, value: str) -> None:
        self.name = "base:" + value


class Middle(Base):
    def setCreatedAt(self, value: datetime) -> None:
        self.created_at = value


class Leaf(Middle):
    def setName(self, value: str) -> None:
        self.name = "leaf:" + value

    def set_birth_date(self, value: Optional[date]) -> None:
        self.birth_date = value


class NotSetters:
    def _setHidden(self, value: int) -> None:
        pass

    def setReturning(self, value: int) -> int:
        return value

    def setTwo(self, a: int, b: int) -> None:
        pass

    def setNone(self) -> None:
        pass

    def setKeywordOnly(self, *, value: int) -> None:
        pass

    def setVarargs(self, *values: int) -> None:
        pass

    def settle(self, value: int) -> None:
        pass

    @staticmethod
    def setStatic(value: int) -> None:
        pass

    @classmethod
    def setClass(cls, value: int) -> None:
        pass

    @property
    def setProperty(self) -> int:
        return 1

    setAttribute = 5


class Untyped:
    def setAnything(self, value):
        self.anything = value

    def setLater(self, value: "Unresolvable") -> None:  # noqa: F821
        self.later = value


class Named(Protocol):
    name: str


class UsesProtocol:
    def setOwner(self, value: Named) -> None:
        self.owner = value


class Shadowed(Leaf):
    setName = None  # type: ignore[assignment]
    set_birth_date = property(lambda self: None)  # type: ignore[assignment]


class TestDiscovery:
    def test_inherited_setters_at_any_depth(self) -> None:
        index = SetterIndex.from_class(Leaf)
        assert set(index) == {"SETID", "SETNAME", "SETCREATEDAT", "SETBIRTHDATE"}
        assert index["SETID"].defining_class is Base
        assert index["SETCREATEDAT"].defining_class is Middle

    def test_override_takes_precedence(self) -> None:
        index = SetterIndex.from_class(Leaf)
        assert index["SETNAME"].defining_class is Leaf

    def test_snake_case_setter(self) -> None:
        index = SetterIndex.from_class(Leaf)
        assert index["SETBIRTHDATE"].name == "set_birth_date"

    def test_non_setters_ignored(self) -> None:
        assert len(SetterIndex.from_class(NotSetters)) == 0

    def test_unannotated_parameter_is_any(self) -> None:
        index = SetterIndex.from_class(Untyped)
        assert index["SETANYTHING"].parameter_type is Any
        assert index["SETANYTHING"].kind is ParameterKind.OBJECT

    def test_unresolvable_annotation_is_any(self) -> None:
        index = SetterIndex.from_class(Untyped)
        assert index["SETLATER"].parameter_type is Any

    def test_custom_prefix(self) -> None:
        class Builder:
            def withName(self, value: str) -> None:
                self.name = value

            def setName(self, value: str) -> None:
                self.name = value

        index = SetterIndex.from_class(Builder, prefix="with")
        assert list(index) == ["WITHNAME"]


class TestParameterKinds:
    def test_kinds(self) -> None:
        index = SetterIndex.from_class(Leaf)
        assert index["SETID"].kind is ParameterKind.PRIMITIVE
        assert index["SETNAME"].kind is ParameterKind.OBJECT
        assert index["SETCREATEDAT"].kind is ParameterKind.DATETIME
        assert index["SETBIRTHDATE"].kind is ParameterKind.DATE

    def test_optional_unwrapped(self) -> None:
        spec = SetterIndex.from_class(Leaf)["SETBIRTHDATE"]
        assert spec.parameter_type == Optional[date]
        assert spec.value_type is date
        assert spec.nullable


class TestImmutability:
    def test_item_assignment_rejected(self) -> None:
        index = SetterIndex.from_class(Base)
        with pytest.raises(TypeError):
            index["SETID"] = index["SETNAME"]  # type: ignore[index]

    def test_rebuilt_index_is_equal(self) -> None:
        index = SetterIndex.from_class(Base)
        other = SetterIndex.from_class(Base)
        assert dict(index) == dict(other)
        assert index["SETID"] is not other["SETID"]


class TestUnvalidatableTypes:
    def test_non_runtime_protocol_parameter(self) -> None:
        spec = SetterIndex.from_class(UsesProtocol)["SETOWNER"]
        assert spec.parameter_type is Named
        value = object()
        assert spec.adapter.validate_python(value) is value


class TestShadowing:
    def test_non_setter_attribute_hides_inherited_setter(self) -> None:
        index = SetterIndex.from_class(Shadowed)
        assert "SETNAME" not in index
        assert "SETBIRTHDATE" not in index
        assert set(index) == {"SETID", "SETCREATEDAT"}
