"""Setter parameter classification."""

from __future__ import annotations

from enum import Enum


class ParameterKind(Enum):
    """How a setter parameter treats incoming column values."""

    PRIMITIVE = "primitive"
    DATE = "date"
    DATETIME = "datetime"
    OBJECT = "object"
