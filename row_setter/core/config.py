"""Mapper configuration.

MapperConfig is a Pydantic model so options are validated once, when the
mapper is created.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class MapperConfig(BaseModel):
    """Options for NameConventionMapper."""

    setter_prefix: str = "set"
    strict_types: bool = False
    convert_temporal: bool = True

    @field_validator("setter_prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if not (value.isascii() and value.isalpha() and value.islower()):
            raise ValueError(f"setter_prefix must be lower-case ASCII letters, got {value!r}")
        return value
