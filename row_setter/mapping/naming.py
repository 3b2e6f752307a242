"""Column-name to setter-name conventions.

Columns are upper-snake-case (``SOME_VARIABLE``); setters are
``setSomeVariable`` or ``set_some_variable``. Both sides are reduced to the
same upper-cased key (``SETSOMEVARIABLE``) and matched on that.
"""

from __future__ import annotations

import re
import string

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_upper(text: str) -> str:
    """Upper-case ASCII letters only; other characters are left alone."""
    return text.translate(_UPPER)


def ascii_lower(text: str) -> str:
    """Lower-case ASCII letters only; other characters are left alone."""
    return text.translate(_LOWER)


def to_upper_camel(column: str) -> str:
    """UPPER_SNAKE -> UpperCamel. ``SOME_VARIABLE`` becomes ``SomeVariable``."""
    return "".join(
        ascii_upper(segment[:1]) + ascii_lower(segment[1:])
        for segment in column.split("_")
        if segment
    )


def column_to_setter_key(column: str, prefix: str = "set") -> str:
    """Index key a column is looked up under. ``USER_ID`` becomes ``SETUSERID``."""
    return ascii_upper(prefix + to_upper_camel(column))


def setter_name_for(column: str, prefix: str = "set") -> str:
    """Conventional camel-case setter name for a column."""
    return prefix + to_upper_camel(column)


def setter_key(method_name: str) -> str:
    """Index key for a setter method name."""
    return ascii_upper(method_name.replace("_", ""))


def _setter_pattern(prefix: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(prefix)}(?:[A-Z]|_[a-z])")


_DEFAULT_PATTERN = _setter_pattern("set")


def is_setter_name(name: str, prefix: str = "set") -> bool:
    """True for ``setX...`` and ``set_x...`` style names."""
    pattern = _DEFAULT_PATTERN if prefix == "set" else _setter_pattern(prefix)
    return pattern.match(name) is not None
