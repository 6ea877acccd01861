"""Parsers turning raw worker flag values into typed values.

Every parser has the signature ``(value, metadata) -> typed value`` where
``value`` is the raw string delivered by the transport, or ``None`` when the
flag was cleared. A cleared flag yields ``metadata.default_value`` itself,
so a mutable default is shared with the metadata unless the parser copies it
(:func:`parse_csv` does).

Only :func:`parse_int` and :func:`parse_enum` are installed by default. The
remaining parsers are ready-made building blocks for
``set_parser_for_type`` and ``set_parser_for_name``.
"""

import re
from enum import Enum
from typing import Any, Callable, Optional

from .errors import FlagValueError
from .metadata import FlagMetadata

Parser = Callable[[Optional[str], FlagMetadata], Any]

_INT_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")
_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


def parse_int(value: Optional[str], metadata: FlagMetadata) -> Any:
    """Parse a base-10 integer."""
    if value is None:
        return metadata.default_value
    if not _INT_PATTERN.match(value):
        raise FlagValueError(metadata.name, value, "an int")
    return int(value, 10)


def parse_enum(value: Optional[str], metadata: FlagMetadata) -> Any:
    """Parse a member name of the enumeration carried by the default value."""
    if value is None:
        return metadata.default_value
    enum_type = type(metadata.default_value)
    if not issubclass(enum_type, Enum):
        raise FlagValueError(metadata.name, value, "an enum member")
    try:
        return enum_type[value.strip()]
    except KeyError as e:
        raise FlagValueError(metadata.name, value, enum_type.__name__) from e


def parse_float(value: Optional[str], metadata: FlagMetadata) -> Any:
    if value is None:
        return metadata.default_value
    try:
        return float(value)
    except ValueError as e:
        raise FlagValueError(metadata.name, value, "a float") from e


def parse_bool(value: Optional[str], metadata: FlagMetadata) -> Any:
    """Parse common boolean spellings (true/false, 1/0, yes/no, on/off)."""
    if value is None:
        return metadata.default_value
    lower = value.strip().lower()
    if lower in _TRUE:
        return True
    if lower in _FALSE:
        return False
    raise FlagValueError(metadata.name, value, "a bool")


def parse_str(value: Optional[str], metadata: FlagMetadata) -> Any:
    if value is None:
        return metadata.default_value
    return value


def parse_csv(value: Optional[str], metadata: FlagMetadata) -> Any:
    """Split a comma separated value into a list of strings."""
    if value is None:
        default = metadata.default_value
        return list(default) if isinstance(default, list) else default
    return value.split(",")


def default_type_parsers() -> dict[Any, Parser]:
    """Return a fresh copy of the built-in per-type parsers."""
    return {
        int: parse_int,
        Enum: parse_enum,
    }
