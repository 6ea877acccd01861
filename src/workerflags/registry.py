from enum import Enum
from typing import Any, Optional

from .parsers import Parser, default_type_parsers

NAME_SOURCE = "name"
TYPE_SOURCE = "type"
ENUM_SOURCE = "enum"


class ParserRegistry:
    """Parsers keyed by flag name and by value type.

    Parsers installed for a flag name shadow type resolution for bindings of
    that name. Parsers installed for a type apply only to registrations made
    afterwards; already resolved bindings keep their parser.
    """

    def __init__(self) -> None:
        self._by_value_type: dict[Any, Parser] = default_type_parsers()
        self._by_flag_name: dict[str, Parser] = {}

    def set_for_name(self, name: str, parser: Parser) -> None:
        self._by_flag_name[name] = parser

    def set_for_type(self, value_type: Any, parser: Parser) -> None:
        self._by_value_type[value_type] = parser

    def for_name(self, name: str) -> Optional[Parser]:
        return self._by_flag_name.get(name)

    def for_type(self, value_type: Any) -> Optional[Parser]:
        return self._by_value_type.get(value_type)

    def resolve(self, name: str, value_type: Any) -> Optional[tuple[Parser, str]]:
        """Resolve the parser for a binding and where it came from.

        Order: flag name, exact value type, then the generic enumeration
        parser for ``Enum`` subclasses. Returns ``None`` when nothing matches.
        """
        parser = self._by_flag_name.get(name)
        if parser is not None:
            return parser, NAME_SOURCE

        # bool subclasses int but must not pick up the int parser
        parser = self._by_value_type.get(value_type)
        if parser is not None:
            return parser, TYPE_SOURCE

        if (
            isinstance(value_type, type)
            and issubclass(value_type, Enum)
            and Enum in self._by_value_type
        ):
            return self._by_value_type[Enum], ENUM_SOURCE

        return None
