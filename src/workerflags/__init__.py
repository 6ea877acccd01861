"""Worker flags.

Bind typed container properties to externally supplied, string valued
worker flags and keep them updated as new values arrive.
"""

from .accessors import AttributeAccessor, PropertyAccessor, discover_declarations
from .bindings import Binding, BindingTable
from .config import UnboundFlagPolicy, UpdaterConfig
from .errors import (
    FlagRegistrationError,
    FlagValueError,
    ParserNotFoundError,
    UnboundFlagError,
    WorkerFlagError,
)
from .metadata import FlagDeclaration, FlagMetadata, WorkerFlag
from .parsers import (
    Parser,
    parse_bool,
    parse_csv,
    parse_enum,
    parse_float,
    parse_int,
    parse_str,
)
from .registry import ParserRegistry
from .updater import WorkerFlagsUpdater

__all__ = [
    "AttributeAccessor",
    "Binding",
    "BindingTable",
    "FlagDeclaration",
    "FlagMetadata",
    "FlagRegistrationError",
    "FlagValueError",
    "Parser",
    "ParserNotFoundError",
    "ParserRegistry",
    "PropertyAccessor",
    "UnboundFlagError",
    "UnboundFlagPolicy",
    "UpdaterConfig",
    "WorkerFlag",
    "WorkerFlagError",
    "WorkerFlagsUpdater",
    "discover_declarations",
    "parse_bool",
    "parse_csv",
    "parse_enum",
    "parse_float",
    "parse_int",
    "parse_str",
]
