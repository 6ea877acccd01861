from typing import Any, Optional


class WorkerFlagError(Exception):
    """Base class for all worker flag errors."""


class FlagRegistrationError(WorkerFlagError):
    """Raised when a container or one of its declarations cannot be registered."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ParserNotFoundError(WorkerFlagError):
    """Raised when no parser can be resolved for a declared flag.

    Neither a parser registered for the flag name nor one registered for the
    property's value type exists. Fix it by installing a parser with
    ``set_parser_for_name`` or ``set_parser_for_type`` before registering.
    """

    def __init__(self, flag_name: str, property_name: str, value_type: Any):
        self.flag_name = flag_name
        self.property_name = property_name
        self.value_type = value_type
        type_name = getattr(value_type, "__name__", repr(value_type))
        self.message = (
            f"There is no default type parser for {property_name} of type "
            f"{type_name} used for flag {flag_name}. "
            "You can fix this by specifying a custom type parser."
        )
        super().__init__(self.message)


class UnboundFlagError(WorkerFlagError, KeyError):
    """Raised for an update to a flag name with no binding (``raise`` policy only)."""

    def __init__(self, flag_name: str):
        self.flag_name = flag_name
        self.message = f"Worker flag {flag_name} is not bound to any property."
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class FlagValueError(WorkerFlagError, ValueError):
    """Raised when a raw flag value cannot be converted to the bound type."""

    def __init__(
        self, flag_name: str, raw_value: Optional[str], expected: Optional[str] = None
    ):
        self.flag_name = flag_name
        self.raw_value = raw_value
        self.message = (
            f"Worker flag {flag_name} set to a value {raw_value!r} "
            "which could not be parsed"
        )
        if expected:
            self.message += f" to {expected}"
        self.message += "."
        super().__init__(self.message)
