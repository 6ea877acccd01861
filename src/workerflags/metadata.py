"""Flag declarations attached to container attributes.

A flag is declared by placing a :class:`WorkerFlag` marker in the
``Annotated`` metadata of a class attribute::

    class SpawnConfiguration:
        spawn_vertical_offset: Annotated[int, WorkerFlag("spawn_z_offset", 0)] = 0

The annotated base type (``int`` above) is the value type used to resolve a
parser for the binding.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class FlagMetadata(BaseModel):
    """Immutable descriptor of one declared flag binding."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(min_length=1)
    default_value: Any = None


def WorkerFlag(name: str, default_value: Any = None) -> FlagMetadata:
    """Declare a worker flag for use inside ``typing.Annotated``.

    Args:
        name: Name of the worker flag delivered by the transport.
        default_value: Value applied when the flag is cleared. Its type also
            drives enumeration parsing.
    """
    return FlagMetadata(name=name, default_value=default_value)


class FlagDeclaration(BaseModel):
    """One entry of an explicit declaration table passed to ``register``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    attribute: str
    metadata: FlagMetadata
    value_type: Optional[Any] = None

    def resolved_value_type(self) -> Any:
        if self.value_type is not None:
            return self.value_type
        return type(self.metadata.default_value)
