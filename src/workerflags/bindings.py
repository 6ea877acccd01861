from dataclasses import dataclass
from typing import Iterator, Optional

from .accessors import PropertyAccessor
from .metadata import FlagMetadata
from .parsers import Parser


@dataclass(frozen=True)
class Binding:
    """A flag name bound to one property of one container."""

    metadata: FlagMetadata
    accessor: PropertyAccessor
    parser: Parser
    parser_source: str

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def property_name(self) -> str:
        return self.accessor.name


class BindingTable:
    """Flag name to :class:`Binding`.

    A later binding for a name replaces the earlier one.
    """

    def __init__(self) -> None:
        self._bindings: dict[str, Binding] = {}

    def put(self, binding: Binding) -> Optional[Binding]:
        """Store *binding* and return the binding it replaced, if any."""
        previous = self._bindings.get(binding.name)
        self._bindings[binding.name] = binding
        return previous

    def get(self, name: str) -> Optional[Binding]:
        return self._bindings.get(name)

    def remove(self, name: str) -> None:
        self._bindings.pop(name, None)

    def snapshot(self) -> dict[str, Binding]:
        return dict(self._bindings)

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._bindings)
