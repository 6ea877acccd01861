"""Property accessors and declaration discovery."""

import weakref
from typing import (
    Annotated,
    Any,
    Iterable,
    Optional,
    Protocol,
    get_args,
    get_origin,
    get_type_hints,
    runtime_checkable,
)

from .errors import FlagRegistrationError
from .metadata import FlagDeclaration, FlagMetadata

DECLARATIONS_HOOK = "__worker_flags__"


class ContainerGoneError(Exception):
    """The container behind an accessor has been garbage collected."""


@runtime_checkable
class PropertyAccessor(Protocol):
    """Get/set access to one typed property of a registered container."""

    @property
    def name(self) -> str: ...

    @property
    def value_type(self) -> Any: ...

    @property
    def alive(self) -> bool: ...

    def get(self) -> Any: ...

    def set(self, value: Any) -> None: ...


class AttributeAccessor:
    """Accessor for a plain attribute, holding the container weakly.

    The updater never owns the lifetime of registered containers, so only a
    weak reference is kept.
    """

    def __init__(self, container: Any, attribute: str, value_type: Any):
        try:
            self._ref = weakref.ref(container)
        except TypeError as e:
            raise FlagRegistrationError(
                f"Container of type {type(container).__name__} cannot be weakly "
                "referenced and cannot be registered for worker flag updates."
            ) from e
        self._attribute = attribute
        self._value_type = value_type

    @property
    def name(self) -> str:
        return self._attribute

    @property
    def value_type(self) -> Any:
        return self._value_type

    @property
    def alive(self) -> bool:
        return self._ref() is not None

    def _container(self) -> Any:
        container = self._ref()
        if container is None:
            raise ContainerGoneError(self._attribute)
        return container

    def get(self) -> Any:
        return getattr(self._container(), self._attribute)

    def set(self, value: Any) -> None:
        setattr(self._container(), self._attribute, value)

    def __repr__(self) -> str:
        return f"AttributeAccessor({self._attribute!r}, {self._value_type!r})"


def _flag_metadata(hint: Any) -> tuple[Any, Optional[FlagMetadata]]:
    if get_origin(hint) is not Annotated:
        return hint, None
    base_type, *extras = get_args(hint)
    found = None
    for extra in extras:
        if isinstance(extra, FlagMetadata):
            found = extra
    return base_type, found


def declarations_from_annotations(container_type: type) -> list[FlagDeclaration]:
    """Collect ``Annotated[..., WorkerFlag(...)]`` declarations of a class.

    Inherited annotations are included; a subclass redeclaring an attribute
    replaces the base class declaration.
    """
    hints = get_type_hints(container_type, include_extras=True)
    declarations = []
    for attribute, hint in hints.items():
        value_type, metadata = _flag_metadata(hint)
        if metadata is None:
            continue
        declarations.append(
            FlagDeclaration(
                attribute=attribute, metadata=metadata, value_type=value_type
            )
        )
    return declarations


def discover_declarations(
    container: Any, declarations: Optional[Iterable[FlagDeclaration]] = None
) -> list[tuple[PropertyAccessor, FlagMetadata]]:
    """Enumerate ``(accessor, metadata)`` pairs for a container.

    Resolution order:

    1. *declarations* passed explicitly by the caller
    2. ``__worker_flags__()`` defined on the container
    3. ``Annotated`` class attribute declarations

    Raises:
        FlagRegistrationError: If the container cannot be weakly referenced,
            or a declaration names an empty or missing attribute.
    """
    if declarations is None:
        hook = getattr(container, DECLARATIONS_HOOK, None)
        if callable(hook):
            declarations = hook()
        else:
            declarations = declarations_from_annotations(type(container))

    pairs: list[tuple[PropertyAccessor, FlagMetadata]] = []
    for declaration in declarations:
        if not declaration.attribute:
            raise FlagRegistrationError(
                f"Worker flag {declaration.metadata.name} is declared on an "
                "empty attribute name."
            )
        if not hasattr(container, declaration.attribute):
            raise FlagRegistrationError(
                f"Worker flag {declaration.metadata.name} is declared on "
                f"{declaration.attribute}, which {type(container).__name__} "
                "does not have."
            )
        accessor = AttributeAccessor(
            container, declaration.attribute, declaration.resolved_value_type()
        )
        pairs.append((accessor, declaration.metadata))
    return pairs
