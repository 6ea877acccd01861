"""Keep container properties in sync with worker flag updates.

Example usage::

    from typing import Annotated

    from workerflags import WorkerFlag, WorkerFlagsUpdater, parse_csv

    class SpawnConfiguration:
        spawn_vertical_offset: Annotated[int, WorkerFlag("spawn_z_offset", 0)] = 0

    spawn_config = SpawnConfiguration()

    flags = (
        WorkerFlagsUpdater()
        # list has no type parser, so its name parser must exist before register
        .set_parser_for_name("hidden_quests_csv", parse_csv)
        .register(spawn_config)
    )

    # hand the dispatch entry point to whatever delivers flag updates
    transport.on_flag_update(flags.apply_update)
"""

import logging
import threading
from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional

from .accessors import ContainerGoneError, discover_declarations
from .bindings import Binding, BindingTable
from .config import UnboundFlagPolicy, UpdaterConfig
from .errors import FlagValueError, ParserNotFoundError, UnboundFlagError
from .metadata import FlagDeclaration
from .parsers import Parser
from .registry import NAME_SOURCE, ParserRegistry

logger = logging.getLogger(__name__)


class WorkerFlagsUpdater:
    """Registers flag bindings and applies flag updates to them.

    Registration, parser installation and dispatch share one re-entrant
    lock, so an updater can be driven from several threads.
    """

    def __init__(self, config: Optional[UpdaterConfig] = None) -> None:
        self._config = config or UpdaterConfig.from_env()
        self._parsers = ParserRegistry()
        self._bindings = BindingTable()
        self._lock = threading.RLock()

    @property
    def config(self) -> UpdaterConfig:
        return self._config

    @property
    def bindings(self) -> dict[str, Binding]:
        """Snapshot of the current bindings keyed by flag name."""
        with self._lock:
            return self._bindings.snapshot()

    def register(
        self,
        container: Any,
        declarations: Optional[Iterable[FlagDeclaration]] = None,
    ) -> "WorkerFlagsUpdater":
        """Bind every declared flag of *container* to its property.

        Declarations come from *declarations* when given, else from a
        ``__worker_flags__()`` method on the container, else from
        ``Annotated[..., WorkerFlag(...)]`` class attributes. A flag name
        registered again is rebound to the newest property.

        Args:
            container: Object owning the bound properties. Only a weak
                reference to it is kept.
            declarations: Optional explicit declaration table.

        Returns:
            The updater, for chaining.

        Raises:
            ParserNotFoundError: If a declared property has no parser for its
                flag name or value type. Bindings registered earlier in the
                same call are kept.
            FlagRegistrationError: If the container cannot be weakly referenced,
                or a declaration names an empty or missing attribute.
        """
        pairs = discover_declarations(container, declarations)
        with self._lock:
            for accessor, metadata in pairs:
                resolved = self._parsers.resolve(metadata.name, accessor.value_type)
                if resolved is None:
                    raise ParserNotFoundError(
                        metadata.name, accessor.name, accessor.value_type
                    )
                parser, source = resolved
                binding = Binding(
                    metadata=metadata,
                    accessor=accessor,
                    parser=parser,
                    parser_source=source,
                )
                previous = self._bindings.put(binding)
                if previous is not None:
                    logger.warning(
                        "Worker flag %s rebound from %s to %s",
                        metadata.name,
                        previous.property_name,
                        accessor.name,
                    )
                logger.debug(
                    "Bound worker flag %s to %s (%s parser)",
                    metadata.name,
                    accessor.name,
                    source,
                )
        return self

    register_all = register

    def set_parser_for_name(self, name: str, parser: Parser) -> "WorkerFlagsUpdater":
        """Use *parser* for flag *name*, whether bound already or later.

        A binding already registered under *name* switches to *parser*
        immediately.

        Returns:
            The updater, for chaining.
        """
        with self._lock:
            self._parsers.set_for_name(name, parser)
            binding = self._bindings.get(name)
            if binding is not None:
                self._bindings.put(
                    replace(binding, parser=parser, parser_source=NAME_SOURCE)
                )
                logger.debug("Worker flag %s now uses a name parser", name)
        return self

    def set_parser_for_type(
        self, value_type: Any, parser: Parser
    ) -> "WorkerFlagsUpdater":
        """Use *parser* for properties of *value_type* registered from now on.

        Properties of the same type which have already been registered keep
        their parser. Pass ``enum.Enum`` to replace the generic enumeration
        parser.

        Returns:
            The updater, for chaining.
        """
        with self._lock:
            self._parsers.set_for_type(value_type, parser)
        return self

    def apply_update(self, name: str, value: Optional[str] = None) -> None:
        """Parse *value* and write it into the property bound to *name*.

        ``value=None`` means the flag was cleared and restores the declared
        default. Suitable for use directly as a transport callback.

        Raises:
            FlagValueError: If *value* cannot be parsed. The property keeps
                its previous value.
            UnboundFlagError: If *name* has no binding and the unbound flag
                policy is ``raise``.
        """
        with self._lock:
            binding = self._bindings.get(name)
            if binding is not None and not binding.accessor.alive:
                self._bindings.remove(name)
                logger.debug("Dropped worker flag %s: container was collected", name)
                binding = None

            if binding is None:
                self._unbound(name)
                return

            parsed = self._parse(binding, value)
            try:
                binding.accessor.set(parsed)
            except ContainerGoneError:
                self._bindings.remove(name)
                self._unbound(name)
                return
            logger.debug("Applied worker flag %s=%r", name, parsed)

    on_flag_update = apply_update

    def apply_updates(self, updates: Mapping[str, Optional[str]]) -> None:
        """Apply several updates in iteration order, stopping at the first failure."""
        for name, value in updates.items():
            self.apply_update(name, value)

    def _parse(self, binding: Binding, value: Optional[str]) -> Any:
        try:
            return binding.parser(value, binding.metadata)
        except FlagValueError:
            raise
        except Exception as e:
            raise FlagValueError(binding.name, value) from e

    def _unbound(self, name: str) -> None:
        policy = self._config.unbound_flag_policy
        if policy == UnboundFlagPolicy.RAISE:
            raise UnboundFlagError(name)
        if policy == UnboundFlagPolicy.WARN:
            logger.warning("Ignoring update for unbound worker flag %s", name)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._bindings

    def __len__(self) -> int:
        with self._lock:
            return len(self._bindings)
