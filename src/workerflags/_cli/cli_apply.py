from typing import Optional

import click

from ..config import UnboundFlagPolicy, UpdaterConfig
from ..errors import WorkerFlagError
from ..updater import WorkerFlagsUpdater
from ._utils._common import (
    echo_bindings,
    load_container,
    parse_assignments,
    read_env_file,
)


@click.command(name="apply")
@click.argument("target", required=True)
@click.argument("updates", nargs=-1)
@click.option(
    "--env-file",
    "-e",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Dotenv file with flag values, applied before UPDATES",
)
@click.option(
    "--unset",
    "-u",
    "unset",
    multiple=True,
    help="Clear a flag, restoring its declared default",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail on updates for flags the container does not declare",
)
def apply(
    target: str,
    updates: tuple[str, ...],
    env_file: Optional[str],
    unset: tuple[str, ...],
    strict: bool,
) -> None:
    """Apply flag updates to a container and print the resulting values.

    TARGET is MODULE:ATTRIBUTE naming a container object, or a class or
    function returning one. UPDATES are NAME=VALUE pairs.

    Examples:

        workerflags apply game.config:SpawnConfiguration spawn_z_offset=150

        workerflags apply game.config:SpawnConfiguration -e flags.env -u spawn_z_offset
    """
    pending: dict[str, Optional[str]] = {}
    if env_file:
        pending.update(read_env_file(env_file))
    pending.update(parse_assignments(updates))
    for name in unset:
        pending[name] = None

    if strict:
        config = UpdaterConfig(unbound_flag_policy=UnboundFlagPolicy.RAISE)
    else:
        config = UpdaterConfig.from_env()
    container = load_container(target)
    try:
        updater = WorkerFlagsUpdater(config=config).register(container)
        updater.apply_updates(pending)
    except WorkerFlagError as e:
        click.echo(f"❌ {e}")
        click.get_current_context().exit(1)

    echo_bindings(updater.bindings)
