import click

from ..errors import WorkerFlagError
from ..updater import WorkerFlagsUpdater
from ._utils._common import echo_bindings, load_container


@click.command(name="inspect")
@click.argument("target", required=True)
def inspect_(target: str) -> None:
    """Show the worker flags declared by a container.

    TARGET is MODULE:ATTRIBUTE naming a container object, or a class or
    function returning one.

    Examples:

        workerflags inspect game.config:SpawnConfiguration
    """
    container = load_container(target)
    try:
        updater = WorkerFlagsUpdater().register(container)
    except WorkerFlagError as e:
        click.echo(f"❌ {e}")
        click.get_current_context().exit(1)

    bindings = updater.bindings
    if not bindings:
        click.echo(f"No worker flags declared by '{target}'.")
        return
    echo_bindings(bindings, show_parser=True)
