import logging

import click

from .cli_apply import apply
from .cli_inspect import inspect_


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Inspect and exercise worker flag bindings."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


cli.add_command(inspect_)
cli.add_command(apply)
