import importlib
import inspect
import os
import sys
from typing import Any, Optional

import click
from dotenv import dotenv_values

from ...accessors import ContainerGoneError


def add_cwd_to_path():
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)


def load_container(target: str) -> Any:
    """Import ``module:attribute`` and return the container it names.

    Classes and functions are called without arguments to produce the
    container instance.
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise click.BadParameter(
            f"'{target}' is not of the form MODULE:ATTRIBUTE", param_hint="TARGET"
        )

    add_cwd_to_path()
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(
            f"Could not import module '{module_name}': {e}", param_hint="TARGET"
        ) from e

    obj: Any = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise click.BadParameter(
                f"'{module_name}' has no attribute '{attribute}'", param_hint="TARGET"
            ) from e

    if inspect.isclass(obj) or inspect.isfunction(obj):
        obj = obj()
    return obj


def parse_assignments(assignments: tuple[str, ...]) -> dict[str, Optional[str]]:
    """Turn ``NAME=VALUE`` arguments into an ordered update mapping."""
    updates: dict[str, Optional[str]] = {}
    for assignment in assignments:
        name, sep, value = assignment.partition("=")
        if not sep or not name:
            raise click.BadParameter(
                f"'{assignment}' is not of the form NAME=VALUE", param_hint="UPDATES"
            )
        updates[name] = value
    return updates


def read_env_file(path: str) -> dict[str, Optional[str]]:
    """Read flag values from a dotenv file. Keys without ``=`` clear the flag."""
    return dict(dotenv_values(path))


def describe_value(binding) -> str:
    try:
        return repr(binding.accessor.get())
    except ContainerGoneError:
        return "<collected>"


def echo_bindings(bindings: dict, show_parser: bool = False) -> None:
    for name in sorted(bindings):
        binding = bindings[name]
        line = f"{name} -> {binding.property_name} = {describe_value(binding)}"
        if show_parser:
            type_name = getattr(
                binding.accessor.value_type,
                "__name__",
                repr(binding.accessor.value_type),
            )
            line += f" [{type_name}, {binding.parser_source} parser]"
        click.echo(line)
