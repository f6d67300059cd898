"""blot algorithms -- list the registered digest algorithms."""

from __future__ import annotations

import click

from blot.cli.formatting import format_algorithms, get_console
from blot.engine.digest import DEFAULT_ALGORITHM, available_algorithms, get_algorithm


@click.command()
def algorithms() -> None:
    """List digest algorithms with their multihash code and length."""
    registered = [get_algorithm(name) for name in available_algorithms()]
    format_algorithms(registered, DEFAULT_ALGORITHM, get_console())
