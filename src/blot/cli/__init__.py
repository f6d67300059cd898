"""Blot CLI -- print blot checksums of JSON input.

This module is NEVER imported from blot/__init__.py.
It is only loaded via the ``blot`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING

try:
    import click
except ImportError:
    raise ImportError(
        "CLI dependencies not installed. Install with: pip install blot[cli]"
    ) from None

from blot._version import __version__
from blot.cli.formatting import format_error, get_console
from blot.engine.digest import DEFAULT_ALGORITHM, available_algorithms
from blot.exceptions import BlotError
from blot.models.config import HashConfig, SequenceMode

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from rich.console import Console


@click.group()
@click.version_option(__version__, prog_name="blot")
def cli() -> None:
    """Blot: objecthash-style checksums wrapped in a Multihash."""


def hash_options(func: Callable) -> Callable:
    """Options shared by commands that hash an input document."""
    func = click.option(
        "--max-depth",
        type=click.IntRange(min=0),
        default=None,
        help="Reject documents nested deeper than this.",
    )(func)
    func = click.option(
        "--keep-duplicates",
        is_flag=True,
        help="Do not collapse set members with equal digests.",
    )(func)
    func = click.option(
        "--common-json",
        is_flag=True,
        help="Hash every number as a float, like plain objecthash JSON.",
    )(func)
    func = click.option(
        "--sequence",
        type=click.Choice([m.value for m in SequenceMode]),
        default=SequenceMode.LIST.value,
        show_default=True,
        help="JSON only has arrays; hash them as ordered lists or as sets.",
    )(func)
    func = click.option(
        "-a",
        "--algorithm",
        type=click.Choice(available_algorithms()),
        default=DEFAULT_ALGORITHM,
        show_default=True,
        help="Hashing algorithm.",
    )(func)
    func = click.argument("input")(func)
    return func


def build_config(
    algorithm: str,
    sequence: str,
    common_json: bool,
    keep_duplicates: bool,
    max_depth: int | None = None,
) -> HashConfig:
    return HashConfig(
        algorithm=algorithm,
        sequence_mode=SequenceMode(sequence),
        common_json=common_json,
        deduplicate_sets=not keep_duplicates,
        max_depth=max_depth,
    )


def read_input(source: str) -> str:
    """Return INPUT, reading stdin when it is ``-``."""
    if source == "-":
        return sys.stdin.read()
    return source


@contextmanager
def cli_errors() -> Iterator[Console]:
    """Yield a console and turn Blot and JSON errors into exit status 1."""
    console = get_console()
    try:
        yield console
    except (BlotError, ValueError) as e:
        format_error(str(e), console)
        raise SystemExit(1) from None


# Register subcommands after cli group is defined
from blot.cli.commands.algorithms import algorithms  # noqa: E402
from blot.cli.commands.hash import hash_command  # noqa: E402
from blot.cli.commands.inspect import inspect  # noqa: E402
from blot.cli.commands.seal import seal  # noqa: E402

cli.add_command(hash_command)
cli.add_command(inspect)
cli.add_command(seal)
cli.add_command(algorithms)
