"""blot seal -- print the redaction marker that stands in for a document."""

from __future__ import annotations

import click

from blot.cli import build_config, cli_errors, hash_options, read_input
from blot.convert import from_json
from blot.engine.hashing import hash_value
from blot.models.seal import format_seal


@click.command()
@hash_options
@click.option(
    "--classic",
    is_flag=True,
    help="Use the objecthash '**REDACTED**' prefix instead of the 0x77 seal mark.",
)
def seal(input: str, classic: bool, **options) -> None:
    """Print a seal for INPUT that can replace it inside a larger document."""
    with cli_errors() as console:
        config = build_config(**options)
        mh = hash_value(from_json(read_input(input), config), config)
        console.print(format_seal(mh, classic=classic), markup=False)
