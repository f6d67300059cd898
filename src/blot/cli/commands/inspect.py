"""blot inspect -- decode a hex multihash."""

from __future__ import annotations

import click

from blot.cli import cli_errors
from blot.engine.multihash import from_hex
from blot.formatting import pprint_multihash


@click.command()
@click.argument("multihash")
def inspect(multihash: str) -> None:
    """Decode MULTIHASH (hex) and print its codec, length and digest."""
    with cli_errors():
        pprint_multihash(from_hex(multihash), verbose=True)
