"""blot hash -- print the blot checksum of a JSON document."""

from __future__ import annotations

import click

from blot.cli import build_config, cli_errors, hash_options, read_input
from blot.convert import from_json
from blot.engine.hashing import hash_value
from blot.formatting import pprint_multihash, pprint_value


@click.command("hash")
@hash_options
@click.option("--verbose", is_flag=True, help="Print codec, length and digest separately.")
@click.option("--tree", is_flag=True, help="Also print the typed value tree.")
def hash_command(input: str, verbose: bool, tree: bool, **options) -> None:
    """Hash INPUT, a JSON document (or - to read stdin).

    For example: '"foo"', '{"foo": "bar"}', '[1, "foo"]'.
    """
    with cli_errors():
        config = build_config(**options)
        value = from_json(read_input(input), config)
        mh = hash_value(value, config)
        if tree:
            pprint_value(value)
        pprint_multihash(mh, verbose=verbose)
