"""Pretty-print support for Blot values and digests.

Uses the rich library for terminal output. All pprint functions accept an
optional file-like object so tests can capture the rendering.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.text import Text
from rich.tree import Tree

from blot.engine import uvar
from blot.engine.multihash import Multihash
from blot.models.value import (
    Bool,
    Dict,
    Float,
    Integer,
    List,
    Null,
    Raw,
    Redacted,
    Set,
    Timestamp,
    Unicode,
    Value,
)

CODE_STYLE = "black on color(198)"
LENGTH_STYLE = "black on color(39)"
DIGEST_STYLE = "color(221) on black"


def _make_console(file: Any = None) -> Console:
    """Create a Console, optionally writing to a file-like object."""
    if file is not None:
        return Console(file=file, width=100, highlight=False, soft_wrap=True)
    return Console(highlight=False, soft_wrap=True)


def multihash_text(mh: Multihash) -> Text:
    """The hex envelope with code, length and digest styled apart."""
    text = Text()
    text.append(uvar.encode(mh.code).hex(), style=CODE_STYLE)
    text.append(uvar.encode(mh.length).hex(), style=LENGTH_STYLE)
    text.append(mh.digest.hex(), style=DIGEST_STYLE)
    return text


def pprint_multihash(mh: Multihash, *, verbose: bool = False, file: Any = None) -> None:
    """Print a Multihash, either as one hex line or field by field."""
    console = _make_console(file)
    if not verbose:
        console.print(multihash_text(mh))
        return

    console.print(Text("Codec: ", style=CODE_STYLE), f"{mh.code:#04x} ({mh.name})")
    console.print(Text("Length:", style=LENGTH_STYLE), f"{mh.length:#04x}")
    console.print(Text("Digest:", style=DIGEST_STYLE), f"0x{mh.digest.hex()}")


def _label(value: Value) -> str:
    if isinstance(value, Null):
        return "[dim]null[/dim]"
    if isinstance(value, Bool):
        return f"[cyan]bool[/cyan] {str(value.value).lower()}"
    if isinstance(value, Integer):
        return f"[cyan]integer[/cyan] {value.value}"
    if isinstance(value, Float):
        return f"[cyan]float[/cyan] {value.value!r}"
    if isinstance(value, Unicode):
        return f"[cyan]unicode[/cyan] {escape(repr(value.value))}"
    if isinstance(value, Raw):
        return f"[cyan]raw[/cyan] 0x{value.value.hex()}"
    if isinstance(value, Timestamp):
        return f"[cyan]timestamp[/cyan] {value.isoformat()}"
    if isinstance(value, Redacted):
        alg = f" ({value.algorithm})" if value.algorithm else ""
        return f"[red]redacted[/red]{alg} {value.digest.hex()}"
    if isinstance(value, List):
        return f"[green]list[/green] ({len(value.items)})"
    if isinstance(value, Set):
        return f"[green]set[/green] ({len(value.items)})"
    if isinstance(value, Dict):
        return f"[green]dict[/green] ({len(value.entries)})"
    return escape(repr(value))


def value_tree(value: Value, label: str | None = None) -> Tree:
    """Build a rich Tree showing the type of every node."""
    text = _label(value) if label is None else f"[bold]{escape(label)}[/bold]: {_label(value)}"
    tree = Tree(text)
    if isinstance(value, (List, Set)):
        for item in value.items:
            tree.children.append(value_tree(item))
    elif isinstance(value, Dict):
        for key, item in value.entries:
            tree.children.append(value_tree(item, label=key))
    return tree


def pprint_value(value: Value, *, file: Any = None) -> None:
    """Print the typed structure of a Value tree."""
    _make_console(file).print(value_tree(value))
