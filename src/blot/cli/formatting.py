"""Rich formatting helpers for the Blot CLI.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes),
so piped output is the bare lowercase hex.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from blot.protocols import DigestPrimitive


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False, highlight=False, soft_wrap=True)


def format_algorithms(algorithms: list[DigestPrimitive], default: str, console: Console) -> None:
    """Display the algorithm registry as a table."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Name", style="cyan")
    table.add_column("Code", style="yellow", justify="right")
    table.add_column("Length", style="green", justify="right")

    for alg in algorithms:
        name = f"{alg.name} [dim](default)[/dim]" if alg.name == default else alg.name
        table.add_row(name, f"{alg.code:#x}", str(alg.length))

    console.print(table)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
