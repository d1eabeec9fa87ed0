"""Command: queueconn resolve - Show the descriptor for a URI."""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from queueconn.commands._common import resolve_or_exit


console = Console()


def resolve(
    uri: str | None = typer.Argument(
        None, help="Redis URI to resolve (defaults to QUEUECONN_REDIS_URI)."
    ),
    as_json: bool = typer.Option(
        False, "--json", "-j", help="Print the descriptor as JSON."
    ),
    show_secrets: bool = typer.Option(
        False, "--show-secrets", help="Print passwords instead of masking them."
    ),
) -> None:
    """Resolve a Redis URI into its connection descriptor.

    Passwords are masked unless --show-secrets is given.
    """
    descriptor = resolve_or_exit(uri)
    shown = descriptor if show_secrets else descriptor.redacted()

    if as_json:
        typer.echo(shown.model_dump_json(indent=2))
        return

    table = Table(title="Connection Descriptor", show_header=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("network", shown.network)
    for field, value in shown.model_dump().items():
        if isinstance(value, (list, tuple)):
            value = ", ".join(value)
        table.add_row(field, escape(str(value)))

    console.print()
    console.print(table)
    console.print()
