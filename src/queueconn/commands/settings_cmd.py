"""Command: queueconn arq-settings - Show ARQ settings for a URI."""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from queueconn.commands._common import resolve_or_exit
from queueconn.core.constants import REDACTED
from queueconn.core.errors import InvalidAddressError
from queueconn.core.jobs import to_redis_settings


console = Console()

_SHOWN_FIELDS = (
    "host",
    "port",
    "unix_socket_path",
    "database",
    "username",
    "password",
    "ssl",
    "ssl_check_hostname",
    "sentinel",
    "sentinel_master",
)


def arq_settings(
    uri: str | None = typer.Argument(
        None, help="Redis URI to convert (defaults to QUEUECONN_REDIS_URI)."
    ),
    show_secrets: bool = typer.Option(
        False, "--show-secrets", help="Print passwords instead of masking them."
    ),
) -> None:
    """Show the ARQ RedisSettings a worker would use for a URI."""
    descriptor = resolve_or_exit(uri)
    try:
        settings = to_redis_settings(descriptor)
    except InvalidAddressError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(code=1) from e

    table = Table(title="ARQ Redis Settings", show_header=True)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value")

    for name in _SHOWN_FIELDS:
        value = getattr(settings, name)
        if name == "password" and value and not show_secrets:
            value = REDACTED
        table.add_row(name, escape(str(value)))

    console.print()
    console.print(table)
    console.print()
