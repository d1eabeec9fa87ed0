"""Main queueconn CLI application."""

import typer
from rich.console import Console

from queueconn import __version__
from queueconn.commands import resolve_cmd, settings_cmd
from queueconn.config import get_settings
from queueconn.core.logging import configure_logging


console = Console()

app = typer.Typer(
    name="queueconn",
    help="Inspect Redis connection URIs for the task queue.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register commands
app.command(name="resolve")(resolve_cmd.resolve)
app.command(name="arq-settings")(settings_cmd.arq_settings)


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """queueconn CLI - Inspect Redis connection URIs."""
    if version:
        console.print(f"[bold cyan]queueconn[/bold cyan] version {__version__}")
        raise typer.Exit()

    settings = get_settings()
    configure_logging(settings.log_level, json_output=settings.log_json)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
