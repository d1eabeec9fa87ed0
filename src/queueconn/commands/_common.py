"""Helpers shared by CLI commands."""

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from queueconn.config import get_settings
from queueconn.core.errors import RedisURIError
from queueconn.core.uri import ConnectionDescriptor, resolve


console = Console()
logger = structlog.get_logger()


def resolve_or_exit(uri: str | None) -> ConnectionDescriptor:
    """Resolve ``uri`` (or the configured URI), exiting with code 1 on failure."""
    if uri is None:
        uri = get_settings().redis_uri
    try:
        return resolve(uri)
    except RedisURIError as e:
        logger.warning("redis_uri_rejected", error_code=e.error_code, **e.details)
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(code=1) from e
    except ValueError as e:
        # Sentinel db failures surface as plain ValueError
        logger.warning("redis_uri_rejected", error_code="value_error")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
