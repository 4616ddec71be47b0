"""Mini README: Entry point CLI for launching the bill batch composer.

This script exposes a Typer CLI that starts the FastAPI interface with
configurable host, port, and production flags. Settings come from
``BILLBATCH_*`` environment variables when the options are omitted.
"""

from __future__ import annotations

import typer
import uvicorn

from billbatch.configuration import get_settings
from billbatch.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch the bill batch composer interface.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot navigate to the 0.0.0.0 wildcard, so point them at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting bill batch composer on {effective_host}:{effective_port}.\n"
        f"Entries are served at http://{browser_host}:{effective_port}/entries"
    )
    uvicorn.run(
        "billbatch.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not (production or settings.is_production),
    )


if __name__ == "__main__":
    cli()
