# src/reservation_usage/cli/main.py
"""
This module is the main entry point for the CLI.

It aggregates all commands from the submodules (report, serve).
"""

import logging

import typer

from ..core.config import config
from . import report, serve

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="reservation-usage",
    help="Compare running EC2 capacity with reserved instances, per instance family.",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version.
    """
    if value:
        from .. import __version__

        typer.echo(f"reservation-usage version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version.
    """
    from .. import __version__

    typer.echo(f"reservation-usage version: {__version__}")


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    Reservation usage CLI main entry point.
    """
    pass


# Register command sub-apps
app.add_typer(report.app, name="report")
app.command(name="serve")(serve.serve)


if __name__ == "__main__":
    app()
