# src/reservation_usage/cli/report.py
"""
Implements the `report` command of the CLI.
"""

import asyncio
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

import typer
from typing_extensions import Annotated

from ..core.exceptions import ReservationUsageError
from ..core.factory import get_service
from ..exporters import EXPORTERS
from ..models.capacity import FamilySummary
from ..models.cli import OutputOptions
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)

app = typer.Typer(help="Report reserved instance usage per instance family.", add_completion=False)


async def handle_export(data: List[FamilySummary], output_options: OutputOptions):
    """Handles writing the report data to a file."""
    exporter = EXPORTERS[output_options.format]()

    if not output_options.output_path:
        output_path = Path.cwd() / "data" / exporter.DEFAULT_FILENAME
    else:
        output_path = Path(output_options.output_path)

    rows = [item.model_dump(mode="json") for item in data]

    try:
        written_path = await exporter.export(rows, str(output_path))
    except OSError as e:
        logger.error(f"Failed to export report to {output_path}: {e}")
        raise typer.Exit(code=1)

    logger.info(f"Successfully exported report to {written_path}")
    print(f"Report exported to: {written_path}", file=sys.stderr)


@app.callback(invoke_without_command=True)
def report(
    ctx: typer.Context,
    region: Annotated[
        Optional[str],
        typer.Option("--region", help="AWS region to report on. Defaults to AWS_DEFAULT_REGION."),
    ] = None,
    output_format: Annotated[
        Optional[str],
        typer.Option(
            "--output",
            help="Output format (csv/json). If set, writes to a file instead of the console.",
            case_sensitive=False,
        ),
    ] = None,
    output_path: Annotated[
        Optional[Path],
        typer.Option(
            "--output-path",
            help="Specify output file path. Default: './data/reservation-usage.<format>'",
            exists=False,
            dir_okay=False,
            writable=True,
        ),
    ] = None,
):
    """
    Show how much running capacity each instance family has, and how much of
    it reservations cover.

    Displays a table in the console by default.
    Use --output (csv/json) to export to a file.
    """
    if ctx.invoked_subcommand is not None:
        return

    output = OutputOptions(output_format=output_format, output_path=output_path)

    async def _report_async():
        service = get_service()
        effective_region = service.resolve_region(region)
        data = await service.summarize(effective_region)

        if output.is_enabled:
            await handle_export(data=data, output_options=output)
        else:
            ConsoleReporter().report(data=data, region=effective_region)

    try:
        asyncio.run(_report_async())
    except typer.Exit:
        raise
    except ReservationUsageError as e:
        logger.error(f"Report generation failed: {e}")
        raise typer.Exit(code=1)
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}")
        logger.error(traceback.format_exc())
        raise typer.Exit(code=1)
