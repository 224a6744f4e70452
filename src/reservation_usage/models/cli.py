# src/reservation_usage/models/cli.py
"""
Data models for CLI command options using Typer.
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..exporters import EXPORTERS


class OutputOptions:
    """Dependency-injectable model for output/export options."""

    def __init__(
        self,
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
        self.output_format = output_format
        self.output_path = output_path
        self._validate()

    def _validate(self):
        """Validates the output format."""
        if self.output_format and self.output_format.lower() not in EXPORTERS:
            raise typer.BadParameter(
                f"Invalid output format '{self.output_format}'. Must be one of: {', '.join(sorted(EXPORTERS))}."
            )

    @property
    def is_enabled(self) -> bool:
        """Checks if file output is enabled."""
        return self.output_format is not None

    @property
    def format(self) -> str:
        """Returns the validated, lower-cased format."""
        return self.output_format.lower() if self.output_format else "csv"
