# src/reservation_usage/reporters/console_reporter.py
"""
A reporter that displays the summary in a formatted table in the console.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from ..models.capacity import FamilySummary
from .base_reporter import COLUMNS, BaseReporter, format_units

logger = logging.getLogger(__name__)

_COLUMN_STYLES = {
    "on_demand": "green",
    "spot": "yellow",
    "emr": "blue",
    "reserved": "cyan",
    "unreserved": "red",
    "surplus": "magenta",
}


class ConsoleReporter(BaseReporter):
    """
    Renders the reserved instance usage to the console using the 'rich' library.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, data: List[FamilySummary], region: Optional[str] = None) -> Table:
        title = "Reserved Instance Usage"
        if region:
            title = f"{title} ({region})"
        table = Table(title=title, header_style="bold magenta")
        table.add_column("Family", style="cyan")
        for label, attr in COLUMNS:
            table.add_column(label.title(), style=_COLUMN_STYLES[attr], justify="right")

        for row in data:
            table.add_row(row.family, *(format_units(getattr(row, attr)) for _, attr in COLUMNS))
        return table

    def report(self, data: List[FamilySummary], region: Optional[str] = None):
        """
        Displays the summary rows, or a notice when there is nothing to show.
        """
        if not data:
            self.console.print("No instances or reservations found.", style="yellow")
            return

        self.console.print(self.render(data, region))

        unreserved = sum(row.unreserved for row in data)
        surplus = sum(row.surplus for row in data)
        if unreserved:
            self.console.print(f"{format_units(unreserved)} on-demand units are not covered by reservations.", style="red")
        if surplus:
            self.console.print(f"{format_units(surplus)} reserved units are unused.", style="yellow")
        if not unreserved and not surplus:
            self.console.print("✅ Reservations match on-demand usage exactly.", style="green")
