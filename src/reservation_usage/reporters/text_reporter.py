# src/reservation_usage/reporters/text_reporter.py
"""
A reporter that renders the summary as a fixed-width plain text table.
"""

from typing import List, Optional

from ..models.capacity import FamilySummary
from .base_reporter import COLUMNS, BaseReporter, format_units


class TextReporter(BaseReporter):
    """Renders one line per family, numbers right-aligned under their header."""

    separator = "  "

    def render(self, data: List[FamilySummary], region: Optional[str] = None) -> str:
        cells = [[format_units(getattr(row, attr)) for _, attr in COLUMNS] for row in data]
        family_width = max([len("family")] + [len(row.family) for row in data])
        widths = [max([len(label)] + [len(line[i]) for line in cells]) for i, (label, _) in enumerate(COLUMNS)]

        header = "family".ljust(family_width) + "".join(
            self.separator + label.rjust(width) for (label, _), width in zip(COLUMNS, widths)
        )
        lines = [header]
        for row, line in zip(data, cells):
            lines.append(
                row.family.ljust(family_width)
                + "".join(self.separator + cell.rjust(width) for cell, width in zip(line, widths))
            )
        return "\n".join(lines)
