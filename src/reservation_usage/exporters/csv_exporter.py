import csv
import io
import os
from typing import Any, Dict, List

import aiofiles

from ..models.capacity import FamilySummary
from .base_exporter import BaseExporter

FIELDNAMES = list(FamilySummary.model_fields)


class CSVExporter(BaseExporter):
    DEFAULT_FILENAME = "reservation-usage.csv"

    async def export(self, rows: List[Dict[str, Any]], path: str | None = None) -> str:
        """Export summary rows to a CSV file with a header line. Returns path written.

        Columns follow the FamilySummary field order; an empty report still
        gets its header.
        """
        out_path = path or self.DEFAULT_FILENAME
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)

        # csv.writer needs a synchronous file object, so build the content in
        # memory and write it in one go.
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=FIELDNAMES, extrasaction="ignore", lineterminator="\n")
        writer.writeheader()
        for row in rows or []:
            writer.writerow({k: self._sanitize_cell(v) for k, v in row.items()})

        async with aiofiles.open(out_path, "w", encoding="utf-8", newline="") as fh:
            await fh.write(output.getvalue())

        return out_path

    def _sanitize_cell(self, value: Any) -> Any:
        """
        Sanitize value to prevent CSV formula injection.
        If the value is a string starting with =, +, -, or @, prefix it with a single quote.
        """
        if isinstance(value, str) and value.startswith(("=", "+", "-", "@")):
            return f"'{value}"
        return value
