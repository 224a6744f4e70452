import json
import os
from typing import Any, Dict, List

import aiofiles

from .base_exporter import BaseExporter


class JSONExporter(BaseExporter):
    DEFAULT_FILENAME = "reservation-usage.json"

    async def export(self, rows: List[Dict[str, Any]], path: str | None = None) -> str:
        out_path = path or self.DEFAULT_FILENAME
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)

        async with aiofiles.open(out_path, "w", encoding="utf-8") as fh:
            await fh.write(json.dumps(list(rows or []), ensure_ascii=False, indent=2))
        return out_path
