# src/reservation_usage/reporters/json_reporter.py

from typing import Any, Dict, List, Optional

from ..models.capacity import FamilySummary
from .base_reporter import BaseReporter


class JSONReporter(BaseReporter):
    """Returns the summary rows as JSON-compatible dictionaries."""

    def render(self, data: List[FamilySummary], region: Optional[str] = None) -> List[Dict[str, Any]]:
        return [row.model_dump(mode="json") for row in data]
