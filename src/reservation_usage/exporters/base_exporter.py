from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class BaseExporter(ABC):
    """Abstract base class for file exporters of summary rows.

    Subclasses should provide a DEFAULT_FILENAME and implement `export`.
    """

    DEFAULT_FILENAME: str = "reservation-usage"

    @abstractmethod
    async def export(self, rows: List[Dict[str, Any]], path: str | None = None) -> str:
        """Write the rows to disk. Return the written path."""
        raise NotImplementedError()
