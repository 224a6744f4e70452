# src/reservation_usage/reporters/base_reporter.py
"""
Defines the abstract base class for all reporters.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..models.capacity import FamilySummary

# (column label, FamilySummary attribute), in display order
COLUMNS = [
    ("on demand", "on_demand"),
    ("spot", "spot"),
    ("emr", "emr"),
    ("reserved", "reserved"),
    ("unreserved", "unreserved"),
    ("surplus", "surplus"),
]


def format_units(value: float) -> str:
    """Format a number of units without a trailing '.0' for whole values."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


class BaseReporter(ABC):
    """
    Abstract Base Class for all reporters.
    """

    @abstractmethod
    def render(self, data: List[FamilySummary], region: Optional[str] = None) -> Any:
        """
        Takes the summary rows and presents them in a specific format
        (e.g., plain text, Slack message, JSON).
        """
        pass
