# src/reservation_usage/collectors/base_collector.py
"""
This module defines the abstract base class for inventory collectors.
A collector turns a provider's records for one region into the Pydantic
models the aggregator works with.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseCollector(ABC):
    """
    Abstract Base Class for all inventory collectors.
    """

    @abstractmethod
    async def collect(self, region: str) -> Any:
        """
        Fetch the inventory of ``region`` from the collector's source, parse
        it, and return Pydantic models.
        """
        pass

    async def close(self):
        """
        Clean up resources (e.g., API clients).
        """
        pass
