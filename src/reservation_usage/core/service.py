# src/reservation_usage/core/service.py
"""
End-to-end entry point: resolve the region, load both sides of the
inventory and reconcile them.
"""

import asyncio
import logging
from typing import List, Optional

from ..collectors.ec2_collector import EC2Collector
from ..models.capacity import FamilySummary
from .aggregator import summarize_usage
from .config import config
from .exceptions import RegionNotConfigured

logger = logging.getLogger(__name__)


class ReservationUsageService:
    """Summarizes reserved instance usage for a region."""

    def __init__(self, inventory: EC2Collector, default_region: Optional[str] = None):
        self.inventory = inventory
        self._default_region = default_region

    @property
    def default_region(self) -> str:
        if self._default_region is not None:
            return self._default_region
        return config.AWS_DEFAULT_REGION

    def resolve_region(self, region: Optional[str] = None) -> str:
        """Return ``region`` if given, else the default region."""
        effective = (region or "").strip() or (self.default_region or "").strip()
        if not effective:
            raise RegionNotConfigured("No region given and AWS_DEFAULT_REGION is not set.")
        return effective

    async def summarize(self, region: Optional[str] = None) -> List[FamilySummary]:
        effective = self.resolve_region(region)
        logger.info("Summarizing reserved instance usage in %s", effective)
        reservations, instances = await asyncio.gather(
            self.inventory.load_reservations(effective),
            self.inventory.load_instances(effective),
        )
        return summarize_usage(instances, reservations)
