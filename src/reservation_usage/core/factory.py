# src/reservation_usage/core/factory.py
"""
Factory functions to instantiate the collector and the service once per process.
"""

import logging
from functools import lru_cache

from ..collectors.ec2_collector import EC2Collector
from .service import ReservationUsageService

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_collector() -> EC2Collector:
    """
    Return the process-wide EC2Collector, so its caches are shared by all requests.
    Uses lru_cache to act as a singleton.
    """
    logger.info("Initializing EC2 collector...")
    return EC2Collector()


@lru_cache(maxsize=1)
def get_service() -> ReservationUsageService:
    """
    Return the process-wide ReservationUsageService.
    Uses lru_cache to act as a singleton.
    """
    return ReservationUsageService(inventory=get_collector())
