# src/reservation_usage/api/dependencies.py
"""
FastAPI dependency injection functions.

These functions provide the service and the verification token to API route
handlers via FastAPI's Depends() mechanism, so tests can override them.
"""

from typing import Optional

from reservation_usage.core.config import config
from reservation_usage.core.service import ReservationUsageService


async def get_usage_service() -> ReservationUsageService:
    """Provides the process-wide ReservationUsageService via the factory."""
    from reservation_usage.core.factory import get_service

    return get_service()


async def get_verification_token() -> Optional[str]:
    """Provides the configured verification token."""
    return config.VERIFICATION_TOKEN
