# src/reservation_usage/api/routers/config.py
"""
API routes for exposing non-sensitive configuration and version information.
"""

import logging

from fastapi import APIRouter

from reservation_usage import __version__
from reservation_usage.api.schemas import ConfigResponse, HealthResponse, VersionResponse
from reservation_usage.core.config import config

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok", version=__version__)


@router.get("/version", response_model=VersionResponse)
async def version():
    """Return the current application version."""
    return VersionResponse(version=__version__)


@router.get("/config", response_model=ConfigResponse)
async def get_config():
    """Return non-sensitive configuration values.

    The verification token is never exposed.
    """
    return ConfigResponse(
        default_region=config.AWS_DEFAULT_REGION or None,
        reservations_ttl_seconds=config.RESERVATIONS_TTL_SECONDS,
        instances_ttl_seconds=config.INSTANCES_TTL_SECONDS,
        emr_tag_key=config.EMR_TAG_KEY,
        regional_scope=config.REGIONAL_SCOPE,
        log_level=config.LOG_LEVEL,
        api_host=config.API_HOST,
        api_port=config.API_PORT,
    )
