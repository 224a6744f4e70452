# src/reservation_usage/api/schemas.py
"""
Pydantic response schemas for the API.
"""

from typing import Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str = Field(..., description="Health status of the API.")
    version: str = Field(..., description="Current application version.")


class VersionResponse(BaseModel):
    """Response schema for the version endpoint."""

    version: str = Field(..., description="Current application version.")


class ConfigResponse(BaseModel):
    """Non-sensitive configuration values."""

    default_region: Optional[str]
    reservations_ttl_seconds: float
    instances_ttl_seconds: float
    emr_tag_key: str
    regional_scope: str
    log_level: str
    api_host: str
    api_port: int
