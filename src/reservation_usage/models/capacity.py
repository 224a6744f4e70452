# src/reservation_usage/models/capacity.py
"""
This module defines the Pydantic data models shared by the collectors, the
aggregator and the reporters: running instances, reserved instances and the
per-family summary rows built from them.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

REGION_WIDE_AZ = "*"


class Instance(BaseModel):
    """
    A running EC2 instance, reduced to what matters for capacity accounting.

    Attributes:
        family: Instance family (e.g., 'm5')
        size: Instance size (e.g., '2xlarge')
        units: Normalized capacity units of this instance
        spot: True if the instance runs on the spot market
        emr: True if the instance belongs to an EMR cluster
        az: Availability zone the instance runs in
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    family: str = Field(..., description="Instance family")
    size: str = Field(..., description="Instance size")
    units: float = Field(..., ge=0, description="Normalized capacity units")
    spot: bool = Field(False, description="Runs on the spot market")
    emr: bool = Field(False, description="Belongs to an EMR cluster")
    az: str = Field("", description="Availability zone")


class Reservation(BaseModel):
    """
    An active reserved instance purchase.

    The availability zone is '*' for convertible and region-scoped
    reservations, which apply to matching instances in any zone.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., description="Reserved instances ID")
    family: str = Field(..., description="Instance family")
    size: str = Field(..., description="Instance size")
    count: int = Field(..., ge=0, description="Number of reserved instances")
    offering_class: Literal["standard", "convertible"] = Field("standard", description="Offering class")
    units: float = Field(..., ge=0, description="Normalized capacity units reserved")
    az: str = Field(REGION_WIDE_AZ, description="Availability zone, or '*' when not zonal")


class FamilySummary(BaseModel):
    """Running and reserved capacity of one instance family, in normalized units."""

    family: str = Field(..., description="Instance family")
    on_demand: float = Field(0.0, description="On-demand units running")
    spot: float = Field(0.0, description="Spot units running")
    emr: float = Field(0.0, description="Units running in EMR clusters")
    reserved: float = Field(0.0, description="Units covered by reservations")
    unreserved: float = Field(0.0, description="On-demand units not covered by reservations")
    surplus: float = Field(0.0, description="Reserved units not used by on-demand instances")
