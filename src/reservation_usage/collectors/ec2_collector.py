# src/reservation_usage/collectors/ec2_collector.py

import asyncio
import logging
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..core.cache import CapacityCache
from ..core.config import config as global_config
from ..core.exceptions import UpstreamLoadFailure
from ..core.normalization import normalize, split_instance_type
from ..models.capacity import REGION_WIDE_AZ, Instance, Reservation
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)

ACTIVE_RESERVATIONS_FILTER = [{"Name": "state", "Values": ["active"]}]
RUNNING_INSTANCES_FILTER = [{"Name": "instance-state-name", "Values": ["running"]}]


def default_client_factory(region: str):
    """Build a boto3 EC2 client for ``region`` from the default credential chain."""
    return boto3.client("ec2", region_name=region)


class EC2Collector(BaseCollector):
    """Collects active reserved instances and running instances from the EC2 API.

    Both lookups are cached per region, reservations for an hour and running
    instances for five minutes by default.
    """

    def __init__(
        self,
        client_factory: Optional[Callable[[str], Any]] = None,
        clock: Callable[[], float] = time.monotonic,
        reservations_ttl: Optional[float] = None,
        instances_ttl: Optional[float] = None,
        emr_tag_key: Optional[str] = None,
        regional_scope: Optional[str] = None,
    ):
        self._client_factory = client_factory or default_client_factory
        self._clients: Dict[str, Any] = {}
        self.emr_tag_key = emr_tag_key or global_config.EMR_TAG_KEY
        self.regional_scope = regional_scope or global_config.REGIONAL_SCOPE
        self.reservations_cache = CapacityCache(
            ttl=global_config.RESERVATIONS_TTL_SECONDS if reservations_ttl is None else reservations_ttl,
            clock=clock,
            name="reservations",
        )
        self.instances_cache = CapacityCache(
            ttl=global_config.INSTANCES_TTL_SECONDS if instances_ttl is None else instances_ttl,
            clock=clock,
            name="instances",
        )

    def _client(self, region: str):
        client = self._clients.get(region)
        if client is None:
            logger.debug("Creating EC2 client for region %s", region)
            client = self._client_factory(region)
            self._clients[region] = client
        return client

    async def collect(self, region: str) -> Tuple[List[Instance], List[Reservation]]:
        """Load running instances and active reservations of ``region`` concurrently."""
        instances, reservations = await asyncio.gather(
            self.load_instances(region),
            self.load_reservations(region),
        )
        return instances, reservations

    async def load_reservations(self, region: str) -> List[Reservation]:
        """Return the active reservations of ``region``."""
        return await self.reservations_cache.get(region, lambda: self._fetch_reservations(region))

    async def load_instances(self, region: str) -> List[Instance]:
        """Return the running instances of ``region``."""
        return await self.instances_cache.get(region, lambda: self._fetch_instances(region))

    async def _fetch_reservations(self, region: str) -> List[Reservation]:
        client = self._client(region)
        try:
            response = await asyncio.to_thread(client.describe_reserved_instances, Filters=ACTIVE_RESERVATIONS_FILTER)
        except (ClientError, BotoCoreError) as e:
            logger.error("EC2 API error while describing reserved instances in %s: %s", region, e)
            raise UpstreamLoadFailure(f"Could not load reservations for region '{region}': {e}") from e

        reservations = [self._to_reservation(raw) for raw in response.get("ReservedInstances", [])]
        logger.info("Loaded %d active reservations in %s", len(reservations), region)
        return reservations

    async def _fetch_instances(self, region: str) -> List[Instance]:
        client = self._client(region)
        try:
            raw_instances = await asyncio.to_thread(self._describe_running_instances, client)
        except (ClientError, BotoCoreError) as e:
            logger.error("EC2 API error while describing instances in %s: %s", region, e)
            raise UpstreamLoadFailure(f"Could not load instances for region '{region}': {e}") from e

        instances = [self._to_instance(raw) for raw in raw_instances]
        logger.info("Loaded %d running instances in %s", len(instances), region)
        return instances

    @staticmethod
    def _describe_running_instances(client) -> List[dict]:
        """Page through describe_instances, flattening reservations into instances."""
        raw_instances = []
        paginator = client.get_paginator("describe_instances")
        for page in paginator.paginate(Filters=RUNNING_INSTANCES_FILTER):
            for reservation in page.get("Reservations", []):
                raw_instances.extend(reservation.get("Instances", []))
        return raw_instances

    def _to_reservation(self, raw: dict) -> Reservation:
        family, size = split_instance_type(raw.get("InstanceType"))
        count = int(raw.get("InstanceCount", 0))
        offering_class = raw.get("OfferingClass", "standard")
        if offering_class == "convertible" or raw.get("Scope") == self.regional_scope:
            az = REGION_WIDE_AZ
        else:
            az = raw.get("AvailabilityZone", REGION_WIDE_AZ)
        return Reservation(
            id=raw.get("ReservedInstancesId", ""),
            family=family,
            size=size,
            count=count,
            offering_class=offering_class,
            units=normalize(size, count),
            az=az,
        )

    def _to_instance(self, raw: dict) -> Instance:
        family, size = split_instance_type(raw.get("InstanceType"))
        tags = raw.get("Tags") or []
        return Instance(
            family=family,
            size=size,
            units=normalize(size, 1),
            spot=raw.get("InstanceLifecycle") == "spot",
            emr=any(tag.get("Key") == self.emr_tag_key for tag in tags),
            az=(raw.get("Placement") or {}).get("AvailabilityZone", ""),
        )

    async def close(self):
        """Drop the EC2 clients."""
        self._clients.clear()
        logger.debug("EC2Collector clients released.")
