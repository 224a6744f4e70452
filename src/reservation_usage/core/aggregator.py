# src/reservation_usage/core/aggregator.py
"""
Reconciles running instances against reservations, per instance family.
"""

from collections import defaultdict
from math import fsum
from typing import Dict, Iterable, List

from ..models.capacity import FamilySummary, Instance, Reservation


def _bucket_for(instance: Instance) -> str:
    """Return the single bucket an instance counts towards.

    EMR takes precedence over spot, so an EMR cluster running on spot
    capacity is reported as EMR only.
    """
    if instance.emr:
        return "emr"
    if instance.spot:
        return "spot"
    return "on_demand"


def summarize_usage(
    instances: Iterable[Instance],
    reservations: Iterable[Reservation],
) -> List[FamilySummary]:
    """Aggregate instances and reservations into one FamilySummary per family.

    Aggregation rules:
    - Each instance adds its units to exactly one of emr, spot or on_demand.
    - Each reservation adds its units to reserved, regardless of its zone.
    - unreserved is the on-demand capacity reservations do not cover, surplus
      the reserved capacity on-demand instances do not use; at most one of
      them is non-zero.
    - A family present on only one side still gets a row, with zeroes on the
      other side.

    Rows are sorted by family and sums use fsum, so the result does not
    depend on input order.
    """
    units: Dict[str, Dict[str, List[float]]] = defaultdict(lambda: defaultdict(list))

    for instance in instances:
        units[instance.family][_bucket_for(instance)].append(instance.units)

    for reservation in reservations:
        units[reservation.family]["reserved"].append(reservation.units)

    result: List[FamilySummary] = []
    for family in sorted(units):
        buckets = units[family]
        on_demand = fsum(buckets["on_demand"])
        reserved = fsum(buckets["reserved"])
        result.append(
            FamilySummary(
                family=family,
                on_demand=on_demand,
                spot=fsum(buckets["spot"]),
                emr=fsum(buckets["emr"]),
                reserved=reserved,
                unreserved=max(0.0, on_demand - reserved),
                surplus=max(0.0, reserved - on_demand),
            )
        )

    return result
