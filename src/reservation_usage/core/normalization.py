# src/reservation_usage/core/normalization.py
"""
Converts instance sizes into normalized capacity units so that instances and
reservations of different sizes in the same family can be compared.
"""

import re
from typing import Tuple

from ..data.size_factors import SIZE_FACTORS, XLARGE_FACTOR
from .exceptions import InvalidSizeDescriptor

_MULTI_XLARGE = re.compile(r"^(\d+)xlarge$")


def size_factor(size: str) -> float:
    """Return the normalization factor of a single instance of ``size``."""
    if size in SIZE_FACTORS:
        return SIZE_FACTORS[size]
    match = _MULTI_XLARGE.match(size or "")
    if not match:
        raise InvalidSizeDescriptor(f"Unknown instance size '{size}'.")
    return int(match.group(1)) * XLARGE_FACTOR


def normalize(size: str, count: int = 1) -> float:
    """Return the normalized units of ``count`` instances of ``size``.

    Examples:
        normalize("xlarge") == 8
        normalize("nano", 3) == 0.75
        normalize("37xlarge", 9) == 2664
    """
    if count < 0:
        raise ValueError(f"Instance count must not be negative, got {count}.")
    return count * size_factor(size)


def split_instance_type(instance_type: str) -> Tuple[str, str]:
    """Split an instance type such as 'm5.2xlarge' into ('m5', '2xlarge')."""
    family, sep, size = (instance_type or "").partition(".")
    if not sep or not family or not size:
        raise InvalidSizeDescriptor(f"Malformed instance type '{instance_type}'.")
    return family, size
