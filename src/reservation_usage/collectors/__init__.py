"""Inventory collectors."""

from .base_collector import BaseCollector
from .ec2_collector import EC2Collector

__all__ = ["BaseCollector", "EC2Collector"]
