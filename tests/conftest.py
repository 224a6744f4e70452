# tests/conftest.py

from typing import List, Optional

import pytest

from reservation_usage.core.config import config
from reservation_usage.models.capacity import Instance, Reservation


class FakeClock:
    """A clock that only moves when told to, in seconds."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class FakeInventory:
    """Stands in for EC2Collector, recording the regions it was asked for."""

    def __init__(self, instances: List[Instance], reservations: List[Reservation]):
        self.instances = instances
        self.reservations = reservations
        self.reservation_regions: List[str] = []
        self.instance_regions: List[str] = []
        self.error: Optional[Exception] = None

    async def load_reservations(self, region: str) -> List[Reservation]:
        self.reservation_regions.append(region)
        if self.error:
            raise self.error
        return list(self.reservations)

    async def load_instances(self, region: str) -> List[Instance]:
        self.instance_regions.append(region)
        if self.error:
            raise self.error
        return list(self.instances)


@pytest.fixture(autouse=True)
def mock_settings(monkeypatch):
    """
    Pytest fixture to pin the process-wide settings for every test.

    The config is read once at import, so this fixture runs automatically
    (`autouse=True`) and patches the loaded `config` object, keeping the
    default region and the verification token predictable and isolated from
    the actual environment.
    """
    monkeypatch.setattr(config, "AWS_DEFAULT_REGION", "eu-north-3")
    monkeypatch.setattr(config, "VERIFICATION_TOKEN", "secret")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sample_instances():
    """Running instances: one of each kind, i9 also has an EMR node."""
    return [
        Instance(family="i9", size="large", units=4, spot=False, emr=False, az="eu-north-3a"),
        Instance(family="p7", size="large", units=4, spot=False, emr=False, az="eu-north-3a"),
        Instance(family="d5", size="large", units=4, spot=False, emr=False, az="eu-north-3b"),
        Instance(family="c6", size="large", units=4, spot=True, emr=False, az="eu-north-3b"),
        Instance(family="i9", size="large", units=4, spot=False, emr=True, az="eu-north-3c"),
    ]


@pytest.fixture
def sample_reservations():
    """Convertible reservations for p7 and i9."""
    return [
        Reservation(id="r-1", family="p7", size="small", count=8, offering_class="convertible", units=8),
        Reservation(id="r-2", family="i9", size="small", count=18, offering_class="convertible", units=18),
        Reservation(id="r-3", family="i9", size="small", count=4, offering_class="convertible", units=4),
        Reservation(id="r-4", family="i9", size="small", count=2, offering_class="convertible", units=2),
    ]


@pytest.fixture
def fake_inventory(sample_instances, sample_reservations):
    return FakeInventory(sample_instances, sample_reservations)
