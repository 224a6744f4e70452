# tests/api/conftest.py
"""
Shared fixtures for API tests.
Uses FastAPI's TestClient with dependency overrides to inject a service backed
by an in-memory inventory.
"""

import pytest
from fastapi.testclient import TestClient

from reservation_usage.api.app import create_app
from reservation_usage.api.dependencies import get_usage_service, get_verification_token
from reservation_usage.core.service import ReservationUsageService


@pytest.fixture
def usage_service(fake_inventory):
    """Returns a service whose inventory never talks to AWS."""
    return ReservationUsageService(inventory=fake_inventory)


@pytest.fixture
def client(usage_service):
    """Creates a TestClient with dependency overrides for the service and the token."""
    app = create_app()
    app.dependency_overrides[get_usage_service] = lambda: usage_service
    app.dependency_overrides[get_verification_token] = lambda: "secret"
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
