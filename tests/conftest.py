import pytest
from fastapi.testclient import TestClient

from src.domain.entities import Garage, Vehicle
from src.infrastructure.persistence.in_memory_repositories import InMemoryVehicleRepository
from src.application.services.parking_service import ParkingService
from src.api.routers.parking import get_parking_service
from src.main import create_app


@pytest.fixture
def alpha():
    return Garage("Alpha")


@pytest.fixture
def beta():
    return Garage("Beta")


@pytest.fixture
def vehicle():
    """A vehicle with an empty history."""
    return Vehicle("AB-123-CD")


@pytest.fixture
def vehicle_repo():
    return InMemoryVehicleRepository()


@pytest.fixture
def parking_service(vehicle_repo):
    """Create a ParkingService backed by a fresh in-memory repository."""
    return ParkingService(vehicle_repo=vehicle_repo)


@pytest.fixture
def client(parking_service):
    """Test client whose routes share the test's ParkingService."""
    app = create_app()
    app.dependency_overrides[get_parking_service] = lambda: parking_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
