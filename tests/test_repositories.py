from src.domain.entities import Vehicle
from src.infrastructure.persistence.in_memory_repositories import InMemoryVehicleRepository


def test_add_and_get_by_license_plate():
    repo = InMemoryVehicleRepository()
    vehicle = repo.add(Vehicle("AB-123-CD"))
    assert repo.get_by_license_plate("AB-123-CD") is vehicle
    assert repo.get_by_license_plate("ab-123-cd") is vehicle


def test_get_missing_vehicle():
    assert InMemoryVehicleRepository().get_by_license_plate("NOPE") is None


def test_get_all_keeps_insertion_order():
    repo = InMemoryVehicleRepository()
    repo.add(Vehicle("B-2"))
    repo.add(Vehicle("A-1"))
    assert [vehicle.license_plate for vehicle in repo.get_all()] == ["B-2", "A-1"]
