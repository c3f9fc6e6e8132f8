from typing import Dict, List, Optional

from src.domain.entities import Vehicle
from src.application.repositories import AbstractVehicleRepository


class InMemoryVehicleRepository(AbstractVehicleRepository):
    """Keeps vehicles in a dict for the lifetime of the process."""

    def __init__(self):
        self._vehicles: Dict[str, Vehicle] = {}

    def get_by_license_plate(self, license_plate: str) -> Optional[Vehicle]:
        return self._vehicles.get(license_plate.upper())

    def add(self, vehicle: Vehicle) -> Vehicle:
        self._vehicles[vehicle.license_plate.upper()] = vehicle
        return vehicle

    def get_all(self) -> List[Vehicle]:
        return list(self._vehicles.values())
