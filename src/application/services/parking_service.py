from typing import List, Set

from loguru import logger
from src.application.repositories import AbstractVehicleRepository
from src.domain.entities import Garage, ParkingStay, Vehicle
from src.domain.exceptions import InvalidArgumentError, ParkingError, VehicleNotFoundError
from src.domain.reporting import render_stays


class ParkingService:
    def __init__(self, vehicle_repo: AbstractVehicleRepository):
        self.vehicle_repo = vehicle_repo

    @staticmethod
    def _normalize_plate(license_plate: str) -> str:
        if license_plate is None or not license_plate.strip():
            raise InvalidArgumentError("A vehicle needs a license plate")
        return license_plate.upper().strip()

    def register_vehicle(self, license_plate: str) -> Vehicle:
        license_plate = self._normalize_plate(license_plate)
        vehicle = self.vehicle_repo.get_by_license_plate(license_plate)
        if vehicle:
            return vehicle

        vehicle = self.vehicle_repo.add(Vehicle(license_plate))
        logger.debug(f"Registered vehicle {license_plate}")
        return vehicle

    def get_vehicle(self, license_plate: str) -> Vehicle:
        license_plate = self._normalize_plate(license_plate)
        vehicle = self.vehicle_repo.get_by_license_plate(license_plate)
        if not vehicle:
            raise VehicleNotFoundError(f"Unknown vehicle {license_plate}")
        return vehicle

    def register_vehicle_entry(self, license_plate: str, garage_name: str) -> ParkingStay:
        # Garage first so a bad name does not register the vehicle
        garage = Garage(garage_name.strip() if garage_name else garage_name)
        vehicle = self.register_vehicle(license_plate)

        try:
            stay = vehicle.enter_garage(garage)
        except ParkingError as e:
            logger.warning(f"Entry refused for {vehicle.license_plate}: {e}")
            raise

        logger.info(f"Vehicle {vehicle.license_plate} entered {garage.name}")
        return stay

    def register_vehicle_exit(self, license_plate: str) -> ParkingStay:
        vehicle = self.get_vehicle(license_plate)

        try:
            stay = vehicle.exit_garage()
        except ParkingError as e:
            logger.warning(f"Exit refused for {vehicle.license_plate}: {e}")
            raise

        logger.info(f"Vehicle {vehicle.license_plate} left {stay.garage.name}")
        return stay

    def get_visited_garages(self, license_plate: str) -> Set[Garage]:
        return self.get_vehicle(license_plate).visited_garages()

    def get_stay_report(self, license_plate: str) -> List[str]:
        return render_stays(self.get_vehicle(license_plate).stays)

    def get_parked_vehicles(self) -> List[Vehicle]:
        return [vehicle for vehicle in self.vehicle_repo.get_all() if vehicle.is_parked()]
