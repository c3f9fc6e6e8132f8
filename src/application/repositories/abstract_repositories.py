from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Vehicle


class AbstractVehicleRepository(ABC):
    @abstractmethod
    def get_by_license_plate(self, license_plate: str) -> Optional[Vehicle]:
        pass

    @abstractmethod
    def add(self, vehicle: Vehicle) -> Vehicle:
        pass

    @abstractmethod
    def get_all(self) -> List[Vehicle]:
        pass
