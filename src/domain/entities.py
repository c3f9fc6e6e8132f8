from datetime import datetime
from typing import Optional, Set, Tuple, TextIO

from src.domain.common import StayStatus, VehicleState, format_day, utc_now
from src.domain.exceptions import (
    AlreadyParkedError,
    AlreadyTerminatedError,
    InvalidArgumentError,
    NotParkedError,
)
from src.domain.reporting import print_stays as print_stay_report


class Garage:
    def __init__(self, name: str):
        if name is None or not name.strip():
            raise InvalidArgumentError("A garage needs a name")
        self.name = name

    def __eq__(self, other):
        if not isinstance(other, Garage):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return f"Garage(name={self.name})"


class ParkingStay:
    """One visit of a vehicle to a garage.

    The entry time is fixed at creation. The exit time stays unset while the
    vehicle is inside and is written exactly once by ``terminate``.
    """

    def __init__(self, vehicle: "Vehicle", garage: Garage, entry_time: Optional[datetime] = None):
        if vehicle is None:
            raise InvalidArgumentError("A parking stay needs a vehicle")
        if garage is None:
            raise InvalidArgumentError("A parking stay needs a garage")
        self.vehicle = vehicle
        self.garage = garage
        self._entry_time = entry_time if entry_time is not None else utc_now()
        self._exit_time: Optional[datetime] = None

    @property
    def entry_time(self) -> datetime:
        return self._entry_time

    @property
    def exit_time(self) -> Optional[datetime]:
        return self._exit_time

    @property
    def status(self) -> StayStatus:
        return StayStatus.ONGOING if self.is_ongoing() else StayStatus.TERMINATED

    def terminate(self) -> None:
        if self._exit_time is not None:
            raise AlreadyTerminatedError(
                f"Stay at {self.garage.name} already ended on {format_day(self._exit_time)}"
            )
        self._exit_time = utc_now()

    def is_ongoing(self) -> bool:
        return self._exit_time is None

    def visited_garage(self) -> Garage:
        return self.garage

    def __str__(self):
        if self.is_ongoing():
            return f"entry={format_day(self._entry_time)}, ongoing"
        return f"entry={format_day(self._entry_time)}, exit={format_day(self._exit_time)}"

    def __repr__(self):
        return f"ParkingStay(garage={self.garage.name}, {self})"


class Vehicle:
    """A vehicle and the chronological history of its stays in garages.

    The history is append-only. ``current_stay`` points at the open stay, if
    any, and is always the last element of the history.
    """

    def __init__(self, license_plate: str):
        if license_plate is None or not license_plate.strip():
            raise InvalidArgumentError("A vehicle needs a license plate")
        self._license_plate = license_plate
        self._stays = []
        self._current_stay: Optional[ParkingStay] = None

    @property
    def license_plate(self) -> str:
        return self._license_plate

    @property
    def current_stay(self) -> Optional[ParkingStay]:
        return self._current_stay

    @property
    def stays(self) -> Tuple[ParkingStay, ...]:
        return tuple(self._stays)

    @property
    def state(self) -> VehicleState:
        return VehicleState.PARKED if self.is_parked() else VehicleState.FREE

    def enter_garage(self, garage: Garage) -> ParkingStay:
        """Start a new stay in ``garage``.

        Raises:
            AlreadyParkedError: the vehicle is already inside a garage.
        """
        if self.is_parked():
            raise AlreadyParkedError(
                f"Vehicle {self._license_plate} is already in {self._current_stay.garage.name}"
            )
        stay = ParkingStay(self, garage)
        self._stays.append(stay)
        self._current_stay = stay
        return stay

    def exit_garage(self) -> ParkingStay:
        """End the ongoing stay.

        Raises:
            NotParkedError: the vehicle is not inside a garage.
        """
        if not self.is_parked():
            raise NotParkedError(f"Vehicle {self._license_plate} is not in a garage")
        stay = self._current_stay
        stay.terminate()
        self._current_stay = None
        return stay

    def is_parked(self) -> bool:
        return self._current_stay is not None and self._current_stay.is_ongoing()

    def current_garage(self) -> Optional[Garage]:
        return self._current_stay.garage if self.is_parked() else None

    def visited_garages(self) -> Set[Garage]:
        return {stay.visited_garage() for stay in self._stays}

    def print_stays(self, out: Optional[TextIO] = None) -> None:
        """Write the grouped stay report to ``out``, the current stdout when omitted."""
        print_stay_report(self._stays, out)

    def __repr__(self):
        return f"Vehicle(license_plate={self._license_plate})"
