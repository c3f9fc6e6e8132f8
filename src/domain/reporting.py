"""Grouped report of a vehicle's stay history."""
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, TextIO

if TYPE_CHECKING:
    from src.domain.entities import Garage, ParkingStay


def group_stays_by_garage(stays: Iterable["ParkingStay"]) -> Dict["Garage", List["ParkingStay"]]:
    """Group stays per garage.

    Garages come out in the order they first appear in ``stays`` and each
    group keeps the order of the input, so a chronological history gives
    chronological groups.
    """
    groups: Dict["Garage", List["ParkingStay"]] = {}
    for stay in stays:
        groups.setdefault(stay.visited_garage(), []).append(stay)
    return groups


def render_stays(stays: Iterable["ParkingStay"]) -> List[str]:
    lines = []
    for garage, garage_stays in group_stays_by_garage(stays).items():
        lines.append(f"Garage(name={garage.name}):")
        for stay in garage_stays:
            lines.append(f"\t{stay}")
    return lines


def print_stays(stays: Iterable["ParkingStay"], out: Optional[TextIO] = None) -> None:
    # file=None resolves sys.stdout at call time
    for line in render_stays(stays):
        print(line, file=out)
