from .abstract_repositories import AbstractVehicleRepository

__all__ = [
    "AbstractVehicleRepository",
]
