from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from typing import List

from src.config.settings_env import settings
from src.application.services.parking_service import ParkingService
from src.domain.exceptions import (
    AlreadyParkedError,
    AlreadyTerminatedError,
    InvalidArgumentError,
    NotParkedError,
    VehicleNotFoundError,
)
from src.infrastructure.persistence.in_memory_repositories import InMemoryVehicleRepository
from src.infrastructure.api.schemas.parking import (
    VehicleEntry, VehicleExit, ParkingStayResponse, VehicleResponse,
    VisitedGaragesResponse, StayReportResponse
)

router = APIRouter(prefix=settings.API_PREFIX, tags=["parking"])

_vehicle_repo = InMemoryVehicleRepository()


def get_parking_service() -> ParkingService:
    return ParkingService(vehicle_repo=_vehicle_repo)


def _to_http_error(e: Exception) -> HTTPException:
    if isinstance(e, VehicleNotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, (AlreadyParkedError, NotParkedError, AlreadyTerminatedError)):
        return HTTPException(status_code=409, detail=str(e))
    if isinstance(e, InvalidArgumentError):
        return HTTPException(status_code=400, detail=str(e))
    logger.exception("Unexpected error in parking router")
    return HTTPException(status_code=500, detail=f"Internal error: {str(e)}")


@router.post("/entry", response_model=ParkingStayResponse)
async def vehicle_entry(
    entry_data: VehicleEntry,
    service: ParkingService = Depends(get_parking_service)
):
    try:
        stay = service.register_vehicle_entry(entry_data.license_plate, entry_data.garage_name)
        return ParkingStayResponse.model_validate(stay)
    except Exception as e:
        raise _to_http_error(e)


@router.post("/exit", response_model=ParkingStayResponse)
async def vehicle_exit(
    exit_data: VehicleExit,
    service: ParkingService = Depends(get_parking_service)
):
    try:
        stay = service.register_vehicle_exit(exit_data.license_plate)
        return ParkingStayResponse.model_validate(stay)
    except Exception as e:
        raise _to_http_error(e)


@router.get("/parked", response_model=List[VehicleResponse])
async def get_parked_vehicles(service: ParkingService = Depends(get_parking_service)):
    try:
        vehicles = service.get_parked_vehicles()
        return [VehicleResponse.from_vehicle(vehicle) for vehicle in vehicles]
    except Exception as e:
        raise _to_http_error(e)


@router.get("/vehicles/{license_plate}", response_model=VehicleResponse)
async def get_vehicle(
    license_plate: str,
    service: ParkingService = Depends(get_parking_service)
):
    try:
        vehicle = service.get_vehicle(license_plate)
        return VehicleResponse.from_vehicle(vehicle)
    except Exception as e:
        raise _to_http_error(e)


@router.get("/vehicles/{license_plate}/garages", response_model=VisitedGaragesResponse)
async def get_visited_garages(
    license_plate: str,
    service: ParkingService = Depends(get_parking_service)
):
    try:
        garages = service.get_visited_garages(license_plate)
        return VisitedGaragesResponse(
            license_plate=license_plate.upper().strip(),
            garages=sorted(garage.name for garage in garages),
        )
    except Exception as e:
        raise _to_http_error(e)


@router.get("/vehicles/{license_plate}/report", response_model=StayReportResponse)
async def get_stay_report(
    license_plate: str,
    service: ParkingService = Depends(get_parking_service)
):
    try:
        lines = service.get_stay_report(license_plate)
        return StayReportResponse(license_plate=license_plate.upper().strip(), lines=lines)
    except Exception as e:
        raise _to_http_error(e)
