from pydantic import BaseModel, Field, field_validator, ConfigDict
from datetime import datetime, timezone
from typing import Optional, List
from src.domain.common import StayStatus, VehicleState


class GarageResponse(BaseModel):
    name: str

    model_config = ConfigDict(from_attributes=True)


class VehicleEntry(BaseModel):
    license_plate: str = Field(..., min_length=1, max_length=20)
    garage_name: str = Field(..., min_length=1, max_length=100)

    @field_validator('license_plate')
    def validate_license_plate(cls, v):  # pylint: disable=no-self-argument
        return v.upper().strip()

    @field_validator('garage_name')
    def validate_garage_name(cls, v):  # pylint: disable=no-self-argument
        return v.strip()


class VehicleExit(BaseModel):
    license_plate: str = Field(..., min_length=1, max_length=20)

    @field_validator('license_plate')
    def validate_license_plate(cls, v):  # pylint: disable=no-self-argument
        return v.upper().strip()


class ParkingStayResponse(BaseModel):
    garage: GarageResponse
    entry_time: datetime
    exit_time: Optional[datetime] = None
    status: StayStatus

    @field_validator('entry_time', 'exit_time')
    @classmethod
    def make_datetime_aware(cls, dt: datetime) -> datetime:
        if dt is None:
            return dt
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt

    model_config = ConfigDict(from_attributes=True)


class VehicleResponse(BaseModel):
    license_plate: str
    state: VehicleState
    current_garage: Optional[GarageResponse] = None
    stays: List[ParkingStayResponse]

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_vehicle(cls, vehicle) -> "VehicleResponse":
        # current_garage is a method on the entity, not an attribute
        return cls.model_validate(
            {
                "license_plate": vehicle.license_plate,
                "state": vehicle.state,
                "current_garage": vehicle.current_garage(),
                "stays": vehicle.stays,
            },
            from_attributes=True,
        )


class VisitedGaragesResponse(BaseModel):
    license_plate: str
    garages: List[str]


class StayReportResponse(BaseModel):
    license_plate: str
    lines: List[str]
