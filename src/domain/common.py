from datetime import datetime, timezone
from enum import Enum


DATE_FORMAT = "%d/%m/%Y"


class StayStatus(str, Enum):
    ONGOING = "ongoing"
    TERMINATED = "terminated"


class VehicleState(str, Enum):
    FREE = "free"
    PARKED = "parked"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_day(value: datetime) -> str:
    """Render a timestamp at day granularity, independent of the locale."""
    return value.strftime(DATE_FORMAT)
