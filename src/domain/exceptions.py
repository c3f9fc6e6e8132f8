class ParkingError(ValueError):
    """Base class for every precondition violation raised by the parking domain."""


class InvalidArgumentError(ParkingError):
    pass


class AlreadyParkedError(ParkingError):
    pass


class NotParkedError(ParkingError):
    pass


class AlreadyTerminatedError(ParkingError):
    pass


class VehicleNotFoundError(ParkingError):
    pass
