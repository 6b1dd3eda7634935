from nrel.transport.util.exception import FleetStateError, EntityError
from nrel.transport.util.typealiases import (
    VehicleId,
    ModelName,
    PassengerName,
    DriverName,
    LicenseCategory,
    DriverId,
)
