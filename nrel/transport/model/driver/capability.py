from __future__ import annotations

from typing import FrozenSet, Tuple

from nrel.transport.model.driver.driver_kind import DriverKind
from nrel.transport.model.vehicle.vehicle_kind import VehicleKind

# every (driver kind, vehicle kind) pair that is licensed to operate. no cross-kind entries.
CAPABILITIES: FrozenSet[Tuple[DriverKind, VehicleKind]] = frozenset(
    [
        (DriverKind.TAXI_DRIVER, VehicleKind.TAXI),
        (DriverKind.BUS_DRIVER, VehicleKind.BUS),
    ]
)


def can_operate(driver_kind: DriverKind, vehicle_kind: VehicleKind) -> bool:
    """
    tests the capability table for a driver kind / vehicle kind pair

    :param driver_kind: the kind of driver
    :param vehicle_kind: the kind of vehicle
    :return: true if this driver kind is licensed for this vehicle kind
    """
    return (driver_kind, vehicle_kind) in CAPABILITIES
