from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional

from nrel.transport.util.typealiases import VehicleId, ModelName, DriverName


class AssignmentReason(Enum):
    OK = 0
    ALREADY_HAS_DRIVER = 1
    DRIVER_BUSY = 2
    DRIVER_INCAPABLE = 3


class BoardingReason(Enum):
    OK = 0
    FULL = 1


class ReadinessReason(Enum):
    OK = 0
    NO_DRIVER = 1
    NO_PASSENGERS = 2


class DepartureReason(Enum):
    OK = 0
    NOT_READY = 1
    NO_DRIVER = 2


class AssignmentOutcome(NamedTuple):
    """
    the result of requesting that a driver be bound to a vehicle

    :param success: true if the driver was bound
    :param reason: why the request was declined, or OK
    :param vehicle_id: the vehicle in question
    :param model: the vehicle's model name
    :param driver_name: the name of the requested driver
    :param current_driver_name: the name of the driver already on the vehicle, if any
    """

    success: bool
    reason: AssignmentReason
    vehicle_id: VehicleId
    model: ModelName
    driver_name: DriverName
    current_driver_name: Optional[DriverName] = None


class BoardingOutcome(NamedTuple):
    success: bool
    reason: BoardingReason
    vehicle_id: VehicleId
    model: ModelName
    passenger: str
    passenger_count: int
    capacity: int


class ReadinessOutcome(NamedTuple):
    ready: bool
    reason: ReadinessReason
    vehicle_id: VehicleId
    model: ModelName
    passenger_count: int
    capacity: int
    driver_name: Optional[DriverName] = None


class DepartureOutcome(NamedTuple):
    success: bool
    reason: DepartureReason
    vehicle_id: VehicleId
    model: ModelName
    released_driver_name: Optional[DriverName] = None
