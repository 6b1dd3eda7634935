from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from nrel.transport.model.driver.capability import can_operate
from nrel.transport.model.driver.driver_kind import DriverKind
from nrel.transport.util.typealiases import DriverId, DriverName, LicenseCategory

if TYPE_CHECKING:
    from nrel.transport.model.vehicle.vehicle import Vehicle


@dataclass(frozen=True)
class Driver:
    """
    a driver in the fleet. drivers are created by the DriverRegistry, one per kind.

    a Driver is a value: assigning or releasing a driver stores an updated copy
    in the registry, so a Driver held by a caller is a snapshot of the moment it
    was looked up. the driver's identity is its id, which is stable for the life
    of the registry. resolve the current state with FleetState.get_driver(driver.id).

    :param name: the driver's name
    :param license_category: the driver's license category, such as "B" or "D"
    :param kind: the kind of driver, fixed at creation
    :param busy: true while the driver is bound to a vehicle
    """

    name: DriverName
    license_category: LicenseCategory
    kind: DriverKind
    busy: bool = False

    @classmethod
    def build(cls, name: DriverName, license_category: LicenseCategory, kind: DriverKind) -> Driver:
        return Driver(name=name, license_category=license_category, kind=kind, busy=False)

    @property
    def id(self) -> DriverId:
        return self.kind

    def can_drive(self, vehicle: Vehicle) -> bool:
        """
        checks whether this driver's kind is licensed for the vehicle's kind

        :param vehicle: the vehicle to operate
        :return: true if this driver can operate the vehicle
        """
        return can_operate(self.kind, vehicle.kind)

    def set_busy(self, busy: bool) -> Driver:
        """
        toggles the busy flag. should only be used by the fleet state ops

        :param busy: the new value
        :return: the updated Driver
        """
        return replace(self, busy=busy)

    def __repr__(self) -> str:
        return f"Driver({self.kind.name.lower()},{self.name},{'busy' if self.busy else 'available'})"
