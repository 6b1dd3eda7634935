from __future__ import annotations

from typing import NamedTuple, Optional, Tuple

import immutables

from nrel.transport.model.driver.driver_registry import DriverRegistry
from nrel.transport.model.vehicle.departure_policy import DeparturePolicy
from nrel.transport.model.vehicle.vehicle import Vehicle
from nrel.transport.model.driver.driver import Driver
from nrel.transport.util.typealiases import DriverId, VehicleId


class FleetState(NamedTuple):
    """
    the complete state of the fleet: the driver registry and every vehicle created so far.
    operations on the fleet live in fleet_state_ops and return a new FleetState.
    """

    departure_policy: DeparturePolicy = DeparturePolicy.RETAIN_DRIVER
    registry: DriverRegistry = DriverRegistry()
    vehicles: immutables.Map[VehicleId, Vehicle] = immutables.Map()

    @classmethod
    def build(cls, departure_policy: DeparturePolicy = DeparturePolicy.RETAIN_DRIVER) -> FleetState:
        return FleetState(departure_policy=departure_policy)

    def next_vehicle_id(self) -> VehicleId:
        return f"v{len(self.vehicles)}"

    def get_vehicles(self) -> Tuple[Vehicle, ...]:
        """
        returns every vehicle in the fleet, ordered by vehicle id (v2 before v10)

        :return: tuple of vehicles
        """
        ids = sorted(self.vehicles.keys(), key=lambda vid: (len(vid), vid))
        return tuple(self.vehicles[vid] for vid in ids)

    def get_drivers(self) -> Tuple[Driver, ...]:
        return self.registry.drivers

    def get_driver(self, driver_id: DriverId) -> Optional[Driver]:
        """
        resolves the current state of a registered driver

        :param driver_id: the driver's id
        :return: the driver as currently held by the registry, or None
        """
        return self.registry.get(driver_id)

    def driver_of(self, vehicle: Vehicle) -> Optional[Driver]:
        """
        resolves the driver bound to a vehicle

        :param vehicle: the vehicle
        :return: the bound driver, or None
        """
        if vehicle.driver_kind is None:
            return None
        return self.registry.get(vehicle.driver_kind)
