from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple, TYPE_CHECKING

from nrel.transport.model.vehicle.vehicle import Vehicle

if TYPE_CHECKING:
    from nrel.transport.config.fleet_config import FleetConfig
    from nrel.transport.model.driver.driver import Driver
    from nrel.transport.model.driver.driver_kind import DriverKind
    from nrel.transport.model.driver.driver_registry import DriverRegistry
    from nrel.transport.model.vehicle.vehicle_kind import VehicleKind
    from nrel.transport.util.typealiases import VehicleId, ModelName, DriverName, LicenseCategory


class TransportFactory(ABC):
    """
    creates the vehicles of one kind, and looks up the drivers who operate them
    """

    def __init__(self, fleet_config: FleetConfig):
        self.fleet_config = fleet_config

    @property
    @abstractmethod
    def vehicle_kind(self) -> VehicleKind:
        """
        the kind of vehicle this factory creates
        """

    @property
    @abstractmethod
    def driver_kind(self) -> DriverKind:
        """
        the kind of driver this factory looks up
        """

    def create_vehicle(self, vehicle_id: VehicleId, model: ModelName) -> Vehicle:
        """
        creates an empty vehicle with the configured capacity for this factory's kind.
        the model is not validated and does not need to be unique.

        :param vehicle_id: the id for the new vehicle
        :param model: the model name
        :return: the new vehicle
        """
        capacity = self.fleet_config.capacity_of(self.vehicle_kind)
        return Vehicle.build(vehicle_id, model, self.vehicle_kind, capacity)

    def create_driver(
        self,
        registry: DriverRegistry,
        name: DriverName,
        license_category: LicenseCategory,
    ) -> Tuple[Driver, DriverRegistry]:
        """
        looks up this factory's kind of driver. only the first request for the kind
        registers a driver; later requests return it and ignore the name and license.

        :param registry: the driver registry
        :param name: the driver's name
        :param license_category: the driver's license category
        :return: the driver and the (possibly) updated registry
        """
        return registry.get_or_create(self.driver_kind, name, license_category)
