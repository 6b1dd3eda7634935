from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from nrel.transport.model.driver.driver_kind import DriverKind
from nrel.transport.model.vehicle.vehicle_kind import VehicleKind
from nrel.transport.util.exception import EntityError
from nrel.transport.util.typealiases import VehicleId, ModelName, PassengerName


@dataclass(frozen=True)
class Vehicle:
    """
    Tuple that represents a vehicle in the fleet.


    :param id: A unique vehicle id, assigned when the vehicle joins the fleet.
    :param model: The model name. Not unique, vehicles may share a model name.
    :param kind: The kind of vehicle.
    :param capacity: The maximum number of passengers on board.
    :param passengers: The passengers on board, in boarding order.
    :param driver_kind: The registry slot of the bound driver, if any.
    :param ready: Whether the last readiness check found the vehicle ready to depart.
    """

    id: VehicleId
    model: ModelName
    kind: VehicleKind
    capacity: int

    passengers: Tuple[PassengerName, ...] = ()
    driver_kind: Optional[DriverKind] = None
    ready: bool = False

    @classmethod
    def build(
        cls, vehicle_id: VehicleId, model: ModelName, kind: VehicleKind, capacity: int
    ) -> Vehicle:
        """
        creates an empty vehicle with no driver

        :param vehicle_id: the id of the vehicle
        :param model: the model name
        :param kind: the kind of vehicle
        :param capacity: the passenger limit
        :return: a Vehicle
        :raises: EntityError if the capacity is not positive
        """
        if capacity <= 0:
            raise EntityError(f"vehicle {vehicle_id} must have a positive capacity, found {capacity}")
        return Vehicle(id=vehicle_id, model=model, kind=kind, capacity=capacity)

    @property
    def has_driver(self) -> bool:
        return self.driver_kind is not None

    @property
    def passenger_count(self) -> int:
        return len(self.passengers)

    @property
    def is_full(self) -> bool:
        return len(self.passengers) >= self.capacity

    def __repr__(self) -> str:
        return f"Vehicle({self.id},{self.model},{len(self.passengers)}/{self.capacity})"

    def bind_driver(self, driver_kind: DriverKind) -> Vehicle:
        """
        binds a driver to this vehicle. should only be used by the fleet state ops

        :param driver_kind: the registry slot of the driver
        :return: the updated Vehicle
        """
        return replace(self, driver_kind=driver_kind)

    def unbind_driver(self) -> Vehicle:
        """
        clears the bound driver and the readiness flag

        :return: the updated Vehicle
        """
        return replace(self, driver_kind=None, ready=False)

    def board_passenger(self, passenger: PassengerName) -> Vehicle:
        """
        appends a passenger. capacity is enforced by the fleet state ops

        :param passenger: the passenger's name
        :return: the updated Vehicle
        """
        return replace(self, passengers=self.passengers + (passenger,))

    def set_ready(self, ready: bool) -> Vehicle:
        return replace(self, ready=ready)
