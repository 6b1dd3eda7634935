from __future__ import annotations

from typing import TYPE_CHECKING

from nrel.transport.factory.bus_factory import BusFactory
from nrel.transport.factory.taxi_factory import TaxiFactory
from nrel.transport.factory.transport_factory import TransportFactory
from nrel.transport.model.vehicle.vehicle_kind import VehicleKind

if TYPE_CHECKING:
    from nrel.transport.config.fleet_config import FleetConfig


def factory_for(kind: VehicleKind, fleet_config: FleetConfig) -> TransportFactory:
    """
    picks the factory that builds a vehicle kind

    :param kind: the kind of vehicle
    :param fleet_config: the fleet configuration with vehicle capacities
    :return: the factory for this kind
    """
    if kind == VehicleKind.TAXI:
        return TaxiFactory(fleet_config)
    elif kind == VehicleKind.BUS:
        return BusFactory(fleet_config)
    else:
        raise NameError(f"no factory for vehicle kind {kind}")
