from typing import Dict, Optional, Tuple

import immutables

from nrel.transport.config import TransportConfig
from nrel.transport.config.fleet_config import FleetConfig
from nrel.transport.factory.bus_factory import BusFactory
from nrel.transport.factory.taxi_factory import TaxiFactory
from nrel.transport.model.driver.driver import Driver
from nrel.transport.model.driver.driver_kind import DriverKind
from nrel.transport.model.driver.driver_registry import DriverRegistry
from nrel.transport.model.vehicle.departure_policy import DeparturePolicy
from nrel.transport.model.vehicle.vehicle import Vehicle
from nrel.transport.model.vehicle.vehicle_kind import VehicleKind
from nrel.transport.reporting.reporter import Reporter
from nrel.transport.runner.environment import Environment
from nrel.transport.runner.session import Session
from nrel.transport.state.fleet_state import FleetState
from nrel.transport.util.typealiases import VehicleId, PassengerName


class DefaultIds:
    @classmethod
    def mock_vehicle_id(cls) -> VehicleId:
        return "v0"

    @classmethod
    def mock_taxi_driver_name(cls) -> str:
        return "taxi_driver_0"

    @classmethod
    def mock_bus_driver_name(cls) -> str:
        return "bus_driver_0"


def mock_fleet_config(
    taxi_capacity: int = 4,
    bus_capacity: int = 30,
    departure_policy: str = "retain_driver",
) -> FleetConfig:
    return FleetConfig.build(
        {
            "taxi_capacity": taxi_capacity,
            "bus_capacity": bus_capacity,
            "departure_policy": departure_policy,
        }
    )


def mock_config(
    sim_name: str = "test_sim",
    departure_policy: str = "retain_driver",
    config: Optional[Dict] = None,
) -> TransportConfig:
    overrides = {
        "global": {
            "narrate": False,
            "log_events": False,
            "log_stats": False,
            "write_outputs": False,
        },
        "sim": {"sim_name": sim_name},
        "fleet": {"departure_policy": departure_policy},
    }
    if config is not None:
        for section, values in config.items():
            overrides.setdefault(section, {}).update(values)
    return TransportConfig.build(config=overrides, output_suffix="test")


def mock_taxi_driver(name: str = DefaultIds.mock_taxi_driver_name(), busy: bool = False) -> Driver:
    return Driver(name=name, license_category="B", kind=DriverKind.TAXI_DRIVER, busy=busy)


def mock_bus_driver(name: str = DefaultIds.mock_bus_driver_name(), busy: bool = False) -> Driver:
    return Driver(name=name, license_category="D", kind=DriverKind.BUS_DRIVER, busy=busy)


def mock_registry(drivers: Tuple[Driver, ...] = ()) -> DriverRegistry:
    return DriverRegistry(immutables.Map({d.kind: d for d in drivers}))


def mock_taxi(
    vehicle_id: VehicleId = DefaultIds.mock_vehicle_id(),
    model: str = "Такси-001",
    capacity: int = 4,
    passengers: Tuple[PassengerName, ...] = (),
    driver_kind: Optional[DriverKind] = None,
    ready: bool = False,
) -> Vehicle:
    return Vehicle(
        id=vehicle_id,
        model=model,
        kind=VehicleKind.TAXI,
        capacity=capacity,
        passengers=passengers,
        driver_kind=driver_kind,
        ready=ready,
    )


def mock_bus(
    vehicle_id: VehicleId = "v1",
    model: str = "Автобус-101",
    capacity: int = 30,
    passengers: Tuple[PassengerName, ...] = (),
    driver_kind: Optional[DriverKind] = None,
    ready: bool = False,
) -> Vehicle:
    return Vehicle(
        id=vehicle_id,
        model=model,
        kind=VehicleKind.BUS,
        capacity=capacity,
        passengers=passengers,
        driver_kind=driver_kind,
        ready=ready,
    )


def mock_fleet(
    vehicles: Tuple[Vehicle, ...] = (),
    drivers: Tuple[Driver, ...] = (),
    departure_policy: DeparturePolicy = DeparturePolicy.RETAIN_DRIVER,
) -> FleetState:
    return FleetState(
        departure_policy=departure_policy,
        registry=mock_registry(drivers),
        vehicles=immutables.Map({v.id: v for v in vehicles}),
    )


def mock_taxi_factory(fleet_config: Optional[FleetConfig] = None) -> TaxiFactory:
    return TaxiFactory(fleet_config if fleet_config else mock_fleet_config())


def mock_bus_factory(fleet_config: Optional[FleetConfig] = None) -> BusFactory:
    return BusFactory(fleet_config if fleet_config else mock_fleet_config())


def mock_reporter() -> Reporter:
    return Reporter()


def mock_env(config: Optional[TransportConfig] = None, reporter: Optional[Reporter] = None) -> Environment:
    return Environment(
        config=config if config else mock_config(),
        reporter=reporter if reporter else mock_reporter(),
    )


def mock_session(
    departure_policy: str = "retain_driver",
    reporter: Optional[Reporter] = None,
) -> Session:
    config = mock_config(departure_policy=departure_policy)
    env = mock_env(config, reporter)
    return Session(FleetState.build(config.fleet.departure_policy), env)
