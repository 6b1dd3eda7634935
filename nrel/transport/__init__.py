__doc__ = r"""
**nrel.transport** is a small fleet dispatch core: taxis and buses are built by
factories, drivers are looked up from a per-kind registry, drivers are assigned
to vehicles, passengers board up to capacity and vehicles depart once ready.

every operation returns a structured outcome and a new FleetState. console
narration, event logs and summary stats are produced by reporting handlers.
"""

import logging

from rich.logging import RichHandler

from nrel.transport.config import TransportConfig
from nrel.transport.model.driver.driver import Driver
from nrel.transport.model.driver.driver_kind import DriverKind
from nrel.transport.model.driver.driver_registry import DriverRegistry
from nrel.transport.model.vehicle.departure_policy import DeparturePolicy
from nrel.transport.model.vehicle.vehicle import Vehicle
from nrel.transport.model.vehicle.vehicle_kind import VehicleKind
from nrel.transport.factory import TransportFactory, TaxiFactory, BusFactory
from nrel.transport.state.fleet_state import FleetState
from nrel.transport.state import fleet_state_ops
from nrel.transport.runner import Environment, Session



FORMAT = "%(message)s"
rich_handler = RichHandler(markup=True, rich_tracebacks=True, show_time=False, show_path=False)
logging.basicConfig(
    level=logging.INFO,
    format=FORMAT,
    handlers=[rich_handler],
)
