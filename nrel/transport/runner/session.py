from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from nrel.transport.factory.factory_ops import factory_for
from nrel.transport.model.vehicle.vehicle_kind import VehicleKind
from nrel.transport.reporting import report_ops
from nrel.transport.state import fleet_state_ops

if TYPE_CHECKING:
    from nrel.transport.factory.transport_factory import TransportFactory
    from nrel.transport.model.driver.driver import Driver
    from nrel.transport.model.vehicle.vehicle import Vehicle
    from nrel.transport.reporting.reporter import Report
    from nrel.transport.runner.environment import Environment
    from nrel.transport.state.fleet_state import FleetState
    from nrel.transport.state.outcomes import (
        AssignmentOutcome,
        BoardingOutcome,
        DepartureOutcome,
        ReadinessOutcome,
    )
    from nrel.transport.util.typealiases import (
        VehicleId,
        ModelName,
        DriverName,
        LicenseCategory,
        PassengerName,
    )

log = logging.getLogger(__name__)


class Session:
    """
    the caller-facing side of the dispatch core. holds the current FleetState,
    applies fleet_state_ops to it and files a report for every outcome.
    """

    def __init__(self, fleet: FleetState, env: Environment):
        self.fleet = fleet
        self.env = env

    def factory(self, kind: VehicleKind) -> TransportFactory:
        return factory_for(kind, self.env.config.fleet)

    @property
    def taxi_factory(self) -> TransportFactory:
        return self.factory(VehicleKind.TAXI)

    @property
    def bus_factory(self) -> TransportFactory:
        return self.factory(VehicleKind.BUS)

    def _report(self, report: Report):
        self.env.reporter.file_report(report)
        self.env.reporter.flush(self.fleet)

    def vehicle(self, vehicle_id: VehicleId) -> Optional[Vehicle]:
        return self.fleet.vehicles.get(vehicle_id)

    def driver(self, driver: Driver) -> Optional[Driver]:
        """
        the current state of a driver, as held by the registry. Drivers returned
        by create_driver are snapshots; compare them by id, not by identity.
        """
        return self.fleet.get_driver(driver.id)

    def create_vehicle(self, factory: TransportFactory, model: ModelName) -> Vehicle:
        vehicle, self.fleet = fleet_state_ops.create_vehicle(self.fleet, factory, model)
        self._report(report_ops.vehicle_created_report(vehicle))
        return vehicle

    def create_driver(
        self,
        factory: TransportFactory,
        name: DriverName,
        license_category: LicenseCategory,
    ) -> Driver:
        """
        looks up the factory's kind of driver, registering it on the first request.
        returns the registry's current state of the driver, so a later lookup
        reflects assignments and departures made since.
        """
        created = factory.driver_kind not in self.fleet.registry
        driver, self.fleet = fleet_state_ops.request_driver(self.fleet, factory, name, license_category)
        self._report(report_ops.driver_request_report(driver, name, license_category, created))
        return driver

    def assign_driver(self, vehicle_id: VehicleId, driver: Driver) -> AssignmentOutcome:
        outcome, self.fleet = fleet_state_ops.assign_driver(self.fleet, vehicle_id, driver)
        self._report(report_ops.assignment_report(outcome))
        return outcome

    def add_passenger(self, vehicle_id: VehicleId, passenger: PassengerName) -> BoardingOutcome:
        outcome, self.fleet = fleet_state_ops.add_passenger(self.fleet, vehicle_id, passenger)
        self._report(report_ops.boarding_report(outcome))
        return outcome

    def check_readiness(self, vehicle_id: VehicleId) -> ReadinessOutcome:
        outcome, self.fleet = fleet_state_ops.check_readiness(self.fleet, vehicle_id)
        self._report(report_ops.readiness_report(outcome))
        return outcome

    def depart(self, vehicle_id: VehicleId) -> DepartureOutcome:
        outcome, self.fleet = fleet_state_ops.depart(self.fleet, vehicle_id)
        self._report(report_ops.departure_report(outcome))
        return outcome

    def close(self):
        """
        closes every report handler, and writes the config when outputs are on
        """
        self.env.reporter.close(self.fleet)
        if self.env.config.global_config.write_outputs:
            self.env.config.to_yaml()
            log.info(f"outputs written to {self.env.config.scenario_output_directory}")
