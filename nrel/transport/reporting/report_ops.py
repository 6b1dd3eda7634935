from __future__ import annotations

from typing import TYPE_CHECKING

from nrel.transport.reporting.report_type import ReportType
from nrel.transport.reporting.reporter import Report

if TYPE_CHECKING:
    from nrel.transport.model.driver.driver import Driver
    from nrel.transport.model.vehicle.vehicle import Vehicle
    from nrel.transport.state.outcomes import (
        AssignmentOutcome,
        BoardingOutcome,
        DepartureOutcome,
        ReadinessOutcome,
    )
    from nrel.transport.util.typealiases import DriverName, LicenseCategory


def driver_request_report(
    driver: Driver,
    requested_name: DriverName,
    requested_license_category: LicenseCategory,
    created: bool,
) -> Report:
    """
    reports a driver lookup against the registry

    :param driver: the driver returned by the registry
    :param requested_name: the name passed to the lookup
    :param requested_license_category: the license category passed to the lookup
    :param created: true if this lookup registered the driver
    :return: the report
    """
    report_data = {
        "driver_kind": driver.kind.name.lower(),
        "driver_name": driver.name,
        "license_category": driver.license_category,
        "requested_name": requested_name,
        "requested_license_category": requested_license_category,
        "created": created,
    }
    return Report(ReportType.DRIVER_REQUEST_EVENT, report_data)


def vehicle_created_report(vehicle: Vehicle) -> Report:
    report_data = {
        "vehicle_id": vehicle.id,
        "model": vehicle.model,
        "vehicle_kind": vehicle.kind.name.lower(),
        "capacity": vehicle.capacity,
    }
    return Report(ReportType.VEHICLE_CREATED_EVENT, report_data)


def assignment_report(outcome: AssignmentOutcome) -> Report:
    report_data = {
        "vehicle_id": outcome.vehicle_id,
        "model": outcome.model,
        "driver_name": outcome.driver_name,
        "current_driver_name": outcome.current_driver_name,
        "success": outcome.success,
        "reason": outcome.reason.name.lower(),
    }
    return Report(ReportType.DRIVER_ASSIGNMENT_EVENT, report_data)


def boarding_report(outcome: BoardingOutcome) -> Report:
    report_data = {
        "vehicle_id": outcome.vehicle_id,
        "model": outcome.model,
        "passenger": outcome.passenger,
        "passenger_count": outcome.passenger_count,
        "capacity": outcome.capacity,
        "success": outcome.success,
        "reason": outcome.reason.name.lower(),
    }
    return Report(ReportType.PASSENGER_BOARDING_EVENT, report_data)


def readiness_report(outcome: ReadinessOutcome) -> Report:
    report_data = {
        "vehicle_id": outcome.vehicle_id,
        "model": outcome.model,
        "driver_name": outcome.driver_name,
        "passenger_count": outcome.passenger_count,
        "capacity": outcome.capacity,
        "success": outcome.ready,
        "reason": outcome.reason.name.lower(),
    }
    return Report(ReportType.READINESS_CHECK_EVENT, report_data)


def departure_report(outcome: DepartureOutcome) -> Report:
    report_data = {
        "vehicle_id": outcome.vehicle_id,
        "model": outcome.model,
        "released_driver_name": outcome.released_driver_name,
        "success": outcome.success,
        "reason": outcome.reason.name.lower(),
    }
    return Report(ReportType.DEPARTURE_EVENT, report_data)
