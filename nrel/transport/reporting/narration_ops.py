from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from nrel.transport.reporting.report_type import ReportType

if TYPE_CHECKING:
    from nrel.transport.reporting.reporter import Report


def _driver_request(r: dict) -> str:
    kind = r["driver_kind"].replace("_", " ")
    if r["created"]:
        return f"{kind} {r['driver_name']} registered with license {r['license_category']}"
    else:
        return (
            f"{kind} already registered as {r['driver_name']}; "
            f"request for {r['requested_name']} returned the same driver"
        )


def _vehicle_created(r: dict) -> str:
    return f"created {r['vehicle_kind']} {r['model']} ({r['vehicle_id']}) with {r['capacity']} seats"


def _assignment(r: dict) -> str:
    reason = r["reason"]
    if reason == "ok":
        return f"driver {r['driver_name']} assigned to {r['model']}"
    elif reason == "already_has_driver":
        return f"vehicle {r['model']} already has a driver: {r['current_driver_name']}"
    elif reason == "driver_busy":
        return f"driver {r['driver_name']} is already busy"
    else:
        return f"driver {r['driver_name']} cannot operate {r['model']}"


def _boarding(r: dict) -> str:
    if r["success"]:
        return f"passenger {r['passenger']} boarded {r['model']}"
    else:
        return f"vehicle {r['model']} is full! limit: {r['capacity']} passengers"


def _readiness(r: dict) -> str:
    reason = r["reason"]
    if reason == "no_driver":
        return f"vehicle {r['model']} cannot depart: no driver"
    elif reason == "no_passengers":
        return f"vehicle {r['model']} cannot depart: no passengers"
    else:
        return (
            f"vehicle {r['model']} is ready to depart! driver: {r['driver_name']}, "
            f"passengers: {r['passenger_count']}/{r['capacity']}"
        )


def _departure(r: dict) -> str:
    if r["success"]:
        return f"vehicle {r['model']} is departing!"
    else:
        return f"vehicle {r['model']} is not ready to depart!"


_NARRATORS = {
    ReportType.DRIVER_REQUEST_EVENT: _driver_request,
    ReportType.VEHICLE_CREATED_EVENT: _vehicle_created,
    ReportType.DRIVER_ASSIGNMENT_EVENT: _assignment,
    ReportType.PASSENGER_BOARDING_EVENT: _boarding,
    ReportType.READINESS_CHECK_EVENT: _readiness,
    ReportType.DEPARTURE_EVENT: _departure,
}


def narrate(report: Report) -> Optional[str]:
    """
    renders a report as a line of console narration

    :param report: the report to render
    :return: the narration, or None if this report type is not narrated
    """
    narrator = _NARRATORS.get(report.report_type)
    if narrator is None:
        return None
    return narrator(report.report)
