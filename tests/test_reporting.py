import json
import logging
import tempfile
from pathlib import Path
from typing import List
from unittest import TestCase

from nrel.transport.model.driver.driver_kind import DriverKind
from nrel.transport.reporting import narration_ops, report_ops
from nrel.transport.reporting.handler.eventful_handler import EventfulHandler
from nrel.transport.reporting.handler.handler import Handler
from nrel.transport.reporting.handler.narration_handler import NarrationHandler
from nrel.transport.reporting.handler.stats_handler import StatsHandler
from nrel.transport.reporting.report_type import ReportType
from nrel.transport.reporting.reporter import Report, Reporter
from nrel.transport.resources.mock_lobster import (
    mock_bus,
    mock_fleet,
    mock_taxi,
    mock_taxi_driver,
)
from nrel.transport.state import fleet_state_ops


class CollectingHandler(Handler):
    def __init__(self):
        self.handled: List[Report] = []
        self.closed = False

    def handle(self, reports, fleet):
        self.handled.extend(reports)

    def close(self, fleet):
        self.closed = True


def _assigned_fleet():
    fleet = mock_fleet(vehicles=(mock_taxi(), mock_bus()), drivers=(mock_taxi_driver(),))
    outcome, fleet = fleet_state_ops.assign_driver(fleet, "v0", mock_taxi_driver())
    return outcome, fleet


class TestReportOps(TestCase):
    def test_assignment_report(self):
        outcome, _ = _assigned_fleet()
        report = report_ops.assignment_report(outcome)

        self.assertEqual(report.report_type, ReportType.DRIVER_ASSIGNMENT_EVENT)
        self.assertTrue(report.report["success"])
        self.assertEqual(report.report["reason"], "ok")
        self.assertEqual(report.report["model"], "Такси-001")

    def test_as_json(self):
        outcome, _ = _assigned_fleet()
        as_json = report_ops.assignment_report(outcome).as_json()

        self.assertEqual(as_json["report_type"], "driver_assignment_event")
        self.assertEqual(as_json["success"], "True")

    def test_driver_request_report(self):
        report = report_ops.driver_request_report(mock_taxi_driver(), "Petr", "C", created=False)

        self.assertEqual(report.report["driver_kind"], "taxi_driver")
        self.assertEqual(report.report["driver_name"], mock_taxi_driver().name)
        self.assertEqual(report.report["requested_name"], "Petr")
        self.assertNotIn("success", report.report)


class TestNarration(TestCase):
    def test_assignment_narration(self):
        outcome, fleet = _assigned_fleet()
        self.assertEqual(
            narration_ops.narrate(report_ops.assignment_report(outcome)),
            f"driver {mock_taxi_driver().name} assigned to Такси-001",
        )

        busy, _ = fleet_state_ops.assign_driver(fleet, "v1", mock_taxi_driver())
        self.assertEqual(
            narration_ops.narrate(report_ops.assignment_report(busy)),
            f"driver {mock_taxi_driver().name} is already busy",
        )

        already, _ = fleet_state_ops.assign_driver(fleet, "v0", mock_taxi_driver())
        self.assertEqual(
            narration_ops.narrate(report_ops.assignment_report(already)),
            f"vehicle Такси-001 already has a driver: {mock_taxi_driver().name}",
        )

    def test_incapable_narration(self):
        fleet = mock_fleet(vehicles=(mock_bus(),), drivers=(mock_taxi_driver(),))
        outcome, _ = fleet_state_ops.assign_driver(fleet, "v1", mock_taxi_driver())

        self.assertEqual(
            narration_ops.narrate(report_ops.assignment_report(outcome)),
            f"driver {mock_taxi_driver().name} cannot operate Автобус-101",
        )

    def test_boarding_narration(self):
        fleet = mock_fleet(vehicles=(mock_taxi(capacity=1),))
        boarded, fleet = fleet_state_ops.add_passenger(fleet, "v0", "Anna")
        full, _ = fleet_state_ops.add_passenger(fleet, "v0", "Boris")

        self.assertEqual(narration_ops.narrate(report_ops.boarding_report(boarded)), "passenger Anna boarded Такси-001")
        self.assertEqual(
            narration_ops.narrate(report_ops.boarding_report(full)),
            "vehicle Такси-001 is full! limit: 1 passengers",
        )

    def test_readiness_narration(self):
        outcome, fleet = _assigned_fleet()
        no_driver, _ = fleet_state_ops.check_readiness(fleet, "v1")
        no_passengers, fleet = fleet_state_ops.check_readiness(fleet, "v0")
        _, fleet = fleet_state_ops.add_passenger(fleet, "v0", "Anna")
        ready, _ = fleet_state_ops.check_readiness(fleet, "v0")

        self.assertEqual(
            narration_ops.narrate(report_ops.readiness_report(no_driver)),
            "vehicle Автобус-101 cannot depart: no driver",
        )
        self.assertEqual(
            narration_ops.narrate(report_ops.readiness_report(no_passengers)),
            "vehicle Такси-001 cannot depart: no passengers",
        )
        self.assertEqual(
            narration_ops.narrate(report_ops.readiness_report(ready)),
            f"vehicle Такси-001 is ready to depart! driver: {mock_taxi_driver().name}, passengers: 1/4",
        )

    def test_departure_narration(self):
        fleet = mock_fleet(vehicles=(mock_taxi(),))
        outcome, _ = fleet_state_ops.depart(fleet, "v0")

        self.assertEqual(
            narration_ops.narrate(report_ops.departure_report(outcome)),
            "vehicle Такси-001 is not ready to depart!",
        )


class TestReporter(TestCase):
    def test_flush_hands_reports_to_handlers(self):
        outcome, fleet = _assigned_fleet()
        handler = CollectingHandler()
        reporter = Reporter()
        reporter.add_handler(handler)

        reporter.file_report(report_ops.assignment_report(outcome))
        reporter.flush(fleet)
        reporter.flush(fleet)
        reporter.close(fleet)

        self.assertEqual(len(handler.handled), 1, "reports should be cleared after a flush")
        self.assertTrue(handler.closed)

    def test_summary_stats_without_stats_handler(self):
        self.assertIsNone(Reporter().get_summary_stats(mock_fleet()))

    def test_narration_handler(self):
        outcome, fleet = _assigned_fleet()
        logger = logging.getLogger("test_narration_handler")
        handler = NarrationHandler(logger)

        with self.assertLogs(logger, level=logging.INFO) as log_cm:
            handler.handle([report_ops.assignment_report(outcome)], fleet)

        self.assertEqual(len(log_cm.output), 1)
        self.assertIn("assigned to Такси-001", log_cm.output[0])

    def test_eventful_handler(self):
        outcome, fleet = _assigned_fleet()
        with tempfile.TemporaryDirectory() as tmp:
            handler = EventfulHandler(Path(tmp))
            handler.handle([report_ops.assignment_report(outcome)], fleet)
            handler.close(fleet)

            with (Path(tmp) / "event.log").open("r") as f:
                lines = f.readlines()

        self.assertEqual(len(lines), 1)
        entry = json.loads(lines[0])
        self.assertEqual(entry["report_type"], "driver_assignment_event")
        self.assertEqual(entry["vehicle_id"], "v0")

    def test_stats_handler(self):
        outcome, fleet = _assigned_fleet()
        busy, fleet = fleet_state_ops.assign_driver(fleet, "v1", mock_taxi_driver())
        reporter = Reporter()
        reporter.add_handler(StatsHandler(print_table=False))

        reporter.file_report(report_ops.driver_request_report(mock_taxi_driver(), "x", "B", True))
        reporter.file_report(report_ops.assignment_report(outcome))
        reporter.file_report(report_ops.assignment_report(busy))
        reporter.flush(fleet)

        stats = reporter.get_summary_stats(fleet)
        assignments = stats["events"]["driver_assignment_event"]

        self.assertNotIn("driver_request_event", stats["events"])
        self.assertEqual(assignments["attempts"], 2)
        self.assertEqual(assignments["successes"], 1)
        self.assertEqual(assignments["reasons"], {"driver_busy": 1, "ok": 1})
        self.assertEqual(stats["final_vehicle_count"], 2)
        self.assertEqual(stats["registered_drivers"], 1)
        self.assertEqual(stats["busy_drivers"], 1)
        self.assertTrue(fleet.get_driver(DriverKind.TAXI_DRIVER).busy)

    def test_stats_handler_writes_summary(self):
        outcome, fleet = _assigned_fleet()
        with tempfile.TemporaryDirectory() as tmp:
            handler = StatsHandler(Path(tmp), print_table=False)
            handler.handle([report_ops.assignment_report(outcome)], fleet)
            handler.close(fleet)

            with (Path(tmp) / "summary_stats.json").open("r") as f:
                summary = json.load(f)

        self.assertEqual(summary["events"]["driver_assignment_event"]["successes"], 1)
