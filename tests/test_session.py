import logging
import tempfile
from pathlib import Path
from unittest import TestCase

from nrel.transport.config import TransportConfig
from nrel.transport.model.driver.driver_kind import DriverKind
from nrel.transport.model.vehicle.departure_policy import DeparturePolicy
from nrel.transport.reporting.handler.narration_handler import NarrationHandler
from nrel.transport.reporting.handler.stats_handler import StatsHandler
from nrel.transport.reporting.reporter import Reporter
from nrel.transport.resources.mock_lobster import mock_config, mock_session
from nrel.transport.runner.load import build_reporter, load_config, load_session
from nrel.transport.state.outcomes import AssignmentReason, BoardingReason, DepartureReason


class TestSession(TestCase):
    def test_create_driver_first_write_wins(self):
        session = mock_session()
        first = session.create_driver(session.taxi_factory, "Иван Таксистов", "B")
        second = session.create_driver(session.taxi_factory, "Петр Таксистов", "B")

        self.assertIs(first, second)
        self.assertEqual(session.driver(second).name, "Иван Таксистов")

    def test_driver_identity_after_assignment_and_departure(self):
        session = mock_session()
        first = session.create_driver(session.taxi_factory, "Иван Таксистов", "B")
        taxi = session.create_vehicle(session.taxi_factory, "Такси-001")
        session.assign_driver(taxi.id, first)

        after_assignment = session.create_driver(session.taxi_factory, "Петр Таксистов", "B")
        self.assertEqual(after_assignment.id, first.id)
        self.assertEqual(after_assignment.name, "Иван Таксистов")
        self.assertTrue(after_assignment.busy, "a later lookup should reflect the assignment")
        self.assertTrue(session.driver(first).busy, "an earlier snapshot resolves to the current state")

        session.add_passenger(taxi.id, "p")
        session.check_readiness(taxi.id)
        session.depart(taxi.id)

        after_departure = session.create_driver(session.taxi_factory, "Петр Таксистов", "B")
        self.assertEqual(after_departure.id, first.id)
        self.assertEqual(after_departure.name, "Иван Таксистов")
        self.assertFalse(after_departure.busy)
        self.assertFalse(session.driver(first).busy)

    def test_busy_driver_declined_through_stale_snapshot(self):
        session = mock_session()
        driver = session.create_driver(session.taxi_factory, "Иван Таксистов", "B")
        taxi_1 = session.create_vehicle(session.taxi_factory, "Такси-001")
        taxi_2 = session.create_vehicle(session.taxi_factory, "Такси-002")
        session.assign_driver(taxi_1.id, driver)

        self.assertFalse(driver.busy)
        self.assertEqual(session.assign_driver(taxi_2.id, driver).reason, AssignmentReason.DRIVER_BUSY)

    def test_full_cycle(self):
        session = mock_session()
        driver = session.create_driver(session.taxi_factory, "Иван Таксистов", "B")
        taxi = session.create_vehicle(session.taxi_factory, "Такси-001")

        self.assertEqual(session.assign_driver(taxi.id, driver).reason, AssignmentReason.OK)
        for i in range(taxi.capacity):
            self.assertTrue(session.add_passenger(taxi.id, f"p{i}").success)
        self.assertEqual(session.add_passenger(taxi.id, "extra").reason, BoardingReason.FULL)
        self.assertTrue(session.check_readiness(taxi.id).ready)
        self.assertEqual(session.depart(taxi.id).reason, DepartureReason.OK)

        self.assertFalse(session.driver(driver).busy)
        self.assertTrue(session.vehicle(taxi.id).has_driver)
        session.close()

    def test_release_driver_session(self):
        session = mock_session(departure_policy="release_driver")
        self.assertEqual(session.fleet.departure_policy, DeparturePolicy.RELEASE_DRIVER)

        driver = session.create_driver(session.taxi_factory, "Иван Таксистов", "B")
        taxi = session.create_vehicle(session.taxi_factory, "Такси-001")
        session.assign_driver(taxi.id, driver)
        session.add_passenger(taxi.id, "p")
        session.check_readiness(taxi.id)
        session.depart(taxi.id)

        self.assertFalse(session.vehicle(taxi.id).has_driver)
        self.assertEqual(session.assign_driver(taxi.id, driver).reason, AssignmentReason.OK)

    def test_every_call_is_reported(self):
        reporter = Reporter()
        stats = StatsHandler(print_table=False)
        reporter.add_handler(stats)
        session = mock_session(reporter=reporter)

        bus_driver = session.create_driver(session.bus_factory, "Сергей Автобусов", "D")
        taxi = session.create_vehicle(session.taxi_factory, "Такси-001")
        session.assign_driver(taxi.id, bus_driver)

        summary = reporter.get_summary_stats(session.fleet)
        self.assertEqual(
            summary["events"]["driver_assignment_event"]["reasons"],
            {"driver_incapable": 1},
        )
        self.assertEqual(summary["registered_drivers"], 1)
        self.assertIsNone(session.fleet.get_driver(DriverKind.TAXI_DRIVER))


class TestLoad(TestCase):
    def test_build_reporter_defaults(self):
        config = TransportConfig.build(output_suffix="test")
        reporter = build_reporter(config)

        handler_types = [type(h) for h in reporter.handlers]
        self.assertEqual(handler_types, [NarrationHandler, StatsHandler])

    def test_build_reporter_suppressed(self):
        reporter = build_reporter(mock_config())
        self.assertEqual(reporter.handlers, [])

    def test_load_session(self):
        session = load_session(mock_config(departure_policy="release_driver"))

        self.assertEqual(session.fleet.departure_policy, DeparturePolicy.RELEASE_DRIVER)
        self.assertEqual(len(session.fleet.vehicles), 0)
        self.assertEqual(len(session.fleet.get_drivers()), 0)

    def test_load_config_logs_bad_scenario(self):
        with tempfile.TemporaryDirectory() as tmp:
            scenario_path = Path(tmp) / "scenario.yaml"
            with scenario_path.open("w") as f:
                f.write("sim: [not, a, mapping]\n")

            with self.assertLogs("nrel.transport.runner.load", level=logging.ERROR):
                with self.assertRaises(ValueError):
                    load_config(scenario_path, output_suffix="test")
