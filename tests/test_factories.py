from unittest import TestCase

from nrel.transport.factory.bus_factory import BusFactory
from nrel.transport.factory.factory_ops import factory_for
from nrel.transport.factory.taxi_factory import TaxiFactory
from nrel.transport.model.driver.driver_kind import DriverKind
from nrel.transport.model.driver.driver_registry import DriverRegistry
from nrel.transport.model.vehicle.vehicle_kind import VehicleKind
from nrel.transport.resources.mock_lobster import (
    mock_bus_factory,
    mock_fleet_config,
    mock_taxi_factory,
)


class TestFactories(TestCase):
    def test_taxi_factory_vehicle(self):
        taxi = mock_taxi_factory().create_vehicle("v0", "Такси-001")

        self.assertEqual(taxi.kind, VehicleKind.TAXI)
        self.assertEqual(taxi.capacity, 4)
        self.assertEqual(taxi.model, "Такси-001")
        self.assertEqual(taxi.passenger_count, 0)
        self.assertFalse(taxi.has_driver)
        self.assertFalse(taxi.ready)

    def test_bus_factory_vehicle(self):
        bus = mock_bus_factory().create_vehicle("v0", "Автобус-101")

        self.assertEqual(bus.kind, VehicleKind.BUS)
        self.assertEqual(bus.capacity, 30)

    def test_configured_capacity(self):
        config = mock_fleet_config(taxi_capacity=2, bus_capacity=10)

        self.assertEqual(mock_taxi_factory(config).create_vehicle("v0", "t").capacity, 2)
        self.assertEqual(mock_bus_factory(config).create_vehicle("v1", "b").capacity, 10)

    def test_model_is_not_validated(self):
        vehicle = mock_taxi_factory().create_vehicle("v0", "")
        self.assertEqual(vehicle.model, "")

    def test_create_driver_uses_registry(self):
        registry = DriverRegistry()
        taxi_driver, registry = mock_taxi_factory().create_driver(registry, "Иван Таксистов", "B")
        again, registry = mock_taxi_factory().create_driver(registry, "Петр Таксистов", "B")
        bus_driver, registry = mock_bus_factory().create_driver(registry, "Сергей Автобусов", "D")

        self.assertEqual(taxi_driver.kind, DriverKind.TAXI_DRIVER)
        self.assertIs(taxi_driver, again)
        self.assertEqual(again.name, "Иван Таксистов")
        self.assertEqual(bus_driver.kind, DriverKind.BUS_DRIVER)
        self.assertEqual(len(registry), 2)

    def test_factory_for(self):
        config = mock_fleet_config()
        self.assertIsInstance(factory_for(VehicleKind.TAXI, config), TaxiFactory)
        self.assertIsInstance(factory_for(VehicleKind.BUS, config), BusFactory)
