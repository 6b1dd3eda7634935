from nrel.transport.factory.transport_factory import TransportFactory
from nrel.transport.model.driver.driver_kind import DriverKind
from nrel.transport.model.vehicle.vehicle_kind import VehicleKind


class TaxiFactory(TransportFactory):
    @property
    def vehicle_kind(self) -> VehicleKind:
        return VehicleKind.TAXI

    @property
    def driver_kind(self) -> DriverKind:
        return DriverKind.TAXI_DRIVER
