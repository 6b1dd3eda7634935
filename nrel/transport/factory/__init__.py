from nrel.transport.factory.transport_factory import TransportFactory
from nrel.transport.factory.taxi_factory import TaxiFactory
from nrel.transport.factory.bus_factory import BusFactory
