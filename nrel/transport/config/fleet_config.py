from __future__ import annotations

from typing import NamedTuple, Dict, Optional, Tuple

from nrel.transport.config.config_builder import ConfigBuilder
from nrel.transport.model.vehicle.departure_policy import DeparturePolicy
from nrel.transport.model.vehicle.vehicle_kind import VehicleKind


class FleetConfig(NamedTuple):
    taxi_capacity: int
    bus_capacity: int
    departure_policy: DeparturePolicy

    @classmethod
    def default_config(cls) -> Dict:
        return {
            "taxi_capacity": 4,
            "bus_capacity": 30,
            "departure_policy": "retain_driver",
        }

    @classmethod
    def required_config(cls) -> Tuple[str, ...]:
        return ()

    @classmethod
    def build(cls, config: Optional[Dict] = None) -> FleetConfig:
        return ConfigBuilder.build(
            default_config=cls.default_config(),
            required_config=cls.required_config(),
            config_constructor=lambda c: FleetConfig.from_dict(c),
            config=config,
        )

    @classmethod
    def from_dict(cls, d: Dict) -> FleetConfig:
        taxi_capacity = int(d["taxi_capacity"])
        bus_capacity = int(d["bus_capacity"])
        if taxi_capacity <= 0 or bus_capacity <= 0:
            raise ValueError("taxi_capacity and bus_capacity must be positive")

        policy = d["departure_policy"]
        departure_policy = (
            policy if isinstance(policy, DeparturePolicy) else DeparturePolicy.from_string(policy)
        )

        return FleetConfig(
            taxi_capacity=taxi_capacity,
            bus_capacity=bus_capacity,
            departure_policy=departure_policy,
        )

    def capacity_of(self, kind: VehicleKind) -> int:
        if kind == VehicleKind.TAXI:
            return self.taxi_capacity
        else:
            return self.bus_capacity

    def asdict(self) -> Dict:
        return self._asdict()
