from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import yaml


class ReportType(Enum):
    """
    A strict set of report types
    """

    DRIVER_REQUEST_EVENT = 1
    VEHICLE_CREATED_EVENT = 2
    DRIVER_ASSIGNMENT_EVENT = 3
    PASSENGER_BOARDING_EVENT = 4
    READINESS_CHECK_EVENT = 5
    DEPARTURE_EVENT = 6

    @classmethod
    def from_string(cls, s: str) -> ReportType:
        values = {
            "driver_request_event": cls.DRIVER_REQUEST_EVENT,
            "vehicle_created_event": cls.VEHICLE_CREATED_EVENT,
            "driver_assignment_event": cls.DRIVER_ASSIGNMENT_EVENT,
            "passenger_boarding_event": cls.PASSENGER_BOARDING_EVENT,
            "readiness_check_event": cls.READINESS_CHECK_EVENT,
            "departure_event": cls.DEPARTURE_EVENT,
        }
        try:
            return values[s]
        except KeyError:
            raise KeyError(f"{s} not a valid report type.")

    @staticmethod
    def yaml_representer(dumper: yaml.Dumper, o: "ReportType"):
        return dumper.represent_scalar(tag="tag:yaml.org,2002:str", value=o.name.lower())

    def __lt__(self, other: "ReportType"):
        """Allows sorting an iterable of ReportType, in particular for deterministic serialization of `set[ReportType]`"""
        if not isinstance(other, ReportType):
            raise TypeError(
                f"'<' not supported between instances of {type(self)} and {type(other)}"
            )
        return self.name < other.name
