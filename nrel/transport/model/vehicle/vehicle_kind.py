from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import yaml


class VehicleKind(Enum):
    """
    the fixed category of a vehicle, which decides its capacity and the
    kind of driver that may operate it
    """

    TAXI = 1
    BUS = 2

    @staticmethod
    def yaml_representer(dumper: yaml.Dumper, o: "VehicleKind"):
        return dumper.represent_scalar(tag="tag:yaml.org,2002:str", value=o.name.lower())

    def __lt__(self, other: "VehicleKind"):
        if not isinstance(other, VehicleKind):
            raise TypeError(
                f"'<' not supported between instances of {type(self)} and {type(other)}"
            )
        return self.name < other.name
