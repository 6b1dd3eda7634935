from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import yaml


class DriverKind(Enum):
    """
    the fixed category of a driver. the registry holds at most one driver per kind.
    """

    TAXI_DRIVER = 1
    BUS_DRIVER = 2

    @staticmethod
    def yaml_representer(dumper: yaml.Dumper, o: "DriverKind"):
        return dumper.represent_scalar(tag="tag:yaml.org,2002:str", value=o.name.lower())

    def __lt__(self, other: "DriverKind"):
        """Allows sorting an iterable of DriverKind, in particular for deterministic iteration of the registry"""
        if not isinstance(other, DriverKind):
            raise TypeError(
                f"'<' not supported between instances of {type(self)} and {type(other)}"
            )
        return self.name < other.name
