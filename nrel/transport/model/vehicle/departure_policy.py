from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import yaml


class DeparturePolicy(Enum):
    """
    what happens to a vehicle's driver reference on a successful departure.

    RETAIN_DRIVER frees the driver but leaves the vehicle bound to it and still
    flagged as ready, so the vehicle declines any further assignment and may
    depart again. RELEASE_DRIVER frees the driver, detaches it from the vehicle
    and resets the vehicle's readiness.
    """

    RETAIN_DRIVER = 1
    RELEASE_DRIVER = 2

    @staticmethod
    def from_string(string: str) -> DeparturePolicy:
        """
        parses an input configuration string as a DeparturePolicy

        :param string: the input string
        :return: a DeparturePolicy
        :raises: NameError when the departure policy is unknown
        """
        cleaned = string.lower().strip()
        if cleaned == "retain_driver":
            return DeparturePolicy.RETAIN_DRIVER
        elif cleaned == "release_driver":
            return DeparturePolicy.RELEASE_DRIVER
        else:
            valid_names = "{retain_driver|release_driver}"
            raise NameError(
                f"departure policy {string} is not known, must be one of {valid_names}"
            )

    @staticmethod
    def yaml_representer(dumper: yaml.Dumper, o: "DeparturePolicy"):
        return dumper.represent_scalar(tag="tag:yaml.org,2002:str", value=o.name.lower())
