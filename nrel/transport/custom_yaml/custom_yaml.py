import logging
from pathlib import PurePath

import yaml

from nrel.transport.model.driver.driver_kind import DriverKind
from nrel.transport.model.vehicle.departure_policy import DeparturePolicy
from nrel.transport.model.vehicle.vehicle_kind import VehicleKind
from nrel.transport.reporting.report_type import ReportType

log = logging.getLogger(__name__)

custom_yaml = yaml

# This tag is not written to the file during serialization because interpretation is implicit during YAML deserialization.
YAML_STR_TAG = "tag:yaml.org,2002:str"


def convert_to_unsorted_list(dumper: custom_yaml.Dumper, obj: tuple):
    """Patches PyYAML representation for an object so that it is treated as a YAML list. Avoids an explicit YAML tag."""
    return dumper.represent_list(list(obj))


custom_yaml.add_representer(data_type=tuple, representer=convert_to_unsorted_list)


def convert_to_sorted_list(dumper: custom_yaml.Dumper, obj: set):
    """Patches PyYAML representation for an object so that it is treated as a YAML list. Avoids an explicit YAML tag."""
    return dumper.represent_list(sorted(list(obj)))


custom_yaml.add_representer(data_type=set, representer=convert_to_sorted_list)
custom_yaml.add_representer(data_type=frozenset, representer=convert_to_sorted_list)


def convert_to_str(dumper: custom_yaml.Dumper, path: PurePath):
    """Patches PyYAML representation for an object so that it is treated as a YAML str. Avoids an explicit YAML tag."""
    return dumper.represent_scalar(tag=YAML_STR_TAG, value=str(path))


custom_yaml.add_multi_representer(data_type=PurePath, multi_representer=convert_to_str)


# enums carry their own representers
custom_yaml.add_representer(data_type=DeparturePolicy, representer=DeparturePolicy.yaml_representer)
custom_yaml.add_representer(data_type=DriverKind, representer=DriverKind.yaml_representer)
custom_yaml.add_representer(data_type=ReportType, representer=ReportType.yaml_representer)
custom_yaml.add_representer(data_type=VehicleKind, representer=VehicleKind.yaml_representer)


# Fallback to str() representation for any child of `object`.
# Does not appear to work for built-in types that PyYaml has special serializers for.
def generic_representer(dumper: custom_yaml.Dumper, obj: object):
    """Serializes arbitrary objects to strs."""
    log.warning(f"{obj.__class__} object was implicity serialized with `str(obj)`.")
    return dumper.represent_scalar(tag=YAML_STR_TAG, value=str(obj))


custom_yaml.add_multi_representer(data_type=object, multi_representer=generic_representer)
