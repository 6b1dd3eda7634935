from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import NamedTuple, Dict, Optional, Union

from nrel.transport.custom_yaml import custom_yaml as yaml
from nrel.transport.config.fleet_config import FleetConfig
from nrel.transport.config.global_config import GlobalConfig
from nrel.transport.config.sim import Sim

log = logging.getLogger(__name__)

CONFIG_SECTIONS = ("global", "sim", "fleet")


def defaults_file_path() -> Path:
    return Path(__file__).parent.parent / "resources" / "defaults" / "transport_config.yaml"


def _section(config: Dict, section: str) -> Dict:
    """
    reads one config section. a section with no body (only comments) loads as None
    and is treated as empty.

    :raises: ValueError if the section is not a mapping
    """
    values = config.get(section)
    if values is None:
        return {}
    elif not isinstance(values, dict):
        raise ValueError(f"config section '{section}' must be a mapping, found {values!r}")
    return values


class TransportConfig(NamedTuple):
    global_config: GlobalConfig
    sim: Sim
    fleet: FleetConfig

    scenario_output_directory: Path = Path("")

    @classmethod
    def build(
        cls,
        scenario_file_path: Optional[Union[Path, str]] = None,
        config: Optional[Dict] = None,
        output_suffix: Optional[str] = None,
    ) -> TransportConfig:
        """
        builds a transport config from the package defaults, overwritten by a scenario file
        and then by any additional key/value pairs.

        :param scenario_file_path: optional path to a scenario file to load
        :param config: optional overrides, keyed by section (global, sim, fleet)
        :param output_suffix: directory name suffix to append to sim_name (by default, timestamp)
        :return: a transport config
        :raises: IOError if the scenario file cannot be read
        :raises: ValueError if the scenario or one of its sections is not a mapping
        """
        scenario: Dict = {}
        if scenario_file_path is not None:
            path = Path(scenario_file_path)
            if not path.is_file():
                raise IOError(f"scenario file {path} not found")
            with path.open("r") as f:
                scenario = yaml.safe_load(f) or {}
            if not isinstance(scenario, dict):
                raise ValueError(f"scenario file {path} must contain a mapping of config sections")

        overrides = {} if config is None else config
        merged = {
            section: {**_section(scenario, section), **_section(overrides, section)}
            for section in CONFIG_SECTIONS
        }

        return TransportConfig.from_dict(merged, scenario_file_path, output_suffix)

    @classmethod
    def from_dict(
        cls,
        d: Dict,
        scenario_file_path: Optional[Union[Path, str]],
        output_suffix: Optional[str],
    ) -> TransportConfig:
        with defaults_file_path().open("r") as f:
            conf = yaml.safe_load(f)

        for key in CONFIG_SECTIONS:
            conf[key].update(d.get(key, {}))

        gconfig = GlobalConfig.build(conf.get("global"))
        sconfig = Sim.build(conf.get("sim"))
        fconfig = FleetConfig.build(conf.get("fleet"))

        root_logger = logging.getLogger("")
        root_logger.setLevel(gconfig.log_level)

        if output_suffix is None:
            output_suffix = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")

        scenario_name = sconfig.sim_name + "_" + output_suffix
        scenario_output_directory = Path(gconfig.output_base_directory) / Path(scenario_name)

        transport_config = TransportConfig(
            global_config=gconfig,
            sim=sconfig,
            fleet=fconfig,
            scenario_output_directory=scenario_output_directory,
        )

        if scenario_file_path is not None:
            log.debug(f"transport config loaded from {str(scenario_file_path)}")
        log.debug(f"\n{yaml.dump(conf)}")

        return transport_config

    def asdict(self) -> Dict:
        return {
            "global": self.global_config.asdict(),
            "sim": self.sim.asdict(),
            "fleet": self.fleet.asdict(),
        }

    def suppress_logging(self) -> TransportConfig:
        updated_gconfig = self.global_config._replace(
            narrate=False,
            log_events=False,
            log_stats=False,
        )
        return self._replace(global_config=updated_gconfig)

    def to_yaml(self):
        """
        writes this configuration as a file in the scenario output directory
        """
        config_dump = self.asdict()
        dump_name = self.sim.sim_name + ".yaml"
        dump_path = os.path.join(self.scenario_output_directory, dump_name)
        with open(dump_path, "w") as f:
            yaml.dump(config_dump, f, sort_keys=False)
