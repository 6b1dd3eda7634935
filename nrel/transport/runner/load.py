import logging
import os
from pathlib import Path
from typing import Optional, Union

from nrel.transport.config import TransportConfig
from nrel.transport.reporting.handler.eventful_handler import EventfulHandler
from nrel.transport.reporting.handler.narration_handler import NarrationHandler
from nrel.transport.reporting.handler.stats_handler import StatsHandler
from nrel.transport.reporting.reporter import Reporter
from nrel.transport.runner.environment import Environment
from nrel.transport.runner.session import Session
from nrel.transport.state.fleet_state import FleetState

log = logging.getLogger(__name__)


def load_config(
    scenario_file: Optional[Union[Path, str]] = None,
    output_suffix: Optional[str] = None,
) -> TransportConfig:
    """
    loads the transport config, from the package defaults and an optional scenario file

    :param scenario_file: an optional scenario file
    :param output_suffix: directory name suffix to append to sim_name (by default, timestamp)
    :return: the config
    :raises: IOError if the scenario file is missing
    """
    try:
        return TransportConfig.build(scenario_file, output_suffix=output_suffix)
    except (IOError, AttributeError, NameError, ValueError):
        log.exception("attempted to load scenario config file but failed")
        raise


def build_reporter(config: TransportConfig) -> Reporter:
    """
    builds a reporter with the handlers switched on in the global config

    :param config: the transport config
    :return: a reporter
    """
    global_config = config.global_config
    output_directory = config.scenario_output_directory if global_config.write_outputs else None

    reporter = Reporter()
    if global_config.narrate:
        reporter.add_handler(NarrationHandler())
    if global_config.log_events and output_directory is not None:
        reporter.add_handler(EventfulHandler(output_directory))
    if global_config.log_stats:
        reporter.add_handler(StatsHandler(output_directory))
    return reporter


def load_session(config: TransportConfig) -> Session:
    """
    takes a transport config and builds an empty fleet with the reporting it asks for

    :param config: the transport config
    :return: a session ready to take commands
    """
    if config.global_config.write_outputs:
        config.scenario_output_directory.mkdir(parents=True, exist_ok=True)
        run_log_path = os.path.join(config.scenario_output_directory, "run.log")
        log_fh = logging.FileHandler(run_log_path)
        formatter = logging.Formatter("[%(levelname)s] - %(name)s - %(message)s")
        log_fh.setFormatter(formatter)
        logging.getLogger("nrel.transport").addHandler(log_fh)
        log.info(f"creating run log at {run_log_path}")

    env = Environment(config=config, reporter=build_reporter(config))
    fleet = FleetState.build(config.fleet.departure_policy)
    return Session(fleet, env)
