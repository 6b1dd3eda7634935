from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Union

from nrel.transport.app.demo import run_demo
from nrel.transport.config.transport_config import defaults_file_path
from nrel.transport.custom_yaml import custom_yaml as yaml
from nrel.transport.runner.load import load_config, load_session

parser = argparse.ArgumentParser(description="run the transport dispatch demo")
parser.add_argument(
    "scenario_file",
    nargs="?",
    default=None,
    help="an optional scenario file with global, sim and fleet overrides",
)
parser.add_argument(
    "--defaults",
    dest="defaults",
    action="store_true",
    help="prints the default transport configuration values",
)

log = logging.getLogger("nrel.transport")


def run_sim(scenario_file: Optional[Union[Path, str]] = None) -> int:
    """
    runs the dispatch demo and writes outputs

    :param scenario_file: an optional scenario file
    :return: 0 for success
    """
    config = load_config(scenario_file)
    session = load_session(config)

    log.info(f"running {config.sim.sim_name} with departure policy {config.fleet.departure_policy.name.lower()}")
    run_demo(session)
    session.close()

    log.info("done!")
    return 0


def run() -> int:
    """
    entry point for a transport demo run
    :return: 0 if success, 1 if error
    """
    try:
        args = parser.parse_args()
    except SystemExit:
        parser.print_help()
        return 1

    if args.defaults:
        print_defaults()
        return 0

    return run_sim(args.scenario_file)


def print_defaults():
    defaults_file = defaults_file_path()
    log.info(f"printing the default configuration stored at {defaults_file}:\n")
    with defaults_file.open("r") as f:
        conf = yaml.safe_load(f)
        print(yaml.dump(conf, sort_keys=False))
    log.info("finished printing default configuration")


if __name__ == "__main__":
    run()
