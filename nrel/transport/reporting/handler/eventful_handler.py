from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, List

from nrel.transport.reporting.handler.handler import Handler

if TYPE_CHECKING:
    from nrel.transport.reporting.reporter import Report
    from nrel.transport.state.fleet_state import FleetState

log = logging.getLogger(__name__)


class EventfulHandler(Handler):
    """
    appends each report as a JSON line to the event.log output file
    """

    def __init__(self, scenario_output_directory: Path):
        log_path = Path(scenario_output_directory) / "event.log"
        self.log_file = open(log_path, "a")

    def handle(self, reports: List[Report], fleet: FleetState):
        for report in reports:
            entry = json.dumps(report.as_json(), default=str)
            self.log_file.write(entry + "\n")

    def close(self, fleet: FleetState):
        self.log_file.close()
