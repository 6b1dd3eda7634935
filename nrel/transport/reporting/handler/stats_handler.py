from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, List, Dict, Optional

from nrel.transport.reporting.handler.handler import Handler
from nrel.transport.reporting.handler.summary_stats import SummaryStats

if TYPE_CHECKING:
    from nrel.transport.reporting.reporter import Report
    from nrel.transport.state.fleet_state import FleetState

log = logging.getLogger(__name__)


class StatsHandler(Handler):
    """
    The StatsHandler tallies the outcome of every fleet operation.
    """

    def __init__(self, scenario_output_directory: Optional[Path] = None, print_table: bool = True):
        self.stats = SummaryStats()
        self.scenario_output_directory = scenario_output_directory
        self.print_table = print_table

    def get_stats(self, fleet: FleetState) -> Dict:
        """
        special output specifically for the StatsHandler which produces the
        summary file output
        :return: the compiled stats for this session
        """
        return self.stats.compile_stats(fleet)

    def handle(self, reports: List[Report], fleet: FleetState):
        """
        called each time the reporter is flushed.


        :param reports:

        :param fleet:
        :return:
        """
        for report in reports:
            if "success" not in report.report:
                continue
            report_type = report.report_type.name.lower()
            self.stats.attempts[report_type] += 1
            if report.report["success"]:
                self.stats.successes[report_type] += 1
            self.stats.outcomes[(report_type, report.report["reason"])] += 1

    def close(self, fleet: FleetState):
        """
        wrap up anything here. called at the end of the session

        :return:
        """
        output = self.stats.compile_stats(fleet)
        if self.print_table:
            self.stats.log()
        if self.scenario_output_directory is not None:
            output_path = Path(self.scenario_output_directory).joinpath("summary_stats.json")
            with output_path.open(mode="w") as f:
                json.dump(output, f, indent=4)
                log.info(f"summary stats written to {output_path}")
