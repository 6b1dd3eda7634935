from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, NamedTuple, Optional, Any

from nrel.transport.reporting.handler.stats_handler import StatsHandler
from nrel.transport.reporting.report_type import ReportType

if TYPE_CHECKING:
    from nrel.transport.reporting.handler.handler import Handler
    from nrel.transport.state.fleet_state import FleetState


class Report(NamedTuple):
    report_type: ReportType
    report: Dict[str, Any]

    def as_json(self) -> Dict[str, str]:
        out = {str(k): str(v) for k, v in self.report.items()}
        out["report_type"] = self.report_type.name.lower()
        return out


class Reporter:
    """
    A class that collects reports of fleet events and hands them to its handlers.
    """

    def __init__(self):
        self.reports: List[Report] = []
        self.handlers: List[Handler] = []

    def add_handler(self, handler: Handler):
        self.handlers.append(handler)

    def flush(self, fleet: FleetState):
        """
        hands every filed report to each handler, then clears them.


        :param fleet: the fleet state after the reported events
        :return: Does not return a value.
        """
        for handler in self.handlers:
            handler.handle(self.reports, fleet)

        self.reports = []

    def file_report(self, report: Report):
        """
        files a single report to be handled later.


        :param report:
        :return:
        """
        self.reports.append(report)

    def get_summary_stats(self, fleet: FleetState) -> Optional[Dict]:
        """
        if a StatsHandler exists, return the summary of the events it has seen
        :return: the stats Dictionary, or, None
        """
        final_report = None
        for handler in self.handlers:
            if isinstance(handler, StatsHandler):
                final_report = handler.get_stats(fleet)
        return final_report

    def close(self, fleet: FleetState):
        """
        wrap up anything here. called at the end of the session

        :return:
        """
        for handler in self.handlers:
            handler.close(fleet)
