from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from nrel.transport.reporting import narration_ops
from nrel.transport.reporting.handler.handler import Handler

if TYPE_CHECKING:
    from nrel.transport.reporting.reporter import Report
    from nrel.transport.state.fleet_state import FleetState

log = logging.getLogger(__name__)


class NarrationHandler(Handler):
    """
    logs a human-readable line for every report, in the order the reports were filed
    """

    def __init__(self, logger: logging.Logger = log):
        self.logger = logger

    def handle(self, reports: List[Report], fleet: FleetState):
        for report in reports:
            line = narration_ops.narrate(report)
            if line is not None:
                self.logger.info(line)

    def close(self, fleet: FleetState):
        pass
