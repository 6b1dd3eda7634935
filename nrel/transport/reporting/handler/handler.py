from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from nrel.transport.reporting.reporter import Report
    from nrel.transport.state.fleet_state import FleetState


class Handler(ABC):
    """
    A reporting.Handler handles fleet reports in varying ways.
    """

    @abstractmethod
    def handle(self, reports: List[Report], fleet: FleetState):
        """
        called each time the reporter is flushed.


        :param reports:

        :param fleet:
        :return:
        """

    @abstractmethod
    def close(self, fleet: FleetState):
        """
        wrap up anything here. called at the end of the session

        :return:
        """
