from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Any

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from nrel.transport.state.fleet_state import FleetState

log = logging.getLogger(__name__)


@dataclass
class SummaryStats:
    # counts by (report type name, reason)
    outcomes: Counter = field(default_factory=lambda: Counter())
    successes: Counter = field(default_factory=lambda: Counter())
    attempts: Counter = field(default_factory=lambda: Counter())

    final_vehicle_count: int = 0
    registered_drivers: int = 0
    busy_drivers: int = 0
    passengers_aboard: int = 0

    def compile_stats(self, fleet: FleetState) -> Dict[str, Any]:
        """
        computes all stats based on values accumulated throughout this session
        :return: a dictionary with stat values by key
        """
        vehicles = fleet.get_vehicles()
        drivers = fleet.get_drivers()

        self.final_vehicle_count = len(vehicles)
        self.registered_drivers = len(drivers)
        self.busy_drivers = len([d for d in drivers if d.busy])
        self.passengers_aboard = sum(v.passenger_count for v in vehicles)

        events = {}
        for report_type in sorted(self.attempts.keys()):
            reasons = {
                reason: count
                for (rt, reason), count in sorted(self.outcomes.items())
                if rt == report_type
            }
            events[report_type] = {
                "attempts": self.attempts[report_type],
                "successes": self.successes[report_type],
                "reasons": reasons,
            }

        return {
            "events": events,
            "final_vehicle_count": self.final_vehicle_count,
            "registered_drivers": self.registered_drivers,
            "busy_drivers": self.busy_drivers,
            "passengers_aboard": self.passengers_aboard,
        }

    def log(self):
        table = Table(title="Summary Stats")
        table.add_column("Stat")
        table.add_column("Value")

        for report_type in sorted(self.attempts.keys()):
            attempts = self.attempts[report_type]
            successes = self.successes[report_type]
            table.add_row(f"{report_type} succeeded", f"{successes}/{attempts}")
            for (rt, reason), count in sorted(self.outcomes.items()):
                if rt == report_type and reason != "ok":
                    table.add_row(f"  declined: {reason}", f"{count}")

        table.add_row("Vehicles", f"{self.final_vehicle_count}")
        table.add_row("Registered Drivers", f"{self.registered_drivers}")
        table.add_row("Busy Drivers", f"{self.busy_drivers}")
        table.add_row("Passengers Aboard", f"{self.passengers_aboard}")

        console = Console()
        console.print(table)
