from __future__ import annotations

from typing import NamedTuple, TYPE_CHECKING

from nrel.transport.reporting.reporter import Reporter

if TYPE_CHECKING:
    from nrel.transport.config import TransportConfig


class Environment(NamedTuple):
    """
    Environment of this dispatch session.

    """

    config: TransportConfig
    reporter: Reporter
