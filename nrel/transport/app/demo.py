from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nrel.transport.runner.session import Session

log = logging.getLogger(__name__)


def _section(title: str):
    log.info("")
    log.info(f"[bold]{title}[/bold]")


def run_demo(session: Session) -> Session:
    """
    replays the dispatch demo: first-write-wins driver lookups, assignment with a
    busy driver, boarding past capacity, readiness, departure and re-assignment of
    the released driver.

    :param session: an empty session
    :return: the session, after the demo
    """
    taxi_factory = session.taxi_factory
    bus_factory = session.bus_factory

    _section("1. driver registry")
    taxi_driver_1 = session.create_driver(taxi_factory, "Иван Таксистов", "B")
    taxi_driver_2 = session.create_driver(taxi_factory, "Петр Таксистов", "B")
    bus_driver = session.create_driver(bus_factory, "Сергей Автобусов", "D")
    log.info(f"taxi driver 1: {taxi_driver_1.name}, taxi driver 2: {taxi_driver_2.name}")
    log.info(f"same driver for both taxi lookups: {taxi_driver_1.id == taxi_driver_2.id}")
    log.info(f"bus driver: {bus_driver.name}")

    _section("2. vehicles")
    taxi_1 = session.create_vehicle(taxi_factory, "Такси-001")
    taxi_2 = session.create_vehicle(taxi_factory, "Такси-002")
    bus_1 = session.create_vehicle(bus_factory, "Автобус-101")

    _section("3. driver assignment")
    session.assign_driver(taxi_1.id, taxi_driver_1)
    session.assign_driver(bus_1.id, bus_driver)
    # the taxi driver is busy with taxi_1
    session.assign_driver(taxi_2.id, taxi_driver_1)

    _section("4. boarding")
    for i in range(1, taxi_1.capacity + 1):
        session.add_passenger(taxi_1.id, f"taxi-passenger-{i}")
    session.add_passenger(taxi_1.id, "extra-passenger")
    for i in range(1, bus_1.capacity + 1):
        session.add_passenger(bus_1.id, f"bus-passenger-{i}")

    _section("5. readiness")
    session.check_readiness(taxi_1.id)
    session.check_readiness(taxi_2.id)
    session.check_readiness(bus_1.id)

    _section("6. departure")
    session.depart(taxi_1.id)
    session.depart(bus_1.id)

    _section("7. released driver takes another vehicle")
    session.assign_driver(taxi_2.id, taxi_driver_1)
    session.add_passenger(taxi_2.id, "passenger-1")
    session.add_passenger(taxi_2.id, "passenger-2")
    session.check_readiness(taxi_2.id)
    session.depart(taxi_2.id)

    return session
