from __future__ import annotations

from typing import Iterable, Tuple, TYPE_CHECKING

from returns.result import Success, Failure, ResultE

from nrel.transport.model.vehicle.departure_policy import DeparturePolicy
from nrel.transport.state.outcomes import (
    AssignmentOutcome,
    AssignmentReason,
    BoardingOutcome,
    BoardingReason,
    DepartureOutcome,
    DepartureReason,
    ReadinessOutcome,
    ReadinessReason,
)
from nrel.transport.util.exception import FleetStateError
from nrel.transport.util.fp import apply_op_to_accumulator, throw_or_return
from nrel.transport.util.typealiases import (
    VehicleId,
    ModelName,
    DriverName,
    LicenseCategory,
    PassengerName,
)

if TYPE_CHECKING:
    from nrel.transport.model.driver.driver import Driver
    from nrel.transport.factory.transport_factory import TransportFactory
    from nrel.transport.model.vehicle.vehicle import Vehicle
    from nrel.transport.state.fleet_state import FleetState

"""
operations on the FleetState. each operation either declines, leaving the fleet
untouched, or returns a fleet with every affected entity updated together.

the *_safe variants return a ResultE which is a Failure only when the operation
refers to something the fleet does not contain. the plain variants raise it.
"""


def add_vehicle_safe(fleet: FleetState, vehicle: Vehicle) -> ResultE[FleetState]:
    """
    adds a vehicle to the fleet

    :param fleet: the fleet state
    :param vehicle: the vehicle to add

    :return: the updated fleet state, or an error
    """
    if vehicle.id in fleet.vehicles:
        return Failure(FleetStateError(f"attempting to add vehicle {vehicle.id} which already exists"))
    else:
        return Success(fleet._replace(vehicles=fleet.vehicles.set(vehicle.id, vehicle)))


def add_vehicle(fleet: FleetState, vehicle: Vehicle) -> FleetState:
    """
    helper for adding a vehicle to the fleet

    :raises: an error if the vehicle cannot be added
    """
    return throw_or_return(add_vehicle_safe(fleet, vehicle))


def add_vehicles(fleet: FleetState, vehicles: Iterable[Vehicle]) -> FleetState:
    """
    helper for adding multiple vehicles to the fleet

    :raises: an error if any of the vehicles cannot be added
    """

    def _add(vehicle: Vehicle):
        def _inner(f: FleetState) -> ResultE[FleetState]:
            return add_vehicle_safe(f, vehicle)

        return _inner

    return throw_or_return(apply_op_to_accumulator(_add, vehicles, fleet))


def modify_vehicle_safe(fleet: FleetState, vehicle: Vehicle) -> ResultE[FleetState]:
    """
    replaces a vehicle already in the fleet

    :param fleet: the fleet state
    :param vehicle: the updated vehicle

    :return: the updated fleet state, or an error
    """
    if vehicle.id not in fleet.vehicles:
        return Failure(FleetStateError(f"attempting to modify vehicle {vehicle.id} which is not in the fleet"))
    else:
        return Success(fleet._replace(vehicles=fleet.vehicles.set(vehicle.id, vehicle)))


def modify_driver_safe(fleet: FleetState, driver: Driver) -> ResultE[FleetState]:
    """
    replaces a registered driver

    :param fleet: the fleet state
    :param driver: the updated driver

    :return: the updated fleet state, or an error
    """
    if driver.kind not in fleet.registry:
        return Failure(
            FleetStateError(f"attempting to modify {driver.kind.name.lower()} which is not registered")
        )
    else:
        return Success(fleet._replace(registry=fleet.registry.update(driver)))


def request_driver(
    fleet: FleetState,
    factory: TransportFactory,
    name: DriverName,
    license_category: LicenseCategory,
) -> Tuple[Driver, FleetState]:
    """
    looks up the factory's kind of driver, registering one on the first request.
    name and license category are ignored if the kind is already registered.

    :param fleet: the fleet state
    :param factory: the factory whose driver kind is requested
    :param name: the name to use if this is the first request for this kind
    :param license_category: the license to use if this is the first request for this kind

    :return: the registered driver and the updated fleet state
    """
    driver, updated_registry = factory.create_driver(fleet.registry, name, license_category)
    return driver, fleet._replace(registry=updated_registry)


def create_vehicle(
    fleet: FleetState, factory: TransportFactory, model: ModelName
) -> Tuple[Vehicle, FleetState]:
    """
    builds a vehicle with the next free vehicle id and adds it to the fleet

    :param fleet: the fleet state
    :param factory: the factory for the kind of vehicle to build
    :param model: the model name, which does not need to be unique

    :return: the new vehicle and the updated fleet state
    """
    vehicle = factory.create_vehicle(fleet.next_vehicle_id(), model)
    return vehicle, add_vehicle(fleet, vehicle)


def _get_vehicle_safe(fleet: FleetState, vehicle_id: VehicleId) -> ResultE[Vehicle]:
    vehicle = fleet.vehicles.get(vehicle_id)
    if vehicle is None:
        return Failure(FleetStateError(f"vehicle {vehicle_id} not found in the fleet"))
    else:
        return Success(vehicle)


def assign_driver_safe(
    fleet: FleetState, vehicle_id: VehicleId, driver: Driver
) -> ResultE[Tuple[AssignmentOutcome, FleetState]]:
    """
    attempts to bind a driver to a vehicle.

    the request is declined if the vehicle already has a driver, if the driver
    is busy, or if the driver cannot operate this kind of vehicle, tested in that
    order. the driver's busy flag is read from the registry, not the argument.

    :param fleet: the fleet state
    :param vehicle_id: the vehicle to bind
    :param driver: the driver requested

    :return: the outcome and the updated fleet, or an error if the vehicle or driver is unknown
    """
    vehicle_result = _get_vehicle_safe(fleet, vehicle_id)
    if isinstance(vehicle_result, Failure):
        return vehicle_result
    vehicle = vehicle_result.unwrap()

    current = fleet.get_driver(driver.id)
    if current is None:
        return Failure(FleetStateError(f"driver {driver.name} ({driver.kind.name.lower()}) is not registered"))

    def _declined(reason: AssignmentReason) -> ResultE[Tuple[AssignmentOutcome, FleetState]]:
        bound = fleet.driver_of(vehicle)
        outcome = AssignmentOutcome(
            success=False,
            reason=reason,
            vehicle_id=vehicle.id,
            model=vehicle.model,
            driver_name=current.name,
            current_driver_name=bound.name if bound else None,
        )
        return Success((outcome, fleet))

    if vehicle.has_driver:
        return _declined(AssignmentReason.ALREADY_HAS_DRIVER)
    elif current.busy:
        return _declined(AssignmentReason.DRIVER_BUSY)
    elif not current.can_drive(vehicle):
        return _declined(AssignmentReason.DRIVER_INCAPABLE)
    else:
        updated_vehicle = vehicle.bind_driver(current.kind)
        updated_driver = current.set_busy(True)
        updated_fleet = fleet._replace(
            registry=fleet.registry.update(updated_driver),
            vehicles=fleet.vehicles.set(vehicle.id, updated_vehicle),
        )
        outcome = AssignmentOutcome(
            success=True,
            reason=AssignmentReason.OK,
            vehicle_id=vehicle.id,
            model=vehicle.model,
            driver_name=current.name,
            current_driver_name=current.name,
        )
        return Success((outcome, updated_fleet))


def assign_driver(
    fleet: FleetState, vehicle_id: VehicleId, driver: Driver
) -> Tuple[AssignmentOutcome, FleetState]:
    """
    attempts to bind a driver to a vehicle, see assign_driver_safe

    :raises: FleetStateError if the vehicle or driver is unknown
    """
    return throw_or_return(assign_driver_safe(fleet, vehicle_id, driver))


def add_passenger_safe(
    fleet: FleetState, vehicle_id: VehicleId, passenger: PassengerName
) -> ResultE[Tuple[BoardingOutcome, FleetState]]:
    """
    attempts to board a passenger. declined when the vehicle is at capacity.
    duplicate names are allowed and boarding order is kept.

    :param fleet: the fleet state
    :param vehicle_id: the vehicle to board
    :param passenger: the passenger's name

    :return: the outcome and the updated fleet, or an error if the vehicle is unknown
    """

    def _board(vehicle: Vehicle) -> ResultE[Tuple[BoardingOutcome, FleetState]]:
        if vehicle.is_full:
            outcome = BoardingOutcome(
                success=False,
                reason=BoardingReason.FULL,
                vehicle_id=vehicle.id,
                model=vehicle.model,
                passenger=passenger,
                passenger_count=vehicle.passenger_count,
                capacity=vehicle.capacity,
            )
            return Success((outcome, fleet))
        else:
            updated_vehicle = vehicle.board_passenger(passenger)
            outcome = BoardingOutcome(
                success=True,
                reason=BoardingReason.OK,
                vehicle_id=vehicle.id,
                model=vehicle.model,
                passenger=passenger,
                passenger_count=updated_vehicle.passenger_count,
                capacity=vehicle.capacity,
            )
            return modify_vehicle_safe(fleet, updated_vehicle).map(lambda f: (outcome, f))

    return _get_vehicle_safe(fleet, vehicle_id).bind(_board)


def add_passenger(
    fleet: FleetState, vehicle_id: VehicleId, passenger: PassengerName
) -> Tuple[BoardingOutcome, FleetState]:
    """
    attempts to board a passenger, see add_passenger_safe

    :raises: FleetStateError if the vehicle is unknown
    """
    return throw_or_return(add_passenger_safe(fleet, vehicle_id, passenger))


def check_readiness_safe(
    fleet: FleetState, vehicle_id: VehicleId
) -> ResultE[Tuple[ReadinessOutcome, FleetState]]:
    """
    recomputes the vehicle's ready flag: a vehicle is ready when it has a driver
    and at least one passenger. this only ever writes the ready flag.

    :param fleet: the fleet state
    :param vehicle_id: the vehicle to check

    :return: the outcome and the updated fleet, or an error if the vehicle is unknown
    """

    def _check(vehicle: Vehicle) -> ResultE[Tuple[ReadinessOutcome, FleetState]]:
        driver = fleet.driver_of(vehicle)
        if not vehicle.has_driver:
            reason = ReadinessReason.NO_DRIVER
        elif vehicle.passenger_count == 0:
            reason = ReadinessReason.NO_PASSENGERS
        else:
            reason = ReadinessReason.OK

        ready = reason == ReadinessReason.OK
        outcome = ReadinessOutcome(
            ready=ready,
            reason=reason,
            vehicle_id=vehicle.id,
            model=vehicle.model,
            passenger_count=vehicle.passenger_count,
            capacity=vehicle.capacity,
            driver_name=driver.name if driver else None,
        )
        if vehicle.ready == ready:
            return Success((outcome, fleet))
        else:
            return modify_vehicle_safe(fleet, vehicle.set_ready(ready)).map(lambda f: (outcome, f))

    return _get_vehicle_safe(fleet, vehicle_id).bind(_check)


def check_readiness(fleet: FleetState, vehicle_id: VehicleId) -> Tuple[ReadinessOutcome, FleetState]:
    """
    recomputes the vehicle's ready flag, see check_readiness_safe

    :raises: FleetStateError if the vehicle is unknown
    """
    return throw_or_return(check_readiness_safe(fleet, vehicle_id))


def depart_safe(fleet: FleetState, vehicle_id: VehicleId) -> ResultE[Tuple[DepartureOutcome, FleetState]]:
    """
    attempts to depart. succeeds when the vehicle was found ready by its last
    readiness check and has a driver. on success the driver is no longer busy;
    what happens to the vehicle depends on the fleet's departure policy.

    :param fleet: the fleet state
    :param vehicle_id: the departing vehicle

    :return: the outcome and the updated fleet, or an error if the vehicle is unknown
    """

    def _depart(vehicle: Vehicle) -> ResultE[Tuple[DepartureOutcome, FleetState]]:
        driver = fleet.driver_of(vehicle)
        if not vehicle.ready:
            reason = DepartureReason.NOT_READY
        elif driver is None:
            reason = DepartureReason.NO_DRIVER
        else:
            reason = DepartureReason.OK

        if reason != DepartureReason.OK:
            outcome = DepartureOutcome(
                success=False,
                reason=reason,
                vehicle_id=vehicle.id,
                model=vehicle.model,
            )
            return Success((outcome, fleet))

        updated_vehicle = (
            vehicle.unbind_driver()
            if fleet.departure_policy == DeparturePolicy.RELEASE_DRIVER
            else vehicle
        )
        outcome = DepartureOutcome(
            success=True,
            reason=DepartureReason.OK,
            vehicle_id=vehicle.id,
            model=vehicle.model,
            released_driver_name=driver.name,
        )
        return (
            modify_driver_safe(fleet, driver.set_busy(False))
            .bind(lambda f: modify_vehicle_safe(f, updated_vehicle))
            .map(lambda f: (outcome, f))
        )

    return _get_vehicle_safe(fleet, vehicle_id).bind(_depart)


def depart(fleet: FleetState, vehicle_id: VehicleId) -> Tuple[DepartureOutcome, FleetState]:
    """
    attempts to depart, see depart_safe

    :raises: FleetStateError if the vehicle is unknown
    """
    return throw_or_return(depart_safe(fleet, vehicle_id))
