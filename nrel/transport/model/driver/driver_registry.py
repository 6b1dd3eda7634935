from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

import immutables

from nrel.transport.model.driver.driver import Driver
from nrel.transport.model.driver.driver_kind import DriverKind
from nrel.transport.util.typealiases import DriverName, LicenseCategory

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DriverRegistry:
    """
    holds the single driver of each DriverKind.

    lookups are "first write wins": the name and license category are only used
    the first time a kind is requested. every later request for that kind returns
    the stored driver and discards the arguments it was called with.
    """

    entries: immutables.Map[DriverKind, Driver] = field(default_factory=immutables.Map)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, kind: DriverKind) -> bool:
        return kind in self.entries

    @property
    def drivers(self) -> Tuple[Driver, ...]:
        """
        the registered drivers, sorted by kind
        """
        return tuple(self.entries[k] for k in sorted(self.entries.keys()))

    def get(self, kind: DriverKind) -> Optional[Driver]:
        return self.entries.get(kind)

    def get_or_create(
        self,
        kind: DriverKind,
        name: DriverName,
        license_category: LicenseCategory,
    ) -> Tuple[Driver, DriverRegistry]:
        """
        returns the driver for this kind, creating it on the first request

        :param kind: the kind of driver requested
        :param name: the driver's name, only honored if this kind is not yet registered
        :param license_category: the license category, only honored if this kind is not yet registered
        :return: the driver for this kind, and the (possibly) updated registry
        """
        existing = self.entries.get(kind)
        if existing is not None:
            if existing.name != name or existing.license_category != license_category:
                log.debug(
                    f"{kind.name.lower()} already registered as {existing.name}; "
                    f"ignoring requested name {name} and license {license_category}"
                )
            return existing, self
        else:
            driver = Driver.build(name, license_category, kind)
            log.debug(f"registered {kind.name.lower()} {name} with license {license_category}")
            return driver, DriverRegistry(self.entries.set(kind, driver))

    def update(self, driver: Driver) -> DriverRegistry:
        """
        replaces the stored driver for the driver's kind. should only be used by the fleet state ops

        :param driver: the updated driver
        :return: the updated registry
        :raises: KeyError if no driver of this kind was registered
        """
        if driver.kind not in self.entries:
            raise KeyError(f"no {driver.kind.name.lower()} registered")
        return DriverRegistry(self.entries.set(driver.kind, driver))
