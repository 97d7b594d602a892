"""
Participant Registry -- the authoritative set of riders and drivers.

Identifiers are unique per role: the same id may belong to one rider and
one driver at the same time.  Lookups return ``None`` on a miss; only
registration raises.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Optional

from ridedispatch.domain.entities import Driver, Participant, Rider
from ridedispatch.domain.errors import DuplicateIdentifier
from ridedispatch.domain.validation import require_text

logger = logging.getLogger(__name__)


class ParticipantRegistry:
    def __init__(self) -> None:
        self._riders: dict[str, Rider] = {}
        self._drivers: dict[str, Driver] = {}

    def register_rider(self, user_id: str, name: str, phone_number: str) -> Rider:
        require_text(user_id=user_id, name=name, phone_number=phone_number)
        if user_id in self._riders:
            raise DuplicateIdentifier(f"Rider id {user_id!r} is already registered")

        rider = Rider(user_id=user_id, name=name, phone_number=phone_number)
        self._riders[user_id] = rider
        self._log_registered(rider)
        return rider

    def register_driver(
        self,
        user_id: str,
        name: str,
        phone_number: str,
        driver_id: str,
        vehicle_details: str,
    ) -> Driver:
        require_text(
            user_id=user_id,
            name=name,
            phone_number=phone_number,
            driver_id=driver_id,
            vehicle_details=vehicle_details,
        )
        if user_id in self._drivers:
            raise DuplicateIdentifier(f"Driver id {user_id!r} is already registered")

        driver = Driver(
            user_id=user_id,
            name=name,
            phone_number=phone_number,
            driver_id=driver_id,
            vehicle_details=vehicle_details,
        )
        self._drivers[user_id] = driver
        self._log_registered(driver)
        return driver

    def find_rider(self, user_id: str) -> Optional[Rider]:
        return self._riders.get(user_id)

    def find_driver(self, user_id: str) -> Optional[Driver]:
        return self._drivers.get(user_id)

    def riders(self) -> Iterator[Rider]:
        return iter(list(self._riders.values()))

    def drivers(self) -> Iterator[Driver]:
        return iter(list(self._drivers.values()))

    @staticmethod
    def _log_registered(participant: Participant) -> None:
        logger.info(
            "%s %s registered (id=%s)",
            participant.role.value,
            participant.name,
            participant.user_id,
        )
