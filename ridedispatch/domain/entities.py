"""
Domain entities with business logic.

Patterns used
-------------
- **State Pattern** on ``Trip``: enforces valid lifecycle transitions
  (PENDING -> ONGOING -> COMPLETED) through ``TRIP_TRANSITIONS``.
- ``Driver.active_trip`` derives the driver's current assignment from its
  own history instead of tracking it in a second field.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .enums import TRIP_TRANSITIONS, Role, TripStatus
from .errors import InvalidStateTransition

if TYPE_CHECKING:
    from .pricing import PricingStrategy

logger = logging.getLogger(__name__)


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class TripSnapshot:
    trip_id: int
    rider_name: str
    driver_name: Optional[str]
    start_location: str
    destination: str
    fare: float
    status: TripStatus


@dataclass(frozen=True)
class ParticipantSnapshot:
    user_id: str
    name: str
    phone_number: str
    role: Role
    driver_id: Optional[str] = None
    vehicle_details: Optional[str] = None
    available: Optional[bool] = None


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class Trip:
    trip_id: int
    rider_name: str
    start_location: str
    destination: str
    driver_name: Optional[str] = None
    fare: float = 0.0
    status: TripStatus = TripStatus.PENDING

    def transition_to(self, new_status: TripStatus) -> None:
        """Move to *new_status* if the transition is legal, else raise."""
        allowed = TRIP_TRANSITIONS.get(self.status, set())
        if new_status not in allowed:
            raise InvalidStateTransition(
                f"Trip {self.trip_id}: cannot transition from "
                f"{self.status.value} to {new_status.value}"
            )
        self.status = new_status

    def calculate_fare(self, strategy: PricingStrategy) -> float:
        self.fare = strategy.calculate(self)
        return self.fare

    def start(self) -> None:
        """Pending -> Ongoing.  Raises ``InvalidStateTransition`` otherwise."""
        self.transition_to(TripStatus.ONGOING)

    def complete(self) -> None:
        """Ongoing -> Completed.  Raises ``InvalidStateTransition`` otherwise."""
        self.transition_to(TripStatus.COMPLETED)

    def describe(self) -> TripSnapshot:
        return TripSnapshot(
            trip_id=self.trip_id,
            rider_name=self.rider_name,
            driver_name=self.driver_name,
            start_location=self.start_location,
            destination=self.destination,
            fare=self.fare,
            status=self.status,
        )


@dataclass
class Participant(ABC):
    user_id: str
    name: str
    phone_number: str

    @property
    @abstractmethod
    def role(self) -> Role: ...

    def login(self) -> None:
        # Authentication is not modelled; this only records the event.
        logger.info("%s %s logged in", self.role.value, self.name)

    def describe(self) -> ParticipantSnapshot:
        return ParticipantSnapshot(
            user_id=self.user_id,
            name=self.name,
            phone_number=self.phone_number,
            role=self.role,
        )


@dataclass
class Rider(Participant):
    ride_history: dict[int, Trip] = field(default_factory=dict)

    @property
    def role(self) -> Role:
        return Role.RIDER


@dataclass
class Driver(Participant):
    driver_id: str
    vehicle_details: str
    available: bool = True
    trip_history: dict[int, Trip] = field(default_factory=dict)

    @property
    def role(self) -> Role:
        return Role.DRIVER

    @property
    def active_trip(self) -> Optional[Trip]:
        for trip in reversed(self.trip_history.values()):
            if trip.status == TripStatus.ONGOING:
                return trip
        return None

    def describe(self) -> ParticipantSnapshot:
        return ParticipantSnapshot(
            user_id=self.user_id,
            name=self.name,
            phone_number=self.phone_number,
            role=self.role,
            driver_id=self.driver_id,
            vehicle_details=self.vehicle_details,
            available=self.available,
        )
