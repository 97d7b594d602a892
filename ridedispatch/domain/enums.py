"""Trip status enumeration and state-transition rules."""

import enum


class TripStatus(str, enum.Enum):
    PENDING = "Pending"
    ONGOING = "Ongoing"
    COMPLETED = "Completed"


# State machine: maps current status -> set of valid next statuses
TRIP_TRANSITIONS: dict[TripStatus, set[TripStatus]] = {
    TripStatus.PENDING: {TripStatus.ONGOING},
    TripStatus.ONGOING: {TripStatus.COMPLETED},
    TripStatus.COMPLETED: set(),
}


class Role(str, enum.Enum):
    RIDER = "Rider"
    DRIVER = "Driver"
