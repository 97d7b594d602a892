"""Unit tests for trip entity state transitions (State Pattern)."""

import pytest

from ridedispatch.domain.entities import Trip
from ridedispatch.domain.enums import TripStatus
from ridedispatch.domain.errors import InvalidStateTransition
from ridedispatch.domain.pricing import FlatFarePricing


def _trip(status: TripStatus = TripStatus.PENDING) -> Trip:
    return Trip(
        trip_id=1,
        rider_name="Alice",
        start_location="A",
        destination="B",
        status=status,
    )


class TestTripStateMachine:
    def test_initial_status_is_pending_without_driver(self):
        trip = _trip()
        assert trip.status == TripStatus.PENDING
        assert trip.driver_name is None

    # ── Valid transitions ─────────────────────────────────────────

    def test_start_moves_pending_to_ongoing(self):
        trip = _trip()
        trip.start()
        assert trip.status == TripStatus.ONGOING

    def test_complete_moves_ongoing_to_completed(self):
        trip = _trip(TripStatus.ONGOING)
        trip.complete()
        assert trip.status == TripStatus.COMPLETED

    # ── Invalid transitions ───────────────────────────────────────

    def test_complete_pending_fails(self):
        trip = _trip()
        with pytest.raises(InvalidStateTransition):
            trip.complete()
        assert trip.status == TripStatus.PENDING

    def test_start_ongoing_fails(self):
        trip = _trip(TripStatus.ONGOING)
        with pytest.raises(InvalidStateTransition):
            trip.start()

    def test_completed_is_terminal(self):
        trip = _trip(TripStatus.COMPLETED)
        for status in TripStatus:
            with pytest.raises(InvalidStateTransition):
                trip.transition_to(status)

    def test_cannot_go_backwards(self):
        trip = _trip(TripStatus.ONGOING)
        with pytest.raises(InvalidStateTransition):
            trip.transition_to(TripStatus.PENDING)


class TestTripFareAndSnapshot:
    def test_calculate_fare_uses_strategy(self):
        trip = _trip()
        assert trip.calculate_fare(FlatFarePricing(35.0)) == 35.0
        assert trip.fare == 35.0

    def test_describe_is_a_frozen_copy(self):
        trip = _trip()
        snap = trip.describe()
        trip.start()
        assert snap.status == TripStatus.PENDING
        with pytest.raises(AttributeError):
            snap.status = TripStatus.COMPLETED  # type: ignore[misc]
