"""
Dispatch Engine
===============

The single owning aggregate for dispatch state: the participant registry,
the pending pool and the trip-id counter all live on one ``DispatchEngine``
instance.  Nothing is module-level.

Lifecycle per trip
------------------
1. ``request_ride``  -- rider creates a PENDING trip; it enters the pool.
2. ``accept_ride``   -- an available driver takes a PENDING trip; it becomes
   ONGOING and the driver unavailable.  The trip stays in the pool.
3. ``complete_trip`` -- the driver finishes; the trip becomes COMPLETED,
   leaves the pool and the driver is available again.

Concurrency safety
------------------
Every operation runs under one re-entrant lock.  ``accept_ride`` checks
driver availability and selects a trip inside the same critical section,
so two drivers can never be handed the same trip and a driver can never
hold two ongoing trips.

Trip ids come from one engine-wide counter and are therefore unique across
riders.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Optional

from ridedispatch.domain.entities import Driver, Rider, Trip
from ridedispatch.domain.enums import TripStatus
from ridedispatch.domain.errors import (
    DriverNotFound,
    DriverUnavailable,
    InvalidInput,
    NoActiveTrip,
    NoAvailableTrips,
    RiderNotFound,
    TripNotFound,
)
from ridedispatch.domain.matching import OldestFirstSelection, TripSelectionPolicy
from ridedispatch.domain.pricing import FlatFarePricing, PricingStrategy
from ridedispatch.domain.validation import require_text
from ridedispatch.services.registry import ParticipantRegistry

logger = logging.getLogger(__name__)


class DispatchEngine:
    def __init__(
        self,
        registry: Optional[ParticipantRegistry] = None,
        pricing: Optional[PricingStrategy] = None,
        selection: Optional[TripSelectionPolicy] = None,
    ):
        self.registry = registry or ParticipantRegistry()
        self.pricing = pricing or FlatFarePricing()
        self.selection = selection or OldestFirstSelection()
        self._pending: dict[int, Trip] = {}
        self._trip_ids = itertools.count(1)
        self._lock = threading.RLock()

    # ── Registration ──────────────────────────────────────────────────

    def register_rider(self, user_id: str, name: str, phone_number: str) -> Rider:
        with self._lock:
            return self.registry.register_rider(user_id, name, phone_number)

    def register_driver(
        self,
        user_id: str,
        name: str,
        phone_number: str,
        driver_id: str,
        vehicle_details: str,
    ) -> Driver:
        with self._lock:
            return self.registry.register_driver(
                user_id, name, phone_number, driver_id, vehicle_details
            )

    def find_rider(self, user_id: str) -> Optional[Rider]:
        with self._lock:
            return self.registry.find_rider(user_id)

    def find_driver(self, user_id: str) -> Optional[Driver]:
        with self._lock:
            return self.registry.find_driver(user_id)

    # ── Trip lifecycle ────────────────────────────────────────────────

    def request_ride(
        self, rider_id: str, start_location: str, destination: str
    ) -> Trip:
        with self._lock:
            rider = self._get_rider(rider_id)
            require_text(start_location=start_location, destination=destination)

            trip = Trip(
                trip_id=next(self._trip_ids),
                rider_name=rider.name,
                start_location=start_location,
                destination=destination,
            )
            trip.calculate_fare(self.pricing)
            rider.ride_history[trip.trip_id] = trip
            self._pending[trip.trip_id] = trip

            logger.info(
                "Trip %d requested by %s: %s -> %s (fare=%.2f)",
                trip.trip_id,
                rider.name,
                start_location,
                destination,
                trip.fare,
            )
            return trip

    def accept_ride(self, driver_id: str, trip_id: Optional[int] = None) -> Trip:
        with self._lock:
            driver = self._get_driver(driver_id)
            if not driver.available:
                logger.warning("Driver %s is not available to accept rides", driver_id)
                raise DriverUnavailable(
                    f"Driver {driver_id!r} is not available to accept rides"
                )

            trip = self._select_trip(driver, trip_id)
            trip.start()
            trip.driver_name = driver.name
            driver.available = False
            driver.trip_history[trip.trip_id] = trip

            logger.info("Trip %d accepted by %s", trip.trip_id, driver.name)
            return trip

    def complete_trip(self, driver_id: str) -> Trip:
        with self._lock:
            driver = self._get_driver(driver_id)
            trip = driver.active_trip
            if trip is None:
                logger.warning("Driver %s has no ongoing trip to complete", driver_id)
                raise NoActiveTrip(f"Driver {driver_id!r} has no ongoing trip")

            trip.complete()
            driver.available = True
            self._pending.pop(trip.trip_id, None)

            logger.info("Trip %d completed by %s", trip.trip_id, driver.name)
            return trip

    def list_pending_trips(self) -> tuple[Trip, ...]:
        """Snapshot of the pool in request order; safe to iterate repeatedly."""
        with self._lock:
            return tuple(self._pending.values())

    # ── History & availability ────────────────────────────────────────

    def rider_history(self, rider_id: str) -> list[Trip]:
        with self._lock:
            return list(self._get_rider(rider_id).ride_history.values())

    def driver_history(self, driver_id: str) -> list[Trip]:
        with self._lock:
            return list(self._get_driver(driver_id).trip_history.values())

    def set_driver_availability(self, driver_id: str, available: bool) -> Driver:
        """Take an idle driver off or on duty."""
        with self._lock:
            driver = self._get_driver(driver_id)
            if driver.active_trip is not None:
                raise InvalidInput(
                    f"Driver {driver_id!r} has an ongoing trip; complete it first"
                )
            driver.available = available
            logger.info("Driver %s availability set to %s", driver.name, available)
            return driver

    # ── Internals ─────────────────────────────────────────────────────

    def _get_rider(self, rider_id: str) -> Rider:
        rider = self.registry.find_rider(rider_id)
        if rider is None:
            raise RiderNotFound(f"Rider {rider_id!r} not found")
        return rider

    def _get_driver(self, driver_id: str) -> Driver:
        driver = self.registry.find_driver(driver_id)
        if driver is None:
            raise DriverNotFound(f"Driver {driver_id!r} not found")
        return driver

    def _select_trip(self, driver: Driver, trip_id: Optional[int]) -> Trip:
        if trip_id is not None:
            trip = self._pending.get(trip_id)
            if trip is None:
                raise TripNotFound(f"Trip {trip_id} is not in the pending pool")
            if trip.status != TripStatus.PENDING:
                raise NoAvailableTrips(f"Trip {trip_id} already has a driver")
            return trip

        candidates = (
            t for t in self._pending.values() if t.status == TripStatus.PENDING
        )
        trip = self.selection.select(driver, candidates)
        if trip is None:
            logger.warning("No available trips for driver %s", driver.user_id)
            raise NoAvailableTrips("No available trips")
        return trip
