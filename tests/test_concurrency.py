"""
Concurrency safety tests.

Demonstrates:
1. Many drivers racing for one trip produce exactly one winner.
2. One driver racing itself never ends up with two ongoing trips.
3. Listing the pool is safe while other threads add trips.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from ridedispatch.domain.enums import TripStatus
from ridedispatch.domain.errors import DispatchError, DriverUnavailable, NoAvailableTrips
from ridedispatch.services.engine import DispatchEngine

WORKERS = 16


def _race(engine: DispatchEngine, driver_ids: list[str]) -> list[object]:
    barrier = threading.Barrier(len(driver_ids))

    def attempt(driver_id: str) -> object:
        barrier.wait()
        try:
            return engine.accept_ride(driver_id)
        except DispatchError as exc:
            return exc

    with ThreadPoolExecutor(max_workers=len(driver_ids)) as pool:
        return list(pool.map(attempt, driver_ids))


class TestAcceptRace:
    def test_single_trip_single_winner(self, engine):
        engine.register_rider("R1", "Alice", "555")
        driver_ids = [f"D{i}" for i in range(WORKERS)]
        for did in driver_ids:
            engine.register_driver(did, did, "0", did, "Car")
        trip = engine.request_ride("R1", "A", "B")

        results = _race(engine, driver_ids)

        winners = [r for r in results if r is trip]
        losers = [r for r in results if isinstance(r, NoAvailableTrips)]
        assert len(winners) == 1
        assert len(losers) == WORKERS - 1
        assert trip.status == TripStatus.ONGOING
        busy = [d for d in engine.registry.drivers() if not d.available]
        assert [d.name for d in busy] == [trip.driver_name]

    def test_same_driver_gets_one_trip(self, engine):
        engine.register_rider("R1", "Alice", "555")
        engine.register_driver("D1", "Bob", "555-1", "D1", "Toyota")
        for i in range(WORKERS):
            engine.request_ride("R1", f"A{i}", f"B{i}")

        results = _race(engine, ["D1"] * WORKERS)

        assert sum(1 for r in results if not isinstance(r, DispatchError)) == 1
        assert sum(1 for r in results if isinstance(r, DriverUnavailable)) == WORKERS - 1
        ongoing = [t for t in engine.list_pending_trips() if t.status == TripStatus.ONGOING]
        assert len(ongoing) == 1


class TestPendingPoolReaders:
    def test_listing_while_requests_arrive(self, engine):
        engine.register_rider("R1", "Alice", "555")
        for i in range(50):
            engine.request_ride("R1", f"A{i}", f"B{i}")

        stop = threading.Event()

        def writer() -> None:
            i = 0
            while not stop.is_set():
                engine.request_ride("R1", f"C{i}", f"D{i}")
                i += 1

        thread = threading.Thread(target=writer)
        thread.start()
        try:
            for _ in range(2000):
                trips = engine.list_pending_trips()
                ids = [t.trip_id for t in trips]
                assert ids == sorted(ids)
        finally:
            stop.set()
            thread.join()

        assert len(engine.list_pending_trips()) >= 50
