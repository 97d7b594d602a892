"""
Trip Selection Policy
=====================

Decides which pending trip a driver receives when they accept without
naming one.  The engine passes candidates in pool order (oldest request
first) and only ever hands over trips that are still ``PENDING``.

``OldestFirstSelection`` is first-come-first-served: deterministic and
fair to riders who waited longest.  Richer policies (distance, rating)
plug in by subclassing ``TripSelectionPolicy``.

Complexity: O(n) in the number of pooled trips.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Optional

from .entities import Driver, Trip


class TripSelectionPolicy(ABC):
    @abstractmethod
    def select(self, driver: Driver, candidates: Iterable[Trip]) -> Optional[Trip]:
        """Return the trip *driver* should take, or ``None`` if none fits."""


class OldestFirstSelection(TripSelectionPolicy):
    def select(self, driver: Driver, candidates: Iterable[Trip]) -> Optional[Trip]:
        return next(iter(candidates), None)
