"""
Fare Pricing  (Strategy Pattern)
================================

Fares are computed by a ``PricingStrategy`` handed to the engine, so a
distance- or time-based model can replace the flat fare without touching
dispatch logic.

* ``FlatFarePricing``  -- every trip costs ``base_fare``.
* ``SurgePricing``     -- wraps another strategy and scales its fare.

Complexity: O(1) per fare calculation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import Trip


DEFAULT_BASE_FARE = 20.0


class PricingStrategy(ABC):
    @abstractmethod
    def calculate(self, trip: Trip) -> float: ...


class FlatFarePricing(PricingStrategy):
    def __init__(self, base_fare: float = DEFAULT_BASE_FARE):
        if base_fare < 0:
            raise ValueError("base_fare must be non-negative")
        self.base_fare = base_fare

    def calculate(self, trip: Trip) -> float:
        return self.base_fare


class SurgePricing(PricingStrategy):
    def __init__(self, inner: PricingStrategy, surge_multiplier: float = 1.0):
        if surge_multiplier < 1.0:
            raise ValueError("surge_multiplier must be >= 1.0")
        self.inner = inner
        self.surge_multiplier = surge_multiplier

    def calculate(self, trip: Trip) -> float:
        return round(self.inner.calculate(trip) * self.surge_multiplier, 2)


def build_pricing(base_fare: float, surge_multiplier: float = 1.0) -> PricingStrategy:
    """Flat fare, wrapped in surge pricing only when a surge is configured."""
    strategy: PricingStrategy = FlatFarePricing(base_fare)
    if surge_multiplier > 1.0:
        strategy = SurgePricing(strategy, surge_multiplier)
    return strategy
