"""
Shared test fixtures.

Every test gets a fresh in-memory ``DispatchEngine``; the API client wraps
one in an app built by ``create_app`` and talks to it over ASGI, so no
server process is needed.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ridedispatch.api.app import create_app
from ridedispatch.api.middleware import limiter
from ridedispatch.config import Settings
from ridedispatch.domain.pricing import FlatFarePricing
from ridedispatch.services.engine import DispatchEngine


@pytest.fixture
def engine() -> DispatchEngine:
    return DispatchEngine(pricing=FlatFarePricing(20.0))


@pytest.fixture
def seeded_engine(engine: DispatchEngine) -> DispatchEngine:
    """Engine with rider R1 (Alice) and driver D1 (Bob) registered."""
    engine.register_rider("R1", "Alice", "555")
    engine.register_driver("D1", "Bob", "555-1", "D1", "Toyota")
    return engine


@pytest_asyncio.fixture
async def client(engine: DispatchEngine) -> AsyncGenerator[AsyncClient, None]:
    limiter.reset()
    app = create_app(Settings(log_level="WARNING"), engine=engine)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
