"""
FastAPI application factory.

* Owns one ``DispatchEngine`` per application (``app.state.engine``).
* Registers routes for riders, drivers, trips and admin.
* Maps every ``DispatchError`` to its HTTP status code.
* Applies rate-limiting.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from ridedispatch.api.middleware import configure_rate_limit, limiter
from ridedispatch.api.routes import admin, drivers, riders, trips
from ridedispatch.config import Settings, settings as default_settings
from ridedispatch.domain.errors import DispatchError
from ridedispatch.domain.pricing import build_pricing
from ridedispatch.services.engine import DispatchEngine

logger = logging.getLogger(__name__)


async def _dispatch_error_handler(request: Request, exc: DispatchError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[DispatchEngine] = None,
) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title="Ride Dispatch API",
        description=(
            "Riders request trips, drivers accept and complete them.  "
            "Tracks trip lifecycle and driver availability in memory."
        ),
        version="1.0.0",
    )
    app.state.engine = engine or DispatchEngine(
        pricing=build_pricing(settings.base_fare, settings.surge_multiplier)
    )
    app.state.settings = settings

    # Rate limiter
    configure_rate_limit(settings.rate_limit)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(DispatchError, _dispatch_error_handler)

    # Routers
    app.include_router(riders.router, prefix="/api/v1")
    app.include_router(drivers.router, prefix="/api/v1")
    app.include_router(trips.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
