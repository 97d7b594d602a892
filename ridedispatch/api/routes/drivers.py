"""
Driver endpoints
================

POST  /api/v1/drivers                         -- register a driver
GET   /api/v1/drivers/{driver_id}             -- driver profile & availability
GET   /api/v1/drivers/{driver_id}/trips       -- trips handled by the driver
PATCH /api/v1/drivers/{driver_id}/availability -- go on / off duty while idle
POST  /api/v1/drivers/{driver_id}/accept      -- accept a pending trip
POST  /api/v1/drivers/{driver_id}/complete    -- complete the ongoing trip
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from ridedispatch.api.dependencies import get_engine
from ridedispatch.api.middleware import current_rate_limit, limiter
from ridedispatch.api.schemas import (
    AcceptRideRequest,
    AvailabilityRequest,
    DriverCreateRequest,
    ErrorResponse,
    ParticipantResponse,
    TripResponse,
)
from ridedispatch.services.engine import DispatchEngine

router = APIRouter(prefix="/drivers", tags=["drivers"])


@router.post(
    "",
    status_code=201,
    response_model=ParticipantResponse,
    summary="Register a driver",
    responses={409: {"model": ErrorResponse, "description": "Driver id already registered."}},
)
@limiter.limit(current_rate_limit)
async def register_driver(
    request: Request,
    body: DriverCreateRequest,
    engine: DispatchEngine = Depends(get_engine),
):
    driver = engine.register_driver(
        body.user_id,
        body.name,
        body.phone_number,
        body.driver_id,
        body.vehicle_details,
    )
    return driver.describe()


@router.get("/{driver_id}", response_model=ParticipantResponse, summary="Get a driver")
@limiter.limit(current_rate_limit)
async def get_driver(
    request: Request,
    driver_id: str,
    engine: DispatchEngine = Depends(get_engine),
):
    driver = engine.find_driver(driver_id)
    if driver is None:
        raise HTTPException(status_code=404, detail="Driver not found")
    return driver.describe()


@router.get(
    "/{driver_id}/trips",
    response_model=list[TripResponse],
    summary="Driver's trip history",
)
@limiter.limit(current_rate_limit)
async def get_driver_trips(
    request: Request,
    driver_id: str,
    engine: DispatchEngine = Depends(get_engine),
):
    return [trip.describe() for trip in engine.driver_history(driver_id)]


@router.patch(
    "/{driver_id}/availability",
    response_model=ParticipantResponse,
    summary="Set an idle driver's availability",
)
@limiter.limit(current_rate_limit)
async def set_availability(
    request: Request,
    driver_id: str,
    body: AvailabilityRequest,
    engine: DispatchEngine = Depends(get_engine),
):
    return engine.set_driver_availability(driver_id, body.available).describe()


@router.post(
    "/{driver_id}/accept",
    response_model=TripResponse,
    summary="Accept a pending trip",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown driver or trip."},
        409: {"model": ErrorResponse, "description": "Driver busy or nothing to accept."},
    },
    description=(
        "Takes the trip named by ``trip_id`` or, when omitted, the oldest "
        "pending trip.  The driver becomes unavailable until completion."
    ),
)
@limiter.limit(current_rate_limit)
async def accept_ride(
    request: Request,
    driver_id: str,
    body: Optional[AcceptRideRequest] = None,
    engine: DispatchEngine = Depends(get_engine),
):
    trip_id = body.trip_id if body else None
    return engine.accept_ride(driver_id, trip_id).describe()


@router.post(
    "/{driver_id}/complete",
    response_model=TripResponse,
    summary="Complete the driver's ongoing trip",
    responses={409: {"model": ErrorResponse, "description": "No ongoing trip."}},
)
@limiter.limit(current_rate_limit)
async def complete_trip(
    request: Request,
    driver_id: str,
    engine: DispatchEngine = Depends(get_engine),
):
    return engine.complete_trip(driver_id).describe()
