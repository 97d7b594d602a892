"""
Trip endpoints
==============

POST /api/v1/trips         -- a rider requests a ride
GET  /api/v1/trips/pending -- trips not yet completed, oldest first
"""

from fastapi import APIRouter, Depends, Request

from ridedispatch.api.dependencies import get_engine
from ridedispatch.api.middleware import current_rate_limit, limiter
from ridedispatch.api.schemas import ErrorResponse, RideRequest, TripResponse
from ridedispatch.services.engine import DispatchEngine

router = APIRouter(prefix="/trips", tags=["trips"])


@router.post(
    "",
    status_code=201,
    response_model=TripResponse,
    summary="Request a ride",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown rider."},
        422: {"model": ErrorResponse, "description": "Blank location."},
    },
)
@limiter.limit(current_rate_limit)
async def request_ride(
    request: Request,
    body: RideRequest,
    engine: DispatchEngine = Depends(get_engine),
):
    trip = engine.request_ride(body.rider_id, body.start_location, body.destination)
    return trip.describe()


@router.get(
    "/pending",
    response_model=list[TripResponse],
    summary="List the pending pool",
)
@limiter.limit(current_rate_limit)
async def list_pending(
    request: Request,
    engine: DispatchEngine = Depends(get_engine),
):
    return [trip.describe() for trip in engine.list_pending_trips()]
