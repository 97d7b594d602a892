"""
Rider endpoints
===============

POST /api/v1/riders                  -- register a rider
GET  /api/v1/riders/{rider_id}       -- rider profile
GET  /api/v1/riders/{rider_id}/trips -- ride history in request order
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from ridedispatch.api.dependencies import get_engine
from ridedispatch.api.middleware import current_rate_limit, limiter
from ridedispatch.api.schemas import (
    ErrorResponse,
    ParticipantResponse,
    RiderCreateRequest,
    TripResponse,
)
from ridedispatch.services.engine import DispatchEngine

router = APIRouter(prefix="/riders", tags=["riders"])


@router.post(
    "",
    status_code=201,
    response_model=ParticipantResponse,
    summary="Register a rider",
    responses={409: {"model": ErrorResponse, "description": "Rider id already registered."}},
)
@limiter.limit(current_rate_limit)
async def register_rider(
    request: Request,
    body: RiderCreateRequest,
    engine: DispatchEngine = Depends(get_engine),
):
    rider = engine.register_rider(body.user_id, body.name, body.phone_number)
    return rider.describe()


@router.get("/{rider_id}", response_model=ParticipantResponse, summary="Get a rider")
@limiter.limit(current_rate_limit)
async def get_rider(
    request: Request,
    rider_id: str,
    engine: DispatchEngine = Depends(get_engine),
):
    rider = engine.find_rider(rider_id)
    if rider is None:
        raise HTTPException(status_code=404, detail="Rider not found")
    return rider.describe()


@router.get(
    "/{rider_id}/trips",
    response_model=list[TripResponse],
    summary="Rider's ride history",
)
@limiter.limit(current_rate_limit)
async def get_rider_trips(
    request: Request,
    rider_id: str,
    engine: DispatchEngine = Depends(get_engine),
):
    return [trip.describe() for trip in engine.rider_history(rider_id)]
