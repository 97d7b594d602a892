"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ridedispatch.domain.enums import Role, TripStatus


# ── Requests ──────────────────────────────────────────────────────────


class RiderCreateRequest(BaseModel):
    user_id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=120)
    phone_number: str = Field(..., min_length=1, max_length=32)


class DriverCreateRequest(RiderCreateRequest):
    driver_id: str = Field(..., min_length=1, max_length=64)
    vehicle_details: str = Field(..., min_length=1, max_length=255)


class RideRequest(BaseModel):
    rider_id: str
    start_location: str = Field(..., min_length=1, max_length=255)
    destination: str = Field(..., min_length=1, max_length=255)


class AcceptRideRequest(BaseModel):
    trip_id: Optional[int] = Field(
        None,
        description="Trip to accept; omit to take the oldest pending trip.",
    )


class AvailabilityRequest(BaseModel):
    available: bool


# ── Responses ─────────────────────────────────────────────────────────


class TripResponse(BaseModel):
    trip_id: int
    rider_name: str
    driver_name: Optional[str] = None
    start_location: str
    destination: str
    fare: float
    status: TripStatus

    model_config = {"from_attributes": True}


class ParticipantResponse(BaseModel):
    user_id: str
    name: str
    phone_number: str
    role: Role
    driver_id: Optional[str] = None
    vehicle_details: Optional[str] = None
    available: Optional[bool] = None

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
