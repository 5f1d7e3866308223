"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from src.domain.entities import RankedSchool, School


# ── Requests ──────────────────────────────────────────────────────────


class SchoolCreateRequest(BaseModel):
    """Raw add-school body.

    Fields are deliberately untyped: coercion and range checks happen in
    ``src.domain.validation`` so that failures map to 400 with a
    field-specific message.
    """

    name: Any = None
    address: Any = None
    latitude: Any = None
    longitude: Any = None

    model_config = {"extra": "ignore"}


# ── Responses ─────────────────────────────────────────────────────────


class SchoolResponse(BaseModel):
    id: int
    name: str
    address: str
    latitude: float
    longitude: float

    @classmethod
    def from_entity(cls, school: School) -> "SchoolResponse":
        return cls(
            id=school.id,
            name=school.name,
            address=school.address,
            latitude=school.latitude,
            longitude=school.longitude,
        )


class SchoolCreatedResponse(BaseModel):
    message: str = "School added successfully!"
    school: SchoolResponse


class SchoolDistanceResponse(SchoolResponse):
    distance: float = Field(..., description="Great-circle distance in km.")

    @classmethod
    def from_ranked(cls, ranked: RankedSchool) -> "SchoolDistanceResponse":
        s = ranked.school
        return cls(
            id=s.id,
            name=s.name,
            address=s.address,
            latitude=s.latitude,
            longitude=s.longitude,
            distance=ranked.distance,
        )


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
