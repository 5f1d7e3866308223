"""
School endpoints
================

POST /addSchool    -- validate and store a school (returns 201 Created)
GET  /listSchools  -- all schools sorted by distance from ?userLat=&userLon=
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_db
from src.api.errors import ApiError
from src.api.middleware import limiter
from src.api.schemas import (
    ErrorResponse,
    SchoolCreatedResponse,
    SchoolCreateRequest,
    SchoolDistanceResponse,
    SchoolResponse,
)
from src.config import settings
from src.domain.entities import School
from src.domain.ranking import rank_by_distance
from src.domain.validation import parse_location, parse_new_school
from src.infrastructure.repositories import SchoolRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["schools"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "A field failed validation."},
    500: {"model": ErrorResponse, "description": "The store call failed."},
}


@router.post(
    "/addSchool",
    status_code=201,
    response_model=SchoolCreatedResponse,
    summary="Add a school",
    responses=_ERROR_RESPONSES,
)
@limiter.limit(settings.rate_limit)
async def add_school(
    request: Request,
    body: SchoolCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    new_school = parse_new_school(body.model_dump())

    try:
        school_id = await SchoolRepository(db).insert(new_school)
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("Error adding school")
        raise ApiError(500, "Failed to add school to database.", str(exc)) from exc

    logger.info("School added with ID: %s", school_id)
    school = School(
        id=school_id,
        name=new_school.name,
        address=new_school.address,
        latitude=new_school.location.latitude,
        longitude=new_school.location.longitude,
    )
    return SchoolCreatedResponse(school=SchoolResponse.from_entity(school))


@router.get(
    "/listSchools",
    response_model=list[SchoolDistanceResponse],
    summary="List schools sorted by distance from the caller",
    responses=_ERROR_RESPONSES,
)
@limiter.limit(settings.rate_limit)
async def list_schools(
    request: Request,
    user_lat: Optional[str] = Query(None, alias="userLat"),
    user_lon: Optional[str] = Query(None, alias="userLon"),
    db: AsyncSession = Depends(get_db),
):
    origin = parse_location(
        user_lat, user_lon, lat_field="userLat", lon_field="userLon"
    )

    try:
        schools = await SchoolRepository(db).list_all()
    except SQLAlchemyError as exc:
        logger.exception("Error fetching schools")
        raise ApiError(500, "Failed to retrieve schools.", str(exc)) from exc

    return [
        SchoolDistanceResponse.from_ranked(r)
        for r in rank_by_distance(schools, origin)
    ]
