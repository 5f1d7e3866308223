"""
Status endpoint
===============

GET / -- liveness check; does not touch the database.
"""

from fastapi import APIRouter

from src.api.schemas import MessageResponse

router = APIRouter(tags=["status"])


@router.get("/", response_model=MessageResponse, summary="Health check")
async def root():
    return MessageResponse(message="School Management API is running!")
