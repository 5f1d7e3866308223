"""
Repository Pattern -- abstracts DB access so domain logic stays DB-agnostic.

The repository receives an ``AsyncSession`` (unit-of-work) and speaks in
domain entities: ``NewSchool`` in, ``School`` out.  Errors from the driver
propagate as ``sqlalchemy.exc.SQLAlchemyError``.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import SchoolModel
from src.domain.entities import NewSchool, School


def _to_entity(row: SchoolModel) -> School:
    return School(
        id=row.id,
        name=row.name,
        address=row.address,
        latitude=row.latitude,
        longitude=row.longitude,
    )


class SchoolRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, school: NewSchool) -> int:
        """Stage a new row and return the id the database assigned to it."""
        row = SchoolModel(
            name=school.name,
            address=school.address,
            latitude=school.location.latitude,
            longitude=school.location.longitude,
        )
        self.session.add(row)
        await self.session.flush()
        return row.id

    async def list_all(self) -> list[School]:
        """All schools in insertion order."""
        result = await self.session.execute(
            select(SchoolModel).order_by(SchoolModel.id)
        )
        return [_to_entity(row) for row in result.scalars().all()]
