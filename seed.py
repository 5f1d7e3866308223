"""
Seed script -- populates the database with sample schools for reviewers.

Run after migrations (or against a fresh database; tables are created
if missing):
    python seed.py

Creates 8 schools spread across central Mumbai so ``/listSchools`` has
something to rank.
"""

import asyncio

from sqlalchemy import func, select

from src.config import settings
from src.domain.validation import parse_new_school
from src.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_tables,
)
from src.infrastructure.models import SchoolModel
from src.infrastructure.repositories import SchoolRepository


SCHOOLS = [
    {"name": "Cathedral & John Connon School", "address": "6 Purshottamdas Thakurdas Marg, Fort", "latitude": 18.9322, "longitude": 72.8303},
    {"name": "Campion School", "address": "13 Cooperage Road, Fort", "latitude": 18.9255, "longitude": 72.8292},
    {"name": "Bombay Scottish School", "address": "Veer Savarkar Marg, Mahim", "latitude": 19.0382, "longitude": 72.8410},
    {"name": "Jamnabai Narsee School", "address": "Narsee Monjee Bhavan, Juhu", "latitude": 19.1071, "longitude": 72.8366},
    {"name": "Dhirubhai Ambani International School", "address": "Bandra Kurla Complex, Bandra East", "latitude": 19.0637, "longitude": 72.8664},
    {"name": "Hiranandani Foundation School", "address": "Hiranandani Gardens, Powai", "latitude": 19.1182, "longitude": 72.9078},
    {"name": "St. Mary's School", "address": "Nesbit Road, Mazagaon", "latitude": 18.9680, "longitude": 72.8393},
    {"name": "Don Bosco High School", "address": "Don Bosco Road, Matunga", "latitude": 19.0269, "longitude": 72.8553},
]


async def seed():
    engine = build_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )
    try:
        await create_tables(engine)
        async with build_session_factory(engine)() as session:
            # Check if already seeded
            result = await session.execute(
                select(func.count()).select_from(SchoolModel)
            )
            if result.scalar() > 0:
                print("Database already seeded. Skipping.")
                return

            repo = SchoolRepository(session)
            for raw in SCHOOLS:
                await repo.insert(parse_new_school(raw))
            await session.commit()
            print(f"  Created {len(SCHOOLS)} schools")
    finally:
        await engine.dispose()

    print("\nSeed complete!")


async def main():
    print("Seeding database...")
    await seed()


if __name__ == "__main__":
    asyncio.run(main())
