"""
SQLAlchemy ORM models.

Tables
------
* ``schools`` -- one row per school; ``id`` is assigned by the database.

Coordinates are plain floats.  Distances are computed in Python per request,
so no spatial index is needed.
"""

from sqlalchemy import Column, Float, Integer, Text

from .database import Base


class SchoolModel(Base):
    __tablename__ = "schools"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
