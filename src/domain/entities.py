"""
Domain entities.

``NewSchool`` is what survives boundary validation; ``School`` is what the
store hands back once an id has been assigned.  Both are immutable: schools
are never updated in place.
"""

from __future__ import annotations

from dataclasses import dataclass


# ── Value Object ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class NewSchool:
    name: str
    address: str
    location: Location


@dataclass(frozen=True)
class School:
    id: int
    name: str
    address: str
    latitude: float
    longitude: float

    @property
    def location(self) -> Location:
        return Location(self.latitude, self.longitude)


@dataclass(frozen=True)
class RankedSchool:
    """A school paired with its distance (km) from some origin."""

    school: School
    distance: float
