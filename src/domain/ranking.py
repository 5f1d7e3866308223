"""Rank schools by distance from a caller-supplied origin."""

from __future__ import annotations

from typing import Iterable

from .distance import haversine_km
from .entities import Location, RankedSchool, School


def rank_by_distance(
    schools: Iterable[School], origin: Location
) -> list[RankedSchool]:
    """Attach the distance from *origin* to each school and sort ascending.

    ``sorted`` is stable, so schools at equal distance keep the order in
    which the store returned them.
    """
    ranked = []
    for s in schools:
        there = s.location
        distance = haversine_km(
            origin.latitude, origin.longitude, there.latitude, there.longitude
        )
        ranked.append(RankedSchool(school=s, distance=distance))
    return sorted(ranked, key=lambda r: r.distance)
