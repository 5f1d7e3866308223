"""
Boundary validation.

Request fields arrive untyped (JSON values or query strings).  The helpers
here coerce them into ``NewSchool`` / ``Location`` before any business logic
runs, stopping at the first field that fails.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from .entities import Location, NewSchool

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


class InvalidFieldError(ValueError):
    """Raised when a caller-supplied field fails a presence, type or range check."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


def parse_text(value: Any, field: str) -> str:
    """Return *value* trimmed; it must be a string with visible content."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidFieldError(field, f"Invalid or missing school {field}.")
    return value.strip()


def _to_float(value: Any) -> float | None:
    # bool is an int subclass; true/false are not coordinates
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def parse_coordinate(
    value: Any, field: str, axis: str, bounds: tuple[float, float]
) -> float:
    """Parse *value* as a finite number within *bounds* (inclusive).

    *field* is the name the caller used (``latitude``, ``userLat`` ...) and
    *axis* the coordinate it stands for; both appear in the error message.
    """
    low, high = bounds
    number = _to_float(value)
    if number is None or not low <= number <= high:
        if field == axis:
            message = f"Invalid {axis} (must be between {low:g} and {high:g})."
        else:
            message = (
                f"Invalid {field}: {axis} must be between {low:g} and {high:g}."
            )
        raise InvalidFieldError(field, message)
    return number


def parse_location(
    latitude: Any,
    longitude: Any,
    *,
    lat_field: str = "latitude",
    lon_field: str = "longitude",
) -> Location:
    lat = parse_coordinate(latitude, lat_field, "latitude", LATITUDE_RANGE)
    lon = parse_coordinate(longitude, lon_field, "longitude", LONGITUDE_RANGE)
    return Location(lat, lon)


def parse_new_school(raw: Mapping[str, Any]) -> NewSchool:
    """Validate name, address, latitude and longitude, in that order."""
    name = parse_text(raw.get("name"), "name")
    address = parse_text(raw.get("address"), "address")
    location = parse_location(raw.get("latitude"), raw.get("longitude"))
    return NewSchool(name=name, address=address, location=location)
