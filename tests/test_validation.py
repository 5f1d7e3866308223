"""Unit tests for boundary validation of school fields and coordinates."""

import math

import pytest

from src.domain.entities import Location
from src.domain.validation import (
    InvalidFieldError,
    parse_location,
    parse_new_school,
)


def _payload(**overrides):
    body = {
        "name": "Campion School",
        "address": "13 Cooperage Road, Fort",
        "latitude": 18.9255,
        "longitude": 72.8292,
    }
    body.update(overrides)
    return body


class TestParseNewSchool:
    def test_valid_payload(self):
        school = parse_new_school(_payload())
        assert school.name == "Campion School"
        assert school.location == Location(18.9255, 72.8292)

    def test_trims_text(self):
        school = parse_new_school(_payload(name="  Campion  ", address="\tFort \n"))
        assert school.name == "Campion"
        assert school.address == "Fort"

    def test_numeric_strings_are_coerced(self):
        school = parse_new_school(_payload(latitude=" 18.5 ", longitude="-72"))
        assert school.location == Location(18.5, -72.0)

    def test_integer_coordinates(self):
        school = parse_new_school(_payload(latitude=90, longitude=-180))
        assert school.location == Location(90.0, -180.0)

    @pytest.mark.parametrize("name", ["", "   ", None, 42, ["x"]])
    def test_bad_name(self, name):
        with pytest.raises(InvalidFieldError) as exc:
            parse_new_school(_payload(name=name))
        assert exc.value.field == "name"
        assert "name" in exc.value.message

    def test_missing_address(self):
        body = _payload()
        del body["address"]
        with pytest.raises(InvalidFieldError) as exc:
            parse_new_school(body)
        assert exc.value.field == "address"

    @pytest.mark.parametrize(
        "latitude",
        [91, -90.0001, "abc", "", None, True, math.nan, math.inf, "nan", 10**400],
    )
    def test_bad_latitude(self, latitude):
        with pytest.raises(InvalidFieldError) as exc:
            parse_new_school(_payload(latitude=latitude))
        assert exc.value.field == "latitude"
        assert exc.value.message == "Invalid latitude (must be between -90 and 90)."

    @pytest.mark.parametrize("longitude", [180.5, -181, "east", {"v": 1}])
    def test_bad_longitude(self, longitude):
        with pytest.raises(InvalidFieldError) as exc:
            parse_new_school(_payload(longitude=longitude))
        assert exc.value.field == "longitude"

    def test_first_failure_wins(self):
        with pytest.raises(InvalidFieldError) as exc:
            parse_new_school(_payload(name="", address="", latitude=999))
        assert exc.value.field == "name"


class TestParseLocation:
    def test_caller_field_names_in_message(self):
        with pytest.raises(InvalidFieldError) as exc:
            parse_location("10", "200", lat_field="userLat", lon_field="userLon")
        assert exc.value.field == "userLon"
        assert "userLon" in exc.value.message
        assert "longitude" in exc.value.message

    def test_missing_latitude(self):
        with pytest.raises(InvalidFieldError) as exc:
            parse_location(None, "0", lat_field="userLat", lon_field="userLon")
        assert exc.value.field == "userLat"

    def test_bounds_are_inclusive(self):
        assert parse_location("-90", "180") == Location(-90.0, 180.0)
