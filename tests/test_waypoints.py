import pytest

from google_maps_mcp.waypoints import (
    distance_info,
    duration_info,
    duration_seconds,
    is_coordinate,
    to_waypoint,
    travel_mode,
)


@pytest.mark.parametrize("text", [
    "37.4,-122.1",
    "37.4, -122.1",
    "-90,180",
    "90,-180",
    "0,0",
    "12,34",
    "45.123456,123.654321",
])
def test_coordinate_strings_are_recognised(text) -> None:
    assert is_coordinate(text)


@pytest.mark.parametrize("text", [
    "1600 Amphitheatre Parkway",
    "91,0",
    "45,181",
    "45.5,-190.25",
    "+37.4,-122.1",
    "37.4;-122.1",
    "37.4,-122.1,5",
    " 37.4,-122.1",
    "Paris, France",
    "",
])
def test_other_strings_are_addresses(text) -> None:
    assert not is_coordinate(text)


def test_to_waypoint_builds_lat_lng_or_address() -> None:
    assert to_waypoint("37.4, -122.1") == {"location": {"latLng": {"latitude": 37.4, "longitude": -122.1}}}
    assert to_waypoint("Mountain View, CA") == {"address": "Mountain View, CA"}


@pytest.mark.parametrize("mode, expected", [
    ("driving", "DRIVE"),
    ("walking", "WALK"),
    ("bicycling", "BICYCLE"),
    ("transit", "TRANSIT"),
    ("two_wheeler", "TWO_WHEELER"),
    (None, "DRIVE"),
    ("flying", "DRIVE"),
    ("WALKING", "DRIVE"),
])
def test_travel_mode_mapping(mode, expected) -> None:
    assert travel_mode(mode) == expected


def test_duration_parsing() -> None:
    assert duration_seconds("123s") == 123
    assert duration_seconds("0s") == 0
    assert duration_seconds(None) == 0
    assert duration_info("123s") == {"text": "123", "value": 123}
    assert duration_info(None) == {"text": "Unknown duration", "value": 0}
    assert duration_info("600s", "540s") == {"text": "600", "value": 540}


def test_distance_info() -> None:
    assert distance_info(12340) == {"text": "12.3 km", "value": 12340}
    assert distance_info(None) == {"text": "Unknown distance", "value": None}


def test_route_duration_value_without_static_duration_is_zero() -> None:
    assert duration_info("900s", None) == {"text": "900", "value": 0}
