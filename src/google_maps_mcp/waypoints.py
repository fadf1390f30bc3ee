"""
Helpers shared by the Routes v2 transcoders.

Waypoint strings are classified as either a "lat,lng" coordinate pair or a
free-text address. The test is a regular expression plus a range check, so a
string such as "12,34" is always read as coordinates even when the caller
meant an address. That ambiguity is accepted for compatibility.
"""

import re
from typing import Any, Dict, Optional, Tuple

_COORD_RE = re.compile(r"^-?\d{1,2}(\.\d+)?,\s*-?\d{1,3}(\.\d+)?$")

TRAVEL_MODES = {
    "driving": "DRIVE",
    "walking": "WALK",
    "bicycling": "BICYCLE",
    "transit": "TRANSIT",
    "two_wheeler": "TWO_WHEELER",
}
DEFAULT_TRAVEL_MODE = "DRIVE"

# routingPreference is only accepted for these modes
_TRAFFIC_AWARE_MODES = frozenset({"DRIVE", "TWO_WHEELER"})

UNKNOWN_DISTANCE = "Unknown distance"
UNKNOWN_DURATION = "Unknown duration"

_SAME_AS_TEXT = object()


def parse_coordinates(text: str) -> Optional[Tuple[float, float]]:
    """Return (lat, lng) if `text` is an in-range "lat,lng" pair, else None."""
    if not _COORD_RE.fullmatch(text):
        return None
    lat_text, lng_text = text.split(",", 1)
    lat, lng = float(lat_text), float(lng_text)
    if not (-90 <= lat <= 90 and -180 <= lng <= 180):
        return None
    return lat, lng


def is_coordinate(text: str) -> bool:
    return parse_coordinates(text) is not None


def to_waypoint(text: str) -> Dict[str, Any]:
    """Build a Routes v2 Waypoint from an address or "lat,lng" string."""
    coords = parse_coordinates(text)
    if coords is None:
        return {"address": text}
    lat, lng = coords
    return {"location": {"latLng": {"latitude": lat, "longitude": lng}}}


def travel_mode(mode: Optional[str]) -> str:
    """Map a tool-level mode name to a Routes v2 travelMode; unknown modes drive."""
    return TRAVEL_MODES.get(mode or "", DEFAULT_TRAVEL_MODE)


def apply_routing_preference(body: Dict[str, Any], google_mode: str) -> Dict[str, Any]:
    if google_mode in _TRAFFIC_AWARE_MODES:
        body["routingPreference"] = "TRAFFIC_AWARE"
    return body


def duration_seconds(duration: Optional[str]) -> int:
    """Convert a protobuf duration string such as "123s" to whole seconds."""
    if not duration:
        return 0
    return int(float(duration.rstrip("s")))


def duration_info(text_source: Optional[str], value_source: Any = _SAME_AS_TEXT) -> Dict[str, Any]:
    """
      Build a {text, value} duration block.
      Args:
        text_source (Optional[str]): Duration string used for the text, e.g. "123s".
        value_source (Optional[str]): Duration string used for the value; defaults to text_source; None gives 0.
      Returns:
        info (Dict[str, Any]): {"text": "123", "value": 123}, or "Unknown duration" / 0 when absent.
    """
    if value_source is _SAME_AS_TEXT:
        value_source = text_source
    return {
        "text": text_source.rstrip("s") if text_source else UNKNOWN_DURATION,
        "value": duration_seconds(value_source),
    }


def distance_info(meters: Optional[int]) -> Dict[str, Any]:
    return {
        "text": f"{meters / 1000:.1f} km" if meters else UNKNOWN_DISTANCE,
        "value": meters,
    }
