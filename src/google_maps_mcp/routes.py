import logging
from typing import Any, Dict, List, Optional

from mcp import types

from google_maps_mcp.client import COMPUTE_ROUTES_URL, ROUTE_MATRIX_URL, GoogleMapsClient
from google_maps_mcp.results import error_result, text_result, upstream_message
from google_maps_mcp.waypoints import (
    UNKNOWN_DISTANCE,
    UNKNOWN_DURATION,
    apply_routing_preference,
    distance_info,
    duration_info,
    to_waypoint,
    travel_mode,
)

logger = logging.getLogger(__name__)

_MATRIX_FIELDS = "originIndex,destinationIndex,status,distanceMeters,duration"

_ROUTE_FIELDS = ",".join([
    "routes.description",
    "routes.distanceMeters",
    "routes.duration",
    "routes.staticDuration",
    "routes.legs.steps.distanceMeters",
    "routes.legs.steps.staticDuration",
    "routes.legs.steps.navigationInstruction",
    "routes.legs.steps.travelAdvisory",
])


def _element_status(status: Any) -> str:
    # Per-element status is a google.rpc.Status; an empty object means OK
    if isinstance(status, dict):
        if status.get("code"):
            return status.get("message") or str(status["code"])
        return "OK"
    return status or "OK"


def _missing_element() -> Dict[str, Any]:
    return {
        "status": "NOT_FOUND",
        "duration": {"text": UNKNOWN_DURATION, "value": 0},
        "distance": {"text": UNKNOWN_DISTANCE, "value": None},
    }


def assemble_matrix(items: List[Dict[str, Any]], n_origins: int, n_destinations: int) -> List[Dict[str, Any]]:
    """
      Rebuild the flat computeRouteMatrix reply as rows x elements.
      Args:
        items (List[Dict[str, Any]]): Route matrix elements tagged with originIndex/destinationIndex.
        n_origins (int): Number of origins sent.
        n_destinations (int): Number of destinations sent.
      Returns:
        rows (List[Dict[str, Any]]): Exactly n_origins rows of n_destinations elements each.
    """
    rows: List[List[Optional[Dict[str, Any]]]] = [[None] * n_destinations for _ in range(n_origins)]
    for item in items:
        # Zero indexes are omitted from the JSON encoding
        i = item.get("originIndex", 0)
        j = item.get("destinationIndex", 0)
        if not (0 <= i < n_origins and 0 <= j < n_destinations):
            logger.warning(f"Dropping route matrix element with out-of-range index ({i}, {j})")
            continue
        rows[i][j] = {
            "status": _element_status(item.get("status")),
            "duration": duration_info(item.get("duration")),
            "distance": distance_info(item.get("distanceMeters")),
        }
    return [
        {"elements": [cell if cell is not None else _missing_element() for cell in row]}
        for row in rows
    ]


async def distance_matrix(client: GoogleMapsClient,
                          origins: List[str],
                          destinations: List[str],
                          mode: Optional[str] = None) -> types.CallToolResult:
    """
      Compute travel distance and time for every origin/destination pair via Routes v2.
      Args:
        client (GoogleMapsClient): Shared API client.
        origins (List[str]): Origin addresses or "lat,lng" strings.
        destinations (List[str]): Destination addresses or "lat,lng" strings.
        mode (Optional[str]): driving, walking, bicycling, transit or two_wheeler.
      Returns:
        result (CallToolResult): {origin_addresses, destination_addresses, rows}.
    """
    google_mode = travel_mode(mode)
    body: Dict[str, Any] = {
        "origins": [{"waypoint": to_waypoint(o)} for o in origins],
        "destinations": [{"waypoint": to_waypoint(d)} for d in destinations],
        "travelMode": google_mode,
    }
    apply_routing_preference(body, google_mode)

    resp = await client.fielded_post(ROUTE_MATRIX_URL, body, _MATRIX_FIELDS)
    data = resp.json()
    first = data[0] if isinstance(data, list) and data else data
    if resp.status_code != 200 or not isinstance(data, list) or (isinstance(first, dict) and "error" in first):
        message = upstream_message(data, resp.reason_phrase or "Unknown error")
        logger.warning(f"Distance matrix request failed: {message}")
        return error_result(f"Distance matrix request failed: {message}")

    return text_result({
        "origin_addresses": origins,
        "destination_addresses": destinations,
        "rows": assemble_matrix(data, len(origins), len(destinations)),
    })


def _step(step: Dict[str, Any], google_mode: str) -> Dict[str, Any]:
    instructions = (step.get("navigationInstruction") or {}).get("instructions") \
        or ((step.get("travelAdvisory") or {}).get("text") or {}).get("text") \
        or ""
    return {
        "instructions": instructions,
        "distance": distance_info(step.get("distanceMeters")),
        "duration": duration_info(step.get("staticDuration")),
        "travel_mode": google_mode,
    }


def _route(route: Dict[str, Any], google_mode: str) -> Dict[str, Any]:
    legs = route.get("legs") or [{}]
    return {
        "summary": route.get("description") or "Route",
        "distance": distance_info(route.get("distanceMeters")),
        "duration": duration_info(route.get("duration"), route.get("staticDuration")),
        "steps": [_step(s, google_mode) for s in legs[0].get("steps", [])],
    }


async def directions(client: GoogleMapsClient,
                     origin: str,
                     destination: str,
                     mode: Optional[str] = None) -> types.CallToolResult:
    """
      Get directions between two points via Routes v2 computeRoutes.
      Args:
        client (GoogleMapsClient): Shared API client.
        origin (str): Starting address or "lat,lng".
        destination (str): Ending address or "lat,lng".
        mode (Optional[str]): driving, walking, bicycling, transit or two_wheeler.
      Returns:
        result (CallToolResult): {routes: [{summary, distance, duration, steps}]}; only the first leg's steps.
    """
    google_mode = travel_mode(mode)
    body: Dict[str, Any] = {
        "origin": to_waypoint(origin),
        "destination": to_waypoint(destination),
        "travelMode": google_mode,
        "computeAlternativeRoutes": False,
        "routeModifiers": {
            "avoidTolls": False,
            "avoidHighways": False,
            "avoidFerries": False,
        },
        "languageCode": "en-US",
    }
    apply_routing_preference(body, google_mode)

    resp = await client.fielded_post(COMPUTE_ROUTES_URL, body, _ROUTE_FIELDS)
    data = resp.json()
    if resp.status_code != 200 or "error" in data:
        message = upstream_message(data, resp.reason_phrase or "No routes found")
        logger.warning(f"Directions request failed: {message}")
        return error_result(f"Directions request failed: {message}")

    return text_result({
        "routes": [_route(r, google_mode) for r in data.get("routes", [])],
    })
