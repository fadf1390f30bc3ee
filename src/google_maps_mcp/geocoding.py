import logging

from mcp import types

from google_maps_mcp.client import GEOCODE_URL, GoogleMapsClient
from google_maps_mcp.results import error_result, text_result, upstream_message

logger = logging.getLogger(__name__)


async def _lookup(client: GoogleMapsClient, params: dict, operation: str):
    """Run one legacy Geocoding request; return (first_result, None) or (None, error_result)."""
    resp = await client.legacy_get(GEOCODE_URL, params)
    data = resp.json()
    status = data.get("status", f"HTTP {resp.status_code}")
    results = data.get("results") or []
    if status != "OK" or not results:
        message = upstream_message(data, status if status != "OK" else "ZERO_RESULTS")
        logger.warning(f"{operation} failed: {message}")
        return None, error_result(f"{operation} failed: {message}")
    return results[0], None


async def geocode(client: GoogleMapsClient, address: str) -> types.CallToolResult:
    """
      Forward geocode a human-readable address using Google Geocoding API.
      Args:
        client (GoogleMapsClient): Shared API client.
        address (str): Free-text address to geocode.
      Returns:
        result (CallToolResult): {location, formatted_address, place_id} of the first match.
    """
    first, error = await _lookup(client, {"address": address}, "Geocoding")
    if error is not None:
        return error
    return text_result({
        "location": first.get("geometry", {}).get("location", {}),
        "formatted_address": first.get("formatted_address", ""),
        "place_id": first.get("place_id", ""),
    })


async def reverse_geocode(client: GoogleMapsClient, latitude: float, longitude: float) -> types.CallToolResult:
    """
      Reverse geocode coordinates into an address using Google Geocoding API.
      Args:
        client (GoogleMapsClient): Shared API client.
        latitude (float): Latitude of the location.
        longitude (float): Longitude of the location.
      Returns:
        result (CallToolResult): {formatted_address, place_id, address_components} of the first match.
    """
    first, error = await _lookup(client, {"latlng": f"{latitude},{longitude}"}, "Reverse geocoding")
    if error is not None:
        return error
    return text_result({
        "formatted_address": first.get("formatted_address", ""),
        "place_id": first.get("place_id", ""),
        "address_components": first.get("address_components", []),
    })
