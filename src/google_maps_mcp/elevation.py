import logging
from typing import Dict, List

from mcp import types

from google_maps_mcp.client import ELEVATION_URL, GoogleMapsClient
from google_maps_mcp.results import error_result, text_result, upstream_message

logger = logging.getLogger(__name__)


async def elevation(client: GoogleMapsClient, locations: List[Dict[str, float]]) -> types.CallToolResult:
    """
      Retrieve elevation for one or more discrete locations.
      Args:
        client (GoogleMapsClient): Shared API client.
        locations (List[Dict[str, float]]): Points with "latitude" and "longitude" keys.
      Returns:
        result (CallToolResult): {results: [{elevation, location, resolution}]}.
    """
    path = "|".join(f"{loc['latitude']},{loc['longitude']}" for loc in locations)
    resp = await client.legacy_get(ELEVATION_URL, {"locations": path})
    data = resp.json()
    status = data.get("status", f"HTTP {resp.status_code}")
    if status != "OK":
        message = upstream_message(data, status)
        logger.warning(f"Elevation request failed: {message}")
        return error_result(f"Elevation request failed: {message}")

    return text_result({
        "results": [
            {
                "elevation": r.get("elevation"),
                "location": r.get("location", {}),
                "resolution": r.get("resolution"),
            }
            for r in data.get("results", [])
        ]
    })
