"""Static tool descriptors served verbatim in response to `tools/list`."""

from typing import Tuple

from mcp import types

_TRAVEL_MODE_PROPERTY = {
    "type": "string",
    "description": "Travel mode (driving, walking, bicycling, transit, two_wheeler)",
    "enum": ["driving", "walking", "bicycling", "transit", "two_wheeler"],
}

_LAT_LNG_PROPERTIES = {
    "latitude": {"type": "number"},
    "longitude": {"type": "number"},
}

GEOCODE_TOOL = types.Tool(
    name="maps_geocode",
    description="Convert an address into geographic coordinates",
    inputSchema={
        "type": "object",
        "properties": {
            "address": {"type": "string", "description": "The address to geocode"},
        },
        "required": ["address"],
    },
)

REVERSE_GEOCODE_TOOL = types.Tool(
    name="maps_reverse_geocode",
    description="Convert coordinates into an address",
    inputSchema={
        "type": "object",
        "properties": {
            "latitude": {"type": "number", "description": "Latitude coordinate"},
            "longitude": {"type": "number", "description": "Longitude coordinate"},
        },
        "required": ["latitude", "longitude"],
    },
)

SEARCH_PLACES_TOOL = types.Tool(
    name="maps_search_places",
    description="Search for places using Google Places API",
    inputSchema={
        "type": "object",
        "properties": {
            "query": {"type": "string", "description": "Search query"},
            "location": {
                "type": "object",
                "properties": _LAT_LNG_PROPERTIES,
                "description": "Optional center point for the search",
            },
            "radius": {"type": "number", "description": "Search radius in meters (max 50000)"},
        },
        "required": ["query"],
    },
)

PLACE_DETAILS_TOOL = types.Tool(
    name="maps_place_details",
    description="Get detailed information about a specific place",
    inputSchema={
        "type": "object",
        "properties": {
            "place_id": {"type": "string", "description": "The place ID to get details for"},
        },
        "required": ["place_id"],
    },
)

DISTANCE_MATRIX_TOOL = types.Tool(
    name="maps_distance_matrix",
    description="Calculate travel distance and time for multiple origins and destinations",
    inputSchema={
        "type": "object",
        "properties": {
            "origins": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Array of origin addresses or coordinates",
            },
            "destinations": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Array of destination addresses or coordinates",
            },
            "mode": _TRAVEL_MODE_PROPERTY,
        },
        "required": ["origins", "destinations"],
    },
)

ELEVATION_TOOL = types.Tool(
    name="maps_elevation",
    description="Get elevation data for locations on the earth",
    inputSchema={
        "type": "object",
        "properties": {
            "locations": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": _LAT_LNG_PROPERTIES,
                    "required": ["latitude", "longitude"],
                },
                "description": "Array of locations to get elevation for",
            },
        },
        "required": ["locations"],
    },
)

DIRECTIONS_TOOL = types.Tool(
    name="maps_directions",
    description="Get directions between two points",
    inputSchema={
        "type": "object",
        "properties": {
            "origin": {"type": "string", "description": "Starting point address or coordinates"},
            "destination": {"type": "string", "description": "Ending point address or coordinates"},
            "mode": _TRAVEL_MODE_PROPERTY,
        },
        "required": ["origin", "destination"],
    },
)

MAPS_TOOLS: Tuple[types.Tool, ...] = (
    GEOCODE_TOOL,
    REVERSE_GEOCODE_TOOL,
    SEARCH_PLACES_TOOL,
    PLACE_DETAILS_TOOL,
    DISTANCE_MATRIX_TOOL,
    ELEVATION_TOOL,
    DIRECTIONS_TOOL,
)
