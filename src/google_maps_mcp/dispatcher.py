import logging
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Tuple, Type

from mcp import types
from pydantic import BaseModel, ValidationError

from google_maps_mcp.client import GoogleMapsClient
from google_maps_mcp.config import Settings
from google_maps_mcp.elevation import elevation
from google_maps_mcp.exceptions import ToolInputError
from google_maps_mcp.geocoding import geocode, reverse_geocode
from google_maps_mcp.places import place_details, search_places
from google_maps_mcp.results import error_result
from google_maps_mcp.routes import directions, distance_matrix
from google_maps_mcp.schemas import (
    DirectionsArgs,
    DistanceMatrixArgs,
    ElevationArgs,
    GeocodeArgs,
    PlaceDetailsArgs,
    ReverseGeocodeArgs,
    SearchPlacesArgs,
)
from google_maps_mcp.tools import MAPS_TOOLS

logger = logging.getLogger(__name__)

Transcoder = Callable[..., Awaitable[types.CallToolResult]]

# tool name -> (argument model, transcoder)
_ROUTES: Dict[str, Tuple[Type[BaseModel], Transcoder]] = {
    "maps_geocode": (GeocodeArgs, geocode),
    "maps_reverse_geocode": (ReverseGeocodeArgs, reverse_geocode),
    "maps_search_places": (SearchPlacesArgs, search_places),
    "maps_place_details": (PlaceDetailsArgs, place_details),
    "maps_distance_matrix": (DistanceMatrixArgs, distance_matrix),
    "maps_elevation": (ElevationArgs, elevation),
    "maps_directions": (DirectionsArgs, directions),
}


def _validate(name: str, model: Type[BaseModel], arguments: Mapping[str, Any]) -> Dict[str, Any]:
    try:
        return model.model_validate(dict(arguments)).model_dump()
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise ToolInputError(name, details) from None


class Dispatcher:
    """Route tool calls to transcoders and fold every failure into a CallToolResult."""

    def __init__(self, settings: Settings, client: Optional[GoogleMapsClient] = None):
        self.settings = settings
        self.client = client or GoogleMapsClient(settings)

    def list_tools(self) -> List[types.Tool]:
        return list(MAPS_TOOLS)

    async def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> types.CallToolResult:
        route = _ROUTES.get(name)
        if route is None:
            logger.warning(f"Unknown tool requested: {name}")
            return error_result(f"Unknown tool: {name}")

        model, transcoder = route
        try:
            kwargs = _validate(name, model, arguments or {})
        except ToolInputError as e:
            logger.warning(str(e))
            return error_result(str(e))

        logger.info(f"[{name}] calling upstream")
        try:
            return await transcoder(self.client, **kwargs)
        except Exception as e:
            logger.exception(f"[{name}] failed: {e}")
            return error_result(f"Error: {e}")

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "Dispatcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
