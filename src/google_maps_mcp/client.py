import logging
from typing import Any, Dict, Optional

import httpx

from google_maps_mcp.config import Settings

logger = logging.getLogger(__name__)

# ---------- Endpoints ----------
GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
ELEVATION_URL = "https://maps.googleapis.com/maps/api/elevation/json"
PLACES_V1 = "https://places.googleapis.com/v1"
ROUTE_MATRIX_URL = "https://routes.googleapis.com/distanceMatrix/v2:computeRouteMatrix"
COMPUTE_ROUTES_URL = "https://routes.googleapis.com/directions/v2:computeRoutes"


class GoogleMapsClient:
    """
    Thin wrapper over a shared httpx.AsyncClient that injects the API key.

    Legacy endpoints take the key as a `key` query parameter; Places (New) and
    Routes v2 take it in `X-Goog-Api-Key` together with an `X-Goog-FieldMask`.
    Responses are returned as-is so callers can inspect status codes and bodies.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = settings.api_key
        self._client = httpx.AsyncClient(timeout=settings.http_timeout, transport=transport)

    def _params_with_key(self, params: Dict[str, Any]) -> Dict[str, Any]:
        q = dict(params or {})
        q["key"] = self.api_key
        return q

    def _new_api_headers(self, field_mask: str) -> Dict[str, str]:
        return {
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-FieldMask": field_mask,
        }

    async def legacy_get(self, url: str, params: Dict[str, Any]) -> httpx.Response:
        logger.debug(f"GET {url} params={sorted(params)}")
        return await self._client.get(url, params=self._params_with_key(params))

    async def fielded_get(self, url: str, field_mask: str) -> httpx.Response:
        logger.debug(f"GET {url}")
        return await self._client.get(url, headers=self._new_api_headers(field_mask))

    async def fielded_post(self, url: str, json_body: Dict[str, Any], field_mask: str) -> httpx.Response:
        logger.debug(f"POST {url}")
        return await self._client.post(url, json=json_body, headers=self._new_api_headers(field_mask))

    async def aclose(self) -> None:
        await self._client.aclose()
