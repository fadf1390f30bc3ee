"""
Places API (New) transcoders.

Responses are reshaped into the flat snake_case layout of the legacy Places
API so existing callers keep working: every documented key is always present,
with "", 0, False, [] or None standing in for fields Google did not return.
"""

import logging
import re
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
from mcp import types

from google_maps_mcp.client import PLACES_V1, GoogleMapsClient
from google_maps_mcp.results import error_result, text_result, upstream_message

logger = logging.getLogger(__name__)

SEARCH_TEXT_URL = f"{PLACES_V1}/places:searchText"

_SEARCH_FIELDS = ",".join([
    "places.displayName",
    "places.formattedAddress",
    "places.location",
    "places.id",
    "places.rating",
    "places.types",
])

_DETAILS_FIELDS = ",".join([
    "name", "id", "displayName", "types", "primaryType",
    "primaryTypeDisplayName", "formattedAddress", "shortFormattedAddress",
    "addressComponents", "nationalPhoneNumber", "internationalPhoneNumber",
    "location", "viewport", "rating", "userRatingCount", "googleMapsUri",
    "websiteUri", "regularOpeningHours", "currentOpeningHours",
    "photos", "businessStatus", "priceLevel", "reviews",
    "paymentOptions", "accessibilityOptions", "reservable",
    "dineIn", "takeout", "delivery", "servesBreakfast", "servesLunch",
    "servesDinner", "servesBrunch", "editorialSummary", "plusCode",
    "iconMaskBaseUri", "iconBackgroundColor",
])

PRICE_LEVELS = {
    "PRICE_LEVEL_FREE": 0,
    "PRICE_LEVEL_INEXPENSIVE": 1,
    "PRICE_LEVEL_MODERATE": 2,
    "PRICE_LEVEL_EXPENSIVE": 3,
    "PRICE_LEVEL_VERY_EXPENSIVE": 4,
}

_PHOTO_PREFIX_RE = re.compile(r"^places/[^/]+/photos/")

# (response key, output key) pairs for plain boolean attributes
_BOOLEAN_ATTRIBUTES = (
    ("dineIn", "dine_in"),
    ("takeout", "takeout"),
    ("delivery", "delivery"),
    ("reservable", "reservable"),
    ("servesBreakfast", "serves_breakfast"),
    ("servesLunch", "serves_lunch"),
    ("servesDinner", "serves_dinner"),
    ("servesBrunch", "serves_brunch"),
)

_PAYMENT_OPTIONS = (
    ("acceptsCreditCards", "accepts_credit_cards"),
    ("acceptsDebitCards", "accepts_debit_cards"),
    ("acceptsCashOnly", "accepts_cash_only"),
    ("acceptsNfc", "accepts_nfc"),
)

_ACCESSIBILITY_OPTIONS = (
    ("wheelchairAccessibleEntrance", "wheelchair_accessible_entrance"),
    ("wheelchairAccessibleParking", "wheelchair_accessible_parking"),
    ("wheelchairAccessibleRestroom", "wheelchair_accessible_restroom"),
    ("wheelchairAccessibleSeating", "wheelchair_accessible_seating"),
)


def price_level_value(price_level: Optional[str]) -> int:
    """Map a priceLevel enum name to 0-4; anything unrecognised is 0."""
    return PRICE_LEVELS.get(price_level or "", 0)


def photo_reference(resource_name: str) -> str:
    """Strip the "places/<id>/photos/" prefix from a photo resource name."""
    return _PHOTO_PREFIX_RE.sub("", resource_name or "")


def _lat_lng(point: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not point:
        return None
    return {"lat": point.get("latitude"), "lng": point.get("longitude")}


def _hhmm(point: Dict[str, Any]) -> str:
    # Google omits zero-valued hour/minute/day fields
    return f"{point.get('hour', 0):02d}{point.get('minute', 0):02d}"


def _period(period: Dict[str, Any]) -> Dict[str, Any]:
    open_ = period.get("open") or {}
    close = period.get("close")
    return {
        "open": {"day": open_.get("day", 0), "time": _hhmm(open_)},
        "close": {"day": close.get("day", 0), "time": _hhmm(close)} if close else None,
    }


def _flags(source: Optional[Dict[str, Any]], names) -> Dict[str, bool]:
    if not source:
        return {}
    return {out: bool(source.get(key, False)) for key, out in names}


def _review(review: Dict[str, Any]) -> Dict[str, Any]:
    author = review.get("authorAttribution") or {}
    return {
        "author_name": author.get("displayName", ""),
        "author_url": author.get("uri", ""),
        "profile_photo_url": author.get("photoUri", ""),
        "rating": review.get("rating", 0),
        "relative_time_description": review.get("relativePublishTimeDescription", ""),
        "text": (review.get("text") or {}).get("text", ""),
        "time": review.get("publishTime", ""),
        "google_maps_uri": review.get("googleMapsUri", ""),
    }


def _photo(photo: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "photo_reference": photo_reference(photo.get("name", "")),
        "height": photo.get("heightPx", 0),
        "width": photo.get("widthPx", 0),
        "html_attributions": [
            f'<a href="{attr.get("uri", "")}">{attr.get("displayName", "")}</a>'
            for attr in photo.get("authorAttributions", [])
        ],
    }


def format_place_details(place: Dict[str, Any]) -> Dict[str, Any]:
    """Reshape a Places (New) Place resource into the legacy details layout."""
    viewport = place.get("viewport")
    plus_code = place.get("plusCode")
    regular_hours = place.get("regularOpeningHours")
    current_hours = place.get("currentOpeningHours")

    details = {
        "name": (place.get("displayName") or {}).get("text", ""),
        "place_id": place.get("id", ""),
        "formatted_address": place.get("formattedAddress", ""),
        "formatted_phone_number": place.get("nationalPhoneNumber", ""),
        "international_phone_number": place.get("internationalPhoneNumber", ""),
        "website": place.get("websiteUri", ""),
        "rating": place.get("rating", 0),
        "user_ratings_total": place.get("userRatingCount", 0),
        "url": place.get("googleMapsUri", ""),
        "address_components": place.get("addressComponents", []),
        "geometry": {
            "location": _lat_lng(place.get("location")),
            "viewport": {
                "northeast": _lat_lng(viewport.get("high")),
                "southwest": _lat_lng(viewport.get("low")),
            } if viewport else None,
        },
        "types": place.get("types", []),
        "primary_type": place.get("primaryType", ""),
        "editorial_summary": (place.get("editorialSummary") or {}).get("text", ""),
        "icon": place.get("iconMaskBaseUri", ""),
        "icon_background_color": place.get("iconBackgroundColor", ""),
        "plus_code": {
            "global_code": plus_code.get("globalCode", ""),
            "compound_code": plus_code.get("compoundCode", ""),
        } if plus_code else None,
        "business_status": place.get("businessStatus", ""),
        "price_level": price_level_value(place.get("priceLevel")),
        "opening_hours": {
            "open_now": regular_hours.get("openNow", False),
            "weekday_text": regular_hours.get("weekdayDescriptions", []),
            "periods": [_period(p) for p in regular_hours.get("periods", [])],
        } if regular_hours else None,
        "current_opening_hours": {
            "open_now": current_hours.get("openNow", False),
            "weekday_text": current_hours.get("weekdayDescriptions", []),
        } if current_hours else None,
        "reviews": [_review(r) for r in place.get("reviews", [])],
        "photos": [_photo(p) for p in place.get("photos", [])],
    }
    for key, out in _BOOLEAN_ATTRIBUTES:
        details[out] = bool(place.get(key, False))
    details["payment_options"] = _flags(place.get("paymentOptions"), _PAYMENT_OPTIONS)
    details["accessibility_options"] = _flags(place.get("accessibilityOptions"), _ACCESSIBILITY_OPTIONS)
    return details


async def search_places(client: GoogleMapsClient,
                        query: str,
                        location: Optional[Dict[str, float]] = None,
                        radius: Optional[float] = None) -> types.CallToolResult:
    """
      Search for places with a free-text query via Places Text Search (New).
      Args:
        client (GoogleMapsClient): Shared API client.
        query (str): Text query describing the place.
        location (Optional[Dict[str, float]]): Bias center with "latitude"/"longitude".
        radius (Optional[float]): Bias radius in meters; only used together with location.
      Returns:
        result (CallToolResult): {places: [{name, formatted_address, location, place_id, rating, types}]}.
    """
    body: Dict[str, Any] = {"textQuery": query}
    if location and radius:
        body["locationBias"] = {
            "circle": {
                "center": {"latitude": location["latitude"], "longitude": location["longitude"]},
                "radius": radius,
            }
        }

    resp = await client.fielded_post(SEARCH_TEXT_URL, body, _SEARCH_FIELDS)
    data = resp.json()
    if resp.status_code != 200 or "error" in data:
        message = upstream_message(data, "Unknown error")
        logger.warning(f"Place search failed: {message}")
        return error_result(f"Place search failed: {message}")

    places = [
        {
            "name": (p.get("displayName") or {}).get("text", ""),
            "formatted_address": p.get("formattedAddress", ""),
            "location": _lat_lng(p.get("location")) or {"lat": None, "lng": None},
            "place_id": p.get("id", ""),
            "rating": p.get("rating", 0),
            "types": p.get("types", []),
        }
        for p in data.get("places", [])
    ]
    return text_result({"places": places})


async def place_details(client: GoogleMapsClient, place_id: str) -> types.CallToolResult:
    """
      Fetch place details by place ID using Places API (New).
      Args:
        client (GoogleMapsClient): Shared API client.
        place_id (str): Google Place ID.
      Returns:
        result (CallToolResult): Legacy-shaped place details.
    """
    url = f"{PLACES_V1}/places/{quote(place_id, safe='')}"
    try:
        resp = await client.fielded_get(url, _DETAILS_FIELDS)
        logger.info(f"Place details response status: {resp.status_code}")
        if not resp.is_success:
            details = resp.text[:200]
            logger.error(f"Place details error body: {resp.text}")
            return error_result(
                f"Place details request failed: HTTP {resp.status_code} - {resp.reason_phrase}\n"
                f"Details: {details}"
            )
        place = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Place details error: {e}")
        return error_result(f"Place details request failed: {e}")

    return text_result(format_place_details(place))
