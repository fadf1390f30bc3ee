import json

import httpx
import pytest

from google_maps_mcp.dispatcher import Dispatcher
from google_maps_mcp.tools import MAPS_TOOLS


def _dispatcher(settings, make_client, handler) -> Dispatcher:
    return Dispatcher(settings, client=make_client(handler))


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected upstream call to {request.url}")


def test_list_tools_returns_registry_in_order(settings, make_client) -> None:
    dispatcher = _dispatcher(settings, make_client, _unreachable)

    names = [tool.name for tool in dispatcher.list_tools()]

    assert names == [
        "maps_geocode",
        "maps_reverse_geocode",
        "maps_search_places",
        "maps_place_details",
        "maps_distance_matrix",
        "maps_elevation",
        "maps_directions",
    ]
    assert dispatcher.list_tools() == list(MAPS_TOOLS)


@pytest.mark.asyncio
async def test_unknown_tool_is_rejected_before_dispatch(settings, make_client) -> None:
    async with _dispatcher(settings, make_client, _unreachable) as dispatcher:
        result = await dispatcher.call_tool("maps_nonexistent", {})

    assert result.isError is True
    assert result.content[0].text == "Unknown tool: maps_nonexistent"


@pytest.mark.asyncio
async def test_invalid_arguments_are_reported(settings, make_client) -> None:
    async with _dispatcher(settings, make_client, _unreachable) as dispatcher:
        missing = await dispatcher.call_tool("maps_geocode", {})
        out_of_range = await dispatcher.call_tool("maps_reverse_geocode", {"latitude": 120, "longitude": 0})
        empty_list = await dispatcher.call_tool("maps_elevation", {"locations": []})

    assert missing.isError is True
    assert missing.content[0].text.startswith("Invalid arguments for maps_geocode: address")
    assert out_of_range.isError is True
    assert "latitude" in out_of_range.content[0].text
    assert empty_list.isError is True
    assert empty_list.content[0].text.startswith("Invalid arguments for maps_elevation: locations")


@pytest.mark.asyncio
async def test_geocode_round_trip_through_dispatcher(settings, make_client) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={
            "status": "OK",
            "results": [{
                "place_id": "P1",
                "formatted_address": "1600 Amphitheatre Pkwy, Mountain View, CA",
                "geometry": {"location": {"lat": 37.4, "lng": -122.1}},
            }],
        })

    async with _dispatcher(settings, make_client, handler) as dispatcher:
        result = await dispatcher.call_tool("maps_geocode", {"address": "1600 Amphitheatre Parkway"})

    assert result.isError is False
    assert json.loads(result.content[0].text) == {
        "location": {"lat": 37.4, "lng": -122.1},
        "formatted_address": "1600 Amphitheatre Pkwy, Mountain View, CA",
        "place_id": "P1",
    }


@pytest.mark.asyncio
async def test_unknown_travel_mode_falls_back_to_drive(settings, make_client) -> None:
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"routes": []})

    async with _dispatcher(settings, make_client, handler) as dispatcher:
        result = await dispatcher.call_tool("maps_directions", {"origin": "A", "destination": "B", "mode": "flying"})

    assert result.isError is False
    assert bodies[0]["travelMode"] == "DRIVE"


@pytest.mark.asyncio
async def test_network_failure_becomes_error_result(settings, make_client) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    async with _dispatcher(settings, make_client, handler) as dispatcher:
        result = await dispatcher.call_tool("maps_geocode", {"address": "anywhere"})

    assert result.isError is True
    assert result.content[0].text == "Error: timed out"


@pytest.mark.asyncio
async def test_malformed_json_becomes_error_result(settings, make_client) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>not json</html>")

    async with _dispatcher(settings, make_client, handler) as dispatcher:
        result = await dispatcher.call_tool("maps_elevation", {"locations": [{"latitude": 1, "longitude": 2}]})

    assert result.isError is True
    assert result.content[0].text.startswith("Error: ")


@pytest.mark.asyncio
async def test_place_id_with_path_separators_is_rejected(settings, make_client) -> None:
    async with _dispatcher(settings, make_client, _unreachable) as dispatcher:
        result = await dispatcher.call_tool("maps_place_details", {"place_id": "x/../y"})

    assert result.isError is True
    assert result.content[0].text.startswith("Invalid arguments for maps_place_details: place_id")
