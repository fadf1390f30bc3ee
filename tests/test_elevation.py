import json

import httpx
import pytest

from google_maps_mcp.elevation import elevation


@pytest.mark.asyncio
async def test_elevation_joins_locations_and_passes_results_through(make_client) -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["locations"] = request.url.params["locations"]
        seen["key"] = request.url.params["key"]
        return httpx.Response(200, json={
            "status": "OK",
            "results": [
                {"elevation": 1608.6, "location": {"lat": 39.74, "lng": -104.98}, "resolution": 4.77},
                {"elevation": -50.79, "location": {"lat": 36.45, "lng": -116.86}, "resolution": 19.08},
            ],
        })

    client = make_client(handler)
    result = await elevation(client, locations=[
        {"latitude": 39.74, "longitude": -104.98},
        {"latitude": 36.45, "longitude": -116.86},
    ])

    assert result.isError is False
    assert seen == {"locations": "39.74,-104.98|36.45,-116.86", "key": "test-key"}
    assert json.loads(result.content[0].text) == {
        "results": [
            {"elevation": 1608.6, "location": {"lat": 39.74, "lng": -104.98}, "resolution": 4.77},
            {"elevation": -50.79, "location": {"lat": 36.45, "lng": -116.86}, "resolution": 19.08},
        ]
    }

    await client.aclose()


@pytest.mark.asyncio
async def test_elevation_failure(make_client) -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "OVER_QUERY_LIMIT", "error_message": "quota exceeded"})

    client = make_client(handler)
    result = await elevation(client, locations=[{"latitude": 0.0, "longitude": 0.0}])

    assert result.isError is True
    assert result.content[0].text == "Elevation request failed: quota exceeded"

    await client.aclose()
