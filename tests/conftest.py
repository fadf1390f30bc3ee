import httpx
import pytest

from google_maps_mcp.client import GoogleMapsClient
from google_maps_mcp.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key")


@pytest.fixture
def make_client(settings):
    """Build a GoogleMapsClient whose requests are answered by `handler`."""
    def _make(handler) -> GoogleMapsClient:
        return GoogleMapsClient(settings, transport=httpx.MockTransport(handler))
    return _make
