"""
Google Maps Platform MCP Server (stdio)

Tools
-----
- maps_geocode / maps_reverse_geocode  (Geocoding API)
- maps_search_places / maps_place_details  (Places API (New))
- maps_distance_matrix / maps_directions  (Routes API v2)
- maps_elevation  (Elevation API)

Requirements
------------
- Environment: GOOGLE_MAPS_API_KEY must be set
- Optional: GOOGLE_MAPS_HTTP_TIMEOUT (seconds), GOOGLE_MAPS_MCP_LOG_LEVEL

Register in mcp_servers.json
----------------------------
{
  "servers": {
    "google-maps": {
      "command": "google-maps-mcp",
      "env": {"GOOGLE_MAPS_API_KEY": "${YOUR_KEY}"}
    }
  }
}
"""

import argparse
import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from google_maps_mcp import __version__
from google_maps_mcp.config import Settings
from google_maps_mcp.dispatcher import Dispatcher
from google_maps_mcp.exceptions import ConfigurationError

SERVER_NAME = "mcp-server/google-maps"

logger = logging.getLogger("google_maps_mcp")


def build_server(dispatcher: Dispatcher) -> Server:
    """Register the list/call handlers of `dispatcher` on a low-level MCP server."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return dispatcher.list_tools()

    # Arguments are validated by the Dispatcher, which keeps the error envelope uniform.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        return await dispatcher.call_tool(name, arguments)

    return server


async def run_stdio(settings: Settings) -> None:
    async with Dispatcher(settings) as dispatcher:
        server = build_server(dispatcher)
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Google Maps MCP Server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())


def configure_logging(level: str) -> None:
    # The stdio transport owns stdout; anything else there corrupts the protocol stream.
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="google-maps-mcp", description="Google Maps MCP server (stdio)")
    parser.add_argument("--log-level", dest="log_level", default=None,
                        help="Logging level; overrides GOOGLE_MAPS_MCP_LOG_LEVEL")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        configure_logging(args.log_level or "INFO")
        logger.error(str(e))
        return 1

    configure_logging(args.log_level or settings.log_level)
    try:
        asyncio.run(run_stdio(settings))
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    finally:
        logger.info("Server shutdown complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
