"""
Google Maps Platform MCP server.

Exposes geocoding, Places (New) and Routes v2 endpoints as MCP tools over stdio.
"""

__version__ = "0.1.0"
