import json
from typing import Any

from mcp import types


def text_result(payload: Any) -> types.CallToolResult:
    """Wrap a JSON-serialisable payload as a successful tool result."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=json.dumps(payload, indent=2, ensure_ascii=False))],
        isError=False,
    )


def error_result(message: str) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=message)],
        isError=True,
    )


def upstream_message(data: Any, fallback: str) -> str:
    """Pick the most specific error text out of a Google response body."""
    if isinstance(data, list):
        data = data[0] if data else {}
    if not isinstance(data, dict):
        return fallback
    error = data.get("error")
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    if data.get("error_message"):
        return data["error_message"]
    return fallback
