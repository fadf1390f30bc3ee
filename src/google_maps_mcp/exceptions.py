class GoogleMapsMCPError(Exception):
    """Base exception for the Google Maps MCP server."""
    pass

class ConfigurationError(GoogleMapsMCPError):
    """Raised when the server cannot be configured from its environment."""
    pass

class ToolInputError(GoogleMapsMCPError):
    """Raised when tool arguments do not match the tool's input schema."""

    def __init__(self, tool_name: str, details: str):
        super().__init__(f"Invalid arguments for {tool_name}: {details}")
        self.tool_name = tool_name
        self.details = details
