import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from google_maps_mcp.exceptions import ConfigurationError

# ---------- Environment ----------
API_KEY_ENV = "GOOGLE_MAPS_API_KEY"
HTTP_TIMEOUT_ENV = "GOOGLE_MAPS_HTTP_TIMEOUT"
LOG_LEVEL_ENV = "GOOGLE_MAPS_MCP_LOG_LEVEL"

DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseModel):
    """Process-wide configuration, read once at startup and passed to the Dispatcher."""

    api_key: str = Field(min_length=1)
    http_timeout: float = Field(default=DEFAULT_HTTP_TIMEOUT, gt=0)
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = {"frozen": True}

    @field_validator("api_key")
    @classmethod
    def _strip_key(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("API key must not be blank")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
          Build settings from environment variables.
          Args:
            environ (Optional[Mapping[str, str]]): Mapping to read instead of os.environ.
          Returns:
            settings (Settings): Validated configuration.
          Raises:
            ConfigurationError: If GOOGLE_MAPS_API_KEY is missing or a value is malformed.
        """
        env = os.environ if environ is None else environ
        api_key = env.get(API_KEY_ENV)
        if not api_key or not api_key.strip():
            raise ConfigurationError(f"{API_KEY_ENV} is required in environment")

        values = {"api_key": api_key}
        if env.get(HTTP_TIMEOUT_ENV):
            values["http_timeout"] = env[HTTP_TIMEOUT_ENV]
        if env.get(LOG_LEVEL_ENV):
            values["log_level"] = env[LOG_LEVEL_ENV]

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from None
