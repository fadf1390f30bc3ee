import pytest

from google_maps_mcp.config import DEFAULT_HTTP_TIMEOUT, Settings
from google_maps_mcp.exceptions import ConfigurationError


def test_from_env_reads_key_and_defaults() -> None:
    settings = Settings.from_env({"GOOGLE_MAPS_API_KEY": " abc123 "})

    assert settings.api_key == "abc123"
    assert settings.http_timeout == DEFAULT_HTTP_TIMEOUT
    assert settings.log_level == "INFO"


def test_from_env_reads_optional_values() -> None:
    settings = Settings.from_env({
        "GOOGLE_MAPS_API_KEY": "abc123",
        "GOOGLE_MAPS_HTTP_TIMEOUT": "12.5",
        "GOOGLE_MAPS_MCP_LOG_LEVEL": "debug",
    })

    assert settings.http_timeout == 12.5
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("env", [{}, {"GOOGLE_MAPS_API_KEY": ""}, {"GOOGLE_MAPS_API_KEY": "   "}])
def test_missing_key_is_fatal(env) -> None:
    with pytest.raises(ConfigurationError, match="GOOGLE_MAPS_API_KEY"):
        Settings.from_env(env)


def test_malformed_timeout_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        Settings.from_env({"GOOGLE_MAPS_API_KEY": "abc123", "GOOGLE_MAPS_HTTP_TIMEOUT": "soon"})
