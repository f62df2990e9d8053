"""
Configuration management for the Trello MCP Server.

Non-sensitive settings only. Read from TRELLO_MCP_* environment variables
(or a local .env file) with sensible defaults. Credentials never live here;
see credentials.py.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trello API base URL
API_BASE = "https://api.trello.com/1"


class Settings(BaseSettings):
    """Runtime settings for the server and the request gateway."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TRELLO_MCP_",
        case_sensitive=False,
        extra="ignore",
    )

    SERVICE_NAME: str = "trello-mcp-server"
    VERSION: str = "0.1.0"

    API_BASE_URL: str = Field(default=API_BASE, description="Trello REST API base URL")
    REQUEST_TIMEOUT_SECONDS: float = Field(
        default=30.0, gt=0, description="HTTP client timeout in seconds"
    )

    # Rate limiting
    RATE_LIMIT_SAFETY_BUFFER: int = Field(
        default=5,
        ge=0,
        description="Wait for the reset window once remaining requests drop to this value",
    )
    RATE_LIMIT_MAX_RETRIES: int = Field(
        default=10,
        ge=0,
        description="Max retries after HTTP 429 for a single call (0 = retry until success)",
    )

    # Logging
    DEBUG: bool = Field(default=False, description="Force DEBUG log level")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL


def load_settings() -> Settings:
    """Load settings from the environment."""
    return Settings()
