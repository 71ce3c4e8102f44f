"""Application configuration management using Pydantic Settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal


class Settings(BaseSettings):
    """Server settings loaded from environment variables."""

    # MCP server identity (reported during initialization)
    server_name: str = "toolbox-mcp"
    server_version: str = "0.1.0"

    # ENVIRONMENT: "development" prints a startup banner on stderr.
    # stdout is reserved for the protocol stream, so nothing else is printed.
    environment: Literal["development", "production", "test"] = "production"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lower-case level names (e.g. LOG_LEVEL=debug)."""
        return v.upper() if isinstance(v, str) else v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"


# Global settings instance
settings = Settings()
