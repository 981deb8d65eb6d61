"""
API Configuration
Settings and configuration for FastAPI application.
"""

import json
from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class APISettings(BaseSettings):
    """
    API configuration settings.

    Load from environment variables (see aliases) or a ``.env`` file.
    """

    # API Info
    app_name: str = "Shopstats API"
    version: str = "0.1.0"
    description: str = "Sales, inventory and review analytics over the store dataset"

    # Server settings
    host: str = Field(default="0.0.0.0", alias="API_HOST")
    port: int = Field(default=8000, alias="API_PORT")
    reload: bool = Field(default=False, alias="API_RELOAD")

    # CORS settings
    # NoDecode hands the raw env string to parse_cors_origins
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default=["http://localhost:3000", "http://localhost:8080"],
        alias="API_CORS_ORIGINS"
    )
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: List[str] = ["*"]

    # Dataset
    database_file: str = Field(default="database.json", alias="DATABASE_FILE")

    # Reporting
    trending_window_days: int = Field(default=7, ge=1, alias="API_TRENDING_WINDOW_DAYS")

    # Logging
    log_level: str = Field(default="INFO", alias="API_LOG_LEVEL")
    slow_request_ms: int = Field(default=300, alias="API_SLOW_REQUEST_MS")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> List[str]:
        """Parse CORS origins from JSON string or list."""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # Fall back to comma-separated list
                return [origin.strip() for origin in v.split(",")]
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        env_prefix="",
        validate_default=True,
        populate_by_name=True,
    )


# Global settings instance
_settings: Optional[APISettings] = None


def get_settings() -> APISettings:
    """Get global API settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = APISettings()
    return _settings


def reset_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None
