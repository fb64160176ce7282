"""Configuration management using Pydantic settings."""

from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# loguru's built-in level names
LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
ExportFormat = Literal["geojson", "gpx"]


class Settings(BaseSettings):
    """Settings loaded from GEOWORLD_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEOWORLD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    debug: bool = False
    log_level: LogLevel = "WARNING"  # stderr level when debug is off

    # Output
    json_indent: Optional[int] = None           # None = compact single-line JSON
    default_format: ExportFormat = "geojson"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value
