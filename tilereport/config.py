"""
Configuration - Settings read from the environment.

Environment variables:
    TILEREPORT_ENV            "development" or "production"
    TILEREPORT_LOG_LEVEL      Log level name (default INFO)
    TILEREPORT_LOG_FORMAT     "console" or "json"
    TILEREPORT_PICTURE_SIZE   Board image edge in pixels (default 500)
    TILEREPORT_MOVES_TO_SHOW  Moves listed per position (default 5). Whatever the
                              size, the played move is always listed: with a
                              full list it replaces the last candidate
    ALLOWED_ORIGINS           Comma-separated CORS origins for the API
"""

from functools import lru_cache
import os

from pydantic import BaseModel, Field


class Settings(BaseModel):
    env: str = os.getenv("TILEREPORT_ENV", "development")
    log_level: str = os.getenv("TILEREPORT_LOG_LEVEL", "INFO")
    log_format: str = os.getenv("TILEREPORT_LOG_FORMAT", "console")
    picture_size: int = Field(default=int(os.getenv("TILEREPORT_PICTURE_SIZE", "500")), ge=50)
    moves_to_show: int = Field(default=int(os.getenv("TILEREPORT_MOVES_TO_SHOW", "5")), ge=1)
    allowed_origins: str = os.getenv("ALLOWED_ORIGINS", "*")

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @property
    def json_logs(self) -> bool:
        return self.log_format == "json" or self.is_production

    @property
    def picture_dimensions(self) -> tuple[int, int]:
        return (self.picture_size, self.picture_size)

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Settings for this process, read once."""
    return Settings()
