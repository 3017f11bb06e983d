"""Configuration management for Zuul using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="ZUUL_",
        extra="ignore",
    )

    # World
    world_file: Path = Field(
        default=Path("./data/world/zuul.yaml"),
        description="YAML file describing rooms, items and actors",
    )
    starting_room_id: str = Field(
        default="outside", description="Room ID where the player starts"
    )

    # Player
    max_carry_weight: float = Field(
        default=10.0, gt=0, description="Maximum total weight the player can carry"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["console", "json"] = Field(
        default="console", description="Log format (console or json)"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept level names in any case."""
        return value.upper() if isinstance(value, str) else value

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, value: object) -> object:
        """Accept format names in any case."""
        return value.lower() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
