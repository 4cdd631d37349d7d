"""
Farkle - Application Settings

Loads configuration from environment variables (prefix ``FARKLE_``) or a
local ``.env`` file using Pydantic Settings.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FarkleSettings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game
    target_score: int = Field(default=10000, gt=0)
    max_players: int = Field(default=4, ge=1, le=4)

    # Simulation
    simulation_turns: int = Field(default=10000, gt=0)

    # Application
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="FARKLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> FarkleSettings:
    """Cached singleton settings instance."""
    return FarkleSettings()
