"""
Configuration management for Garden Round.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Round tunables loaded from environment variables (GARDEN_*)."""

    # Garden
    grid_rows: int = Field(default=8, gt=0, description="Rows in the garden grid")
    grid_cols: int = Field(default=8, gt=0, description="Columns in the garden grid")

    # Economy
    initial_money: int = Field(
        default=50,
        ge=0,
        description="Money in the wallet at the start of every round"
    )

    # Round clock
    round_duration_ms: int = Field(
        default=180_000,
        gt=0,
        description="Length of one round in milliseconds"
    )
    tick_interval_ms: int = Field(
        default=100,
        gt=0,
        description="Cadence the driver is expected to tick at"
    )

    # Inventory
    refill_interval_ms: int = Field(
        default=30_000,
        gt=0,
        description="Round time between inventory refills"
    )
    refill_stock: int = Field(
        default=15,
        ge=0,
        description="Stock every plant kind is reset to on refill"
    )

    # Leaderboard
    leaderboard_size: int = Field(
        default=10,
        gt=0,
        description="Number of entries the leaderboard retains"
    )
    leaderboard_display: int = Field(
        default=5,
        gt=0,
        description="Number of entries exposed in the snapshot"
    )
    max_name_length: int = Field(
        default=20,
        gt=0,
        description="Longest accepted player name (after trimming)"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level for the CLI")

    model_config = SettingsConfigDict(
        env_prefix="GARDEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Pass an explicit Settings to GardenGame to override.
    """
    return Settings()
