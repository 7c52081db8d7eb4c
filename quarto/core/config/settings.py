# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

This module provides centralized configuration management for the Quarto
engine. Settings are loaded from environment variables with sensible defaults.

The Settings class is the main entry point and aggregates all subsettings.
A singleton instance is provided via get_settings().

Example:
    >>> from quarto.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> settings.ai.random_opening_plies
    2
"""

from functools import lru_cache
from typing import Literal, Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CELL_COUNT = 16


class AISettings(BaseSettings):
    """AI opponent configuration.

    Attributes:
        random_opening_plies: Number of opening plies played by the random
            strategy before the minimax-tree search takes over.
        random_seed: Seed for the random strategy (None = unseeded).
        max_depth: Optional cap (at least 1) on the search depth chosen by the
            depth policy.
    """

    model_config = SettingsConfigDict(
        env_prefix="QUARTO_AI_",
        extra="ignore",
    )

    random_opening_plies: int = 2
    random_seed: int | None = None
    max_depth: int | None = None

    @model_validator(mode="after")
    def validate_bounds(self) -> Self:
        """Reject values the strategy selector cannot honour.

        Raises:
            ValueError: If a value is outside the board limits.
        """
        if not 0 <= self.random_opening_plies <= CELL_COUNT:
            raise ValueError(
                f"random_opening_plies must be between 0 and {CELL_COUNT}, "
                f"got {self.random_opening_plies}"
            )
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        return self


class GameSettings(BaseSettings):
    """Self-play game configuration.

    Attributes:
        player_one_name: Name of the player who places first.
        player_two_name: Name of the second player.
    """

    model_config = SettingsConfigDict(
        env_prefix="QUARTO_GAME_",
        extra="ignore",
    )

    player_one_name: str = "Player 1"
    player_two_name: str = "AI"


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Use get_settings() to obtain a cached singleton instance.

    Attributes:
        environment: Current environment (development, test, production).
        debug: Enable debug mode.
        log_level: Logging level.
        ai: AI opponent settings.
        game: Self-play game settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "test", "production"] = "development"
    debug: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    ai: AISettings = Field(default_factory=AISettings)
    game: GameSettings = Field(default_factory=GameSettings)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call clear_settings_cache() if you need to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Call this if you need to reload settings from environment.
    Useful for testing.
    """
    get_settings.cache_clear()
