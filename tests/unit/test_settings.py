# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for application settings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from quarto.core.config.settings import (
    AISettings,
    GameSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)


class TestAISettings:
    """Tests for AISettings."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        settings = AISettings()

        assert settings.random_opening_plies == 2
        assert settings.random_seed is None
        assert settings.max_depth is None

    def test_loads_from_environment(self) -> None:
        """Test that settings load from prefixed environment variables."""
        env = {
            "QUARTO_AI_RANDOM_OPENING_PLIES": "4",
            "QUARTO_AI_RANDOM_SEED": "42",
            "QUARTO_AI_MAX_DEPTH": "2",
        }

        with patch.dict(os.environ, env, clear=False):
            settings = AISettings()

        assert settings.random_opening_plies == 4
        assert settings.random_seed == 42
        assert settings.max_depth == 2

    def test_opening_plies_above_board_size_raises_error(self) -> None:
        """Test that more opening plies than cells is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            AISettings(random_opening_plies=17)

        assert "random_opening_plies" in str(exc_info.value)

    def test_negative_opening_plies_raises_error(self) -> None:
        """Test that a negative number of opening plies is rejected."""
        with pytest.raises(ValidationError):
            AISettings(random_opening_plies=-1)

    def test_negative_max_depth_raises_error(self) -> None:
        """Test that a negative depth cap is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            AISettings(max_depth=-1)

        assert "max_depth" in str(exc_info.value)

    def test_zero_max_depth_raises_error(self) -> None:
        """Test that a depth cap of zero is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            AISettings(max_depth=0)

        assert "max_depth must be at least 1" in str(exc_info.value)

    def test_max_depth_of_one_is_accepted(self) -> None:
        """Test the smallest allowed depth cap."""
        assert AISettings(max_depth=1).max_depth == 1


class TestGameSettings:
    """Tests for GameSettings."""

    def test_default_values(self) -> None:
        """Test default player names."""
        settings = GameSettings()

        assert settings.player_one_name == "Player 1"
        assert settings.player_two_name == "AI"

    def test_loads_from_environment(self) -> None:
        """Test that player names load from environment variables."""
        env = {"QUARTO_GAME_PLAYER_ONE_NAME": "Alice"}

        with patch.dict(os.environ, env, clear=False):
            settings = GameSettings()

        assert settings.player_one_name == "Alice"
        assert settings.player_two_name == "AI"


class TestSettings:
    """Tests for main Settings class."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.log_level == "INFO"

    def test_subsettings_loaded(self) -> None:
        """Test that all subsettings are loaded."""
        settings = Settings()

        assert isinstance(settings.ai, AISettings)
        assert isinstance(settings.game, GameSettings)

    def test_invalid_log_level_raises_error(self) -> None:
        """Test that an unknown log level is rejected."""
        with pytest.raises(ValidationError):
            Settings(log_level="VERBOSE")

    def test_is_development_property(self) -> None:
        """Test is_development property."""
        dev_settings = Settings(environment="development")
        prod_settings = Settings(environment="production")

        assert dev_settings.is_development is True
        assert prod_settings.is_development is False

    def test_is_production_property(self) -> None:
        """Test is_production property."""
        dev_settings = Settings(environment="development")
        prod_settings = Settings(environment="production")

        assert dev_settings.is_production is False
        assert prod_settings.is_production is True


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings_instance(self) -> None:
        """Test that get_settings returns Settings instance."""
        settings = get_settings()

        assert isinstance(settings, Settings)

    def test_returns_cached_instance(self) -> None:
        """Test that get_settings returns the same cached instance."""
        first = get_settings()
        second = get_settings()

        assert first is second

    def test_clear_cache_allows_reload(self) -> None:
        """Test that clearing the cache picks up environment changes."""
        first = get_settings()

        with patch.dict(os.environ, {"QUARTO_AI_RANDOM_SEED": "7"}, clear=False):
            clear_settings_cache()
            second = get_settings()

        assert first is not second
        assert second.ai.random_seed == 7
