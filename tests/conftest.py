# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across the unit tests:
- Settings isolation
- Pieces and boards from known game scenarios
"""

from collections.abc import Callable, Generator

import pytest

from quarto.core.config.settings import clear_settings_cache
from quarto.domains.game.board import Board
from quarto.domains.game.models import Move, Piece
from quarto.domains.game.strategies.registry import reset_strategy_registry


DRAW_SEQUENCE = (
    "WETS", "DFTC", "DFTS", "DFXS",
    "WFTS", "WFXS", "DETS", "DFXC",
    "DEXS", "WEXC", "WFXC", "WETC",
    "DETC", "WFTC", "WEXS", "DEXC",
)


def moves(*placements: tuple[str, int]) -> list[Move]:
    """Build moves from ``(piece text, cell index)`` pairs."""
    return [Move.at(Piece.from_text(text), index) for text, index in placements]


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_globals() -> Generator[None, None, None]:
    """Reset cached settings and the default strategy registry around each test."""
    clear_settings_cache()
    reset_strategy_registry()
    yield
    clear_settings_cache()
    reset_strategy_registry()


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


# =============================================================================
# Board Fixtures
# =============================================================================


@pytest.fixture
def build_board() -> Callable[..., Board]:
    """Provide a builder applying ``(piece text, cell index)`` pairs to a fresh board."""

    def _build(*placements: tuple[str, int]) -> Board:
        return Board.with_scenario(moves(*placements))

    return _build


@pytest.fixture
def empty_board() -> Board:
    """Provide a fresh board with all 16 pieces available."""
    return Board.create()


@pytest.fixture
def mid_game_board() -> Board:
    """Provide a board with six pieces played and removed."""
    return Board.with_scenario(
        moves(
            ("DFTC", 1),
            ("DFTS", 2),
            ("WFTS", 4),
            ("DFXS", 6),
            ("DETC", 9),
            ("WFXS", 15),
        )
    )


@pytest.fixture
def draw_board() -> Board:
    """Provide a full board without any winning line."""
    return Board.with_scenario(
        moves(*zip(DRAW_SEQUENCE, range(16), strict=True))
    )

