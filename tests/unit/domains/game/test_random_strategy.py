# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the random strategy."""

import random

import pytest

from quarto.domains.game.board import Board
from quarto.domains.game.exceptions import NoBestMoveError
from quarto.domains.game.models import Piece
from quarto.domains.game.strategies.base import StrategyType
from quarto.domains.game.strategies.random_strategy import RandomStrategy


class TestRandomStrategy:
    """Tests for RandomStrategy."""

    def test_type(self) -> None:
        """Test the strategy identity."""
        assert RandomStrategy().strategy_type is StrategyType.RANDOM

    def test_move_is_legal(self, mid_game_board: Board) -> None:
        """Test that the move uses a pooled piece on an empty cell."""
        move = RandomStrategy(seed=1).calc_move(mid_game_board)

        assert move.piece.index in mid_game_board.get_available_pieces()
        assert mid_game_board[move.cell.index].is_empty

    def test_move_keeps_imposed_piece(self, mid_game_board: Board) -> None:
        """Test that a handed-over piece is the one placed."""
        piece = Piece.from_text("DEXS")

        for seed in range(10):
            assert RandomStrategy(seed=seed).calc_move(mid_game_board, piece).piece == piece

    def test_seed_is_reproducible(self, empty_board: Board) -> None:
        """Test that equal seeds give equal choices."""
        first = RandomStrategy(seed=42)
        second = RandomStrategy(seed=42)

        assert first.calc_move(empty_board) == second.calc_move(empty_board)
        assert first.choose_piece_for_opponent(empty_board) == second.choose_piece_for_opponent(
            empty_board
        )

    def test_injected_generator(self, empty_board: Board) -> None:
        """Test that an injected generator drives the choice."""
        expected = random.Random(3).choice(empty_board.get_available_moves())

        assert RandomStrategy(rng=random.Random(3)).calc_move(empty_board) == expected

    def test_piece_comes_from_pool(self, mid_game_board: Board) -> None:
        """Test that the handed-over piece is available."""
        piece = RandomStrategy(seed=5).choose_piece_for_opponent(mid_game_board)

        assert piece.index in mid_game_board.get_available_pieces()

    def test_finished_board(self, draw_board: Board) -> None:
        """Test that a full board leaves nothing to choose."""
        strategy = RandomStrategy(seed=0)

        with pytest.raises(NoBestMoveError):
            strategy.calc_move(draw_board)
        with pytest.raises(NoBestMoveError):
            strategy.choose_piece_for_opponent(draw_board)
