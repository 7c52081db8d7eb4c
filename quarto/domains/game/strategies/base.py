# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Abstract base class for Quarto strategies.

A strategy takes the two decisions of a Quarto turn:
- which move to play with the piece handed over by the opponent
- which piece to hand over to the opponent afterwards

Strategies are stateless between calls: all game state comes from the
board passed in, which strategies never mutate.
"""

from abc import ABC, abstractmethod
from enum import Enum

from quarto.domains.game.board import Board
from quarto.domains.game.models import Move, Piece


class StrategyType(str, Enum):
    """Available strategies."""

    RANDOM = "random"
    MINMAX_TREE = "minmax_tree"


def candidate_moves(board: Board, piece: Piece | None = None) -> list[Move]:
    """Enumerate the moves a strategy may choose from.

    Args:
        board: Board to play on.
        piece: Piece imposed by the opponent, if any.

    Returns:
        The placements of ``piece`` on every empty cell, or every pooled
        piece on every empty cell, piece index then cell index ascending.
    """
    if piece is not None:
        return board.get_available_moves_from_piece(piece)
    return board.get_available_moves()


class Strategy(ABC):
    """Abstract base class for all strategies.

    Example:
        class FirstMoveStrategy(Strategy):
            @property
            def strategy_type(self) -> StrategyType:
                ...

            def calc_move(self, board, piece=None):
                return candidate_moves(board, piece)[0]
    """

    @property
    @abstractmethod
    def strategy_type(self) -> StrategyType:
        """Get the strategy type."""
        pass

    @property
    def name(self) -> str:
        """Get the human-readable strategy name."""
        return self.strategy_type.value

    @abstractmethod
    def calc_move(self, board: Board, piece: Piece | None = None) -> Move:
        """Choose the move to play.

        Args:
            board: Current board, left untouched.
            piece: Piece handed over by the opponent. When given, the
                returned move places this piece.

        Returns:
            The chosen move.

        Raises:
            NoBestMoveError: If no move can be chosen.
        """
        pass

    @abstractmethod
    def choose_piece_for_opponent(self, board: Board) -> Piece:
        """Choose the pooled piece to hand over to the opponent.

        Raises:
            NoBestMoveError: If the pool is empty.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
