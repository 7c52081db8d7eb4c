# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Quarto game domain.

This package provides:
- Piece, Cell, Move, Score, BoardState: value models
- Board: cells and pool of available pieces
- calc_score: heuristic board scoring
- Strategies: random and minimax-tree decision making
- Players and Game: the turn loop

Usage:
    from quarto.domains.game import AIPlayer, Game

    game = Game.start(AIPlayer("Alice"), AIPlayer("Bob"))
    state = game.run()
"""

from quarto.domains.game.board import Board, board_lines
from quarto.domains.game.exceptions import (
    CellIsNotEmptyError,
    IndexOutOfBoundError,
    InvalidPieceNotationError,
    NoBestMoveError,
    PieceDoesNotBelongPlayableError,
    PieceDoesNotExistError,
    QuartoError,
)
from quarto.domains.game.game import Game, TurnResult
from quarto.domains.game.models import (
    BoardState,
    BoardStatus,
    Cell,
    Color,
    Height,
    Hole,
    Move,
    Piece,
    Score,
    Shape,
    all_pieces,
)
from quarto.domains.game.players import AIPlayer, HumanPlayer, Player, PlayerType
from quarto.domains.game.scoring import calc_score, count_points, line_score

__all__ = [
    # Models
    "Color",
    "Hole",
    "Height",
    "Shape",
    "Piece",
    "all_pieces",
    "Cell",
    "Move",
    "Score",
    "BoardStatus",
    "BoardState",
    # Board and scoring
    "Board",
    "board_lines",
    "calc_score",
    "line_score",
    "count_points",
    # Players and game
    "PlayerType",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "Game",
    "TurnResult",
    # Exceptions
    "QuartoError",
    "IndexOutOfBoundError",
    "PieceDoesNotExistError",
    "PieceDoesNotBelongPlayableError",
    "CellIsNotEmptyError",
    "NoBestMoveError",
    "InvalidPieceNotationError",
]
