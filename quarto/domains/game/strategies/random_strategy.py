# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Random strategy.

Plays a uniformly random legal move and hands over a uniformly random
pooled piece. Used for the opening plies, where a search is both costly
and uninformative.
"""

import logging
import random

from quarto.domains.game.board import Board
from quarto.domains.game.exceptions import NoBestMoveError
from quarto.domains.game.models import Move, Piece
from quarto.domains.game.strategies.base import Strategy, StrategyType, candidate_moves

logger = logging.getLogger(__name__)


class RandomStrategy(Strategy):
    """Strategy choosing uniformly among the legal options.

    Args:
        seed: Seed for a private random generator.
        rng: Random generator to use instead (takes precedence over seed).
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random(seed)

    @property
    def strategy_type(self) -> StrategyType:
        return StrategyType.RANDOM

    def calc_move(self, board: Board, piece: Piece | None = None) -> Move:
        moves = candidate_moves(board, piece)
        if not moves:
            raise NoBestMoveError(
                "No move available",
                details={"piece": str(piece) if piece else None},
            )
        move = self._rng.choice(moves)
        logger.debug("Random move %s among %d", move, len(moves))
        return move

    def choose_piece_for_opponent(self, board: Board) -> Piece:
        pieces = list(board.get_available_pieces().values())
        if not pieces:
            raise NoBestMoveError("No piece left to hand over")
        piece = self._rng.choice(pieces)
        logger.debug("Random piece %s among %d", piece, len(pieces))
        return piece
