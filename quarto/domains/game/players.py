# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Quarto players.

A player takes the two decisions of a turn: where to place the piece it was
handed, and which piece to hand to its opponent. AI players delegate both to
the strategy fitting the board; human players get their decisions from the
presentation layer.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum

from quarto.core.config.settings import Settings
from quarto.domains.game.board import Board
from quarto.domains.game.models import Move, Piece
from quarto.domains.game.strategies.registry import adequate_strategy

logger = logging.getLogger(__name__)


class PlayerType(str, Enum):
    """Who takes the decisions of a player."""

    HUMAN = "human"
    AI = "ai"


class Player(ABC):
    """Abstract base class for players."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    @abstractmethod
    def player_type(self) -> PlayerType:
        pass

    @abstractmethod
    def choose_move(self, piece: Piece, board: Board) -> Move:
        """Choose where to place the piece handed over by the opponent."""
        pass

    @abstractmethod
    def choose_piece_for_opponent(self, board: Board) -> Piece:
        """Choose the piece to hand over to the opponent."""
        pass

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


class HumanPlayer(Player):
    """A human player.

    Decisions are made by the presentation layer, which applies them
    through Game.play(); calling the decision methods is a programming error.
    """

    @property
    def player_type(self) -> PlayerType:
        return PlayerType.HUMAN

    def choose_move(self, piece: Piece, board: Board) -> Move:
        raise NotImplementedError("Human moves come from the presentation layer")

    def choose_piece_for_opponent(self, board: Board) -> Piece:
        raise NotImplementedError("Human pieces come from the presentation layer")


class AIPlayer(Player):
    """An AI player using the strategy fitting each board.

    Args:
        name: Player name.
        settings: Settings passed to the strategy selector.
    """

    DEFAULT_NAME = "AI"

    def __init__(self, name: str = DEFAULT_NAME, settings: Settings | None = None) -> None:
        super().__init__(name)
        self._settings = settings

    @property
    def player_type(self) -> PlayerType:
        return PlayerType.AI

    def choose_move(self, piece: Piece, board: Board) -> Move:
        strategy = adequate_strategy(board, self._settings)
        logger.debug("%s places %s using %r", self.name, piece, strategy)
        return strategy.calc_move(board, piece)

    def choose_piece_for_opponent(self, board: Board) -> Piece:
        strategy = adequate_strategy(board, self._settings)
        logger.debug("%s chooses a piece using %r", self.name, strategy)
        return strategy.choose_piece_for_opponent(board)
