# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Quarto game loop.

A turn goes as follows: the opponent hands a piece over, the current player
places it, and the players swap roles while the game is in progress.

Example:
    game = Game.start(AIPlayer("Alice"), AIPlayer("Bob"))
    final_state = game.run()
"""

import logging

from pydantic import BaseModel, ConfigDict, Field

from quarto.domains.game.board import Board
from quarto.domains.game.exceptions import QuartoError
from quarto.domains.game.models import BoardState, Cell, Move, Piece
from quarto.domains.game.players import Player

logger = logging.getLogger(__name__)


class TurnResult(BaseModel):
    """Outcome of one turn.

    Attributes:
        turn: Turn number, starting at 1.
        giver: Name of the player who handed the piece over.
        player: Name of the player who placed it.
        move: Move played.
        state: Board state after the move.
    """

    model_config = ConfigDict(frozen=True)

    turn: int = Field(ge=1, description="Turn number")
    giver: str = Field(description="Player who chose the piece")
    player: str = Field(description="Player who placed the piece")
    move: Move = Field(description="Move played")
    state: BoardState = Field(description="Board state after the move")


class Game:
    """A game between two players on a fresh board."""

    def __init__(self, player_one: Player, player_two: Player) -> None:
        self._players = (player_one, player_two)
        self._current = 0
        self._board = Board.create()
        self._turn = 0

    @classmethod
    def start(cls, player_one: Player, player_two: Player) -> "Game":
        """Start a game; player one places the first piece."""
        logger.info("Game started: %s vs %s", player_one.name, player_two.name)
        return cls(player_one, player_two)

    @property
    def board(self) -> Board:
        return self._board

    @property
    def players(self) -> tuple[Player, Player]:
        return self._players

    @property
    def current_player(self) -> Player:
        return self._players[self._current]

    @property
    def opponent_player(self) -> Player:
        return self._players[1 - self._current]

    @property
    def turn(self) -> int:
        """Number of turns played."""
        return self._turn

    def switch_current_player(self) -> Player:
        """Swap roles and return the new current player."""
        self._current = 1 - self._current
        return self.current_player

    def play(self, piece: Piece, cell: Cell | int) -> Piece:
        """Apply a move chosen outside the game loop (e.g. by a human)."""
        target = cell if isinstance(cell, Cell) else Cell.at(cell)
        return self._board.play_and_remove(Move(piece=piece, cell=target))

    def state(self) -> BoardState:
        return self._board.board_state()

    def play_turn(self) -> TurnResult:
        """Play one full turn with the players' own decisions.

        Returns:
            The turn outcome.

        Raises:
            QuartoError: If the game is already over.
        """
        if not self.state().is_in_progress:
            raise QuartoError("The game is over", details={"turn": self._turn})

        giver = self.opponent_player
        player = self.current_player

        piece = giver.choose_piece_for_opponent(self._board)
        move = player.choose_move(piece, self._board)
        self._board.play_and_remove(move)
        self._turn += 1

        state = self.state()
        logger.info("Turn %d: %s gave %s, %s played %s", self._turn, giver, piece, player, move)

        if state.is_in_progress:
            self.switch_current_player()
        elif state.is_win:
            logger.info("%s wins: %s", player, state)
        else:
            logger.info("Draw after %d turns", self._turn)

        return TurnResult(
            turn=self._turn,
            giver=giver.name,
            player=player.name,
            move=move,
            state=state,
        )

    def run(self) -> BoardState:
        """Play turns until the game ends and return the final state."""
        while self.state().is_in_progress:
            self.play_turn()
        return self.state()

    @property
    def winner(self) -> Player | None:
        """Player who completed the winning line, if any.

        The current player is not switched after a winning turn, so this holds
        for games driven by play_turn(); callers using play() switch players
        themselves.
        """
        if self.state().is_win:
            return self.current_player
        return None
