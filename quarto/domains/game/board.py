# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Quarto board.

The board owns the 16 cells and the pool of pieces still to be played.
A turn places a piece from the pool on an empty cell and then removes it
from the pool; a piece never re-enters the pool.

Cells are indexed ``x + 4 * y``. Internally each cell holds the 4-bit code
of its piece (or None), which the scorer reads directly through
``cell_codes()``.

Example:
    >>> board = Board.create()
    >>> board.play_and_remove(Move.at(Piece.from_text("DFTS"), 5))
    Piece('DFTS')
    >>> board.board_state().is_in_progress
    True
"""

import logging
from collections.abc import Iterable

from quarto.domains.game.exceptions import (
    CellIsNotEmptyError,
    PieceDoesNotBelongPlayableError,
    PieceDoesNotExistError,
)
from quarto.domains.game.models import (
    BOARD_SIDE,
    CELL_COUNT,
    PIECE_COUNT,
    BoardState,
    Cell,
    Move,
    Piece,
    all_pieces,
    check_cell_index,
)

logger = logging.getLogger(__name__)

ATTRIBUTE_MASK = 0b1111


def board_lines() -> tuple[tuple[int, ...], ...]:
    """Return the 10 winning lines as tuples of cell indices.

    Rows come first (top to bottom), then columns (left to right), then the
    diagonal from the top-left corner and the one from the top-right corner.
    """
    rows = tuple(
        tuple(x + BOARD_SIDE * y for x in range(BOARD_SIDE)) for y in range(BOARD_SIDE)
    )
    columns = tuple(
        tuple(x + BOARD_SIDE * y for y in range(BOARD_SIDE)) for x in range(BOARD_SIDE)
    )
    diagonal = tuple(i * (BOARD_SIDE + 1) for i in range(BOARD_SIDE))
    anti_diagonal = tuple((i + 1) * (BOARD_SIDE - 1) for i in range(BOARD_SIDE))
    return (*rows, *columns, diagonal, anti_diagonal)


LINES = board_lines()

# Empty cell snapshots reused by move generation.
_EMPTY_CELLS = tuple(Cell(index=index) for index in range(CELL_COUNT))


def is_winning_line(codes: Iterable[int | None]) -> bool:
    """Tell whether four codes fill a line and share one attribute value."""
    codes = list(codes)
    if len(codes) != BOARD_SIDE or any(code is None for code in codes):
        return False
    common_ones = ATTRIBUTE_MASK
    common_zeros = ATTRIBUTE_MASK
    for code in codes:
        common_ones &= code
        common_zeros &= ~code
    return bool(common_ones or common_zeros)


class Board:
    """A 4x4 Quarto board with its pool of available pieces.

    Every failing operation raises a QuartoError subclass and leaves the
    board unchanged.
    """

    def __init__(self) -> None:
        self._cells: list[int | None] = [None] * CELL_COUNT
        self._available: dict[int, Piece] = {piece.index: piece for piece in all_pieces()}

    @classmethod
    def create(cls) -> "Board":
        """Create an empty board with all 16 pieces available."""
        return cls()

    @classmethod
    def with_scenario(cls, moves: Iterable[Move]) -> "Board":
        """Create a board and apply each move with play_and_remove."""
        board = cls()
        for move in moves:
            board.play_and_remove(move)
        return board

    def clone(self) -> "Board":
        """Return an independent copy of the board."""
        board = Board.__new__(Board)
        board._cells = list(self._cells)
        board._available = dict(self._available)
        return board

    # Mutations

    def play(self, piece: Piece, cell: Cell | int) -> Piece:
        """Place a piece on a cell without removing it from the pool.

        Args:
            piece: Piece to place.
            cell: Target cell or its linear index.

        Returns:
            The placed piece.

        Raises:
            IndexOutOfBoundError: If the index is outside the board.
            PieceDoesNotBelongPlayableError: If no further turn can be played.
            CellIsNotEmptyError: If the cell already holds a piece.
        """
        index = cell.index if isinstance(cell, Cell) else cell
        check_cell_index(index)

        if not self.can_play_another_turn():
            raise PieceDoesNotBelongPlayableError(
                f"Cannot play {piece}: the game is over",
                details={"piece": str(piece)},
            )

        existing = self._cells[index]
        if existing is not None:
            raise CellIsNotEmptyError(self.get_cell(index), Piece.from_index(existing))

        self._cells[index] = piece.code
        logger.debug("Placed %s on cell %d", piece, index)
        return piece

    def remove(self, piece: Piece) -> Piece:
        """Remove a piece from the pool.

        Raises:
            PieceDoesNotBelongPlayableError: If the piece is not in the pool.
        """
        pooled = self._available.get(piece.index)
        if pooled is None:
            raise PieceDoesNotBelongPlayableError(
                f"Piece {piece} is not available",
                details={"piece": str(piece)},
            )
        if pooled != piece:
            raise PieceDoesNotExistError(
                f"Pool holds {pooled} at index {piece.index}, not {piece}",
                details={"index": piece.index},
            )
        del self._available[piece.index]
        return pooled

    def play_and_remove(self, move: Move) -> Piece:
        """Apply a complete turn: place the piece, then take it out of the pool.

        The pool is checked before any cell is touched, so a failing call
        never leaves a placed piece behind.

        Raises:
            PieceDoesNotBelongPlayableError: If the piece is not in the pool.
            IndexOutOfBoundError: If the cell is outside the board.
            CellIsNotEmptyError: If the cell already holds a piece.
        """
        if move.piece.index not in self._available:
            raise PieceDoesNotBelongPlayableError(
                f"Piece {move.piece} is not available",
                details={"piece": str(move.piece)},
            )
        self.play(move.piece, move.cell)
        return self.remove(move.piece)

    # Read surface

    def can_play_another_turn(self) -> bool:
        """Tell whether a piece remains to play or a cell remains empty."""
        return bool(self._available) or None in self._cells

    def get_cell(self, index: int) -> Cell:
        """Return a snapshot of the cell at ``index``."""
        check_cell_index(index)
        code = self._cells[index]
        if code is None:
            return _EMPTY_CELLS[index]
        return Cell(index=index, piece=Piece.from_index(code))

    def __getitem__(self, index: int) -> Cell:
        return self.get_cell(index)

    def get_cells(self) -> list[Cell]:
        """Return the 16 cells in index order."""
        return [self.get_cell(index) for index in range(CELL_COUNT)]

    def cell_codes(self) -> tuple[int | None, ...]:
        """Return the piece code of each cell (None when empty)."""
        return tuple(self._cells)

    def get_empty_cells(self) -> list[Cell]:
        """Return the empty cells in index order."""
        return [_EMPTY_CELLS[i] for i, code in enumerate(self._cells) if code is None]

    def get_available_pieces(self) -> dict[int, Piece]:
        """Return the pool as an index-ordered mapping index -> piece."""
        return dict(self._available)

    def get_piece_from_available(self, index: int) -> Piece:
        """Return the pooled piece with the given index.

        Raises:
            PieceDoesNotBelongPlayableError: If no such piece is pooled.
        """
        piece = self._available.get(index)
        if piece is None:
            raise PieceDoesNotBelongPlayableError(
                f"No available piece with index {index}",
                details={"index": index},
            )
        return piece

    def piece_index(self, piece: Piece) -> int:
        """Return the index of a pooled piece.

        Raises:
            PieceDoesNotBelongPlayableError: If the piece is not pooled.
        """
        if piece.index not in self._available:
            raise PieceDoesNotBelongPlayableError(
                f"Piece {piece} is not available",
                details={"piece": str(piece)},
            )
        return piece.index

    def pieces_played(self) -> int:
        """Return how many pieces left the pool."""
        return PIECE_COUNT - len(self._available)

    def get_available_moves_from_piece(self, piece: Piece) -> list[Move]:
        """Return every placement of ``piece`` on an empty cell, by cell index."""
        return [Move(piece=piece, cell=cell) for cell in self.get_empty_cells()]

    def get_available_moves(self) -> list[Move]:
        """Return pooled pieces x empty cells, piece index then cell index."""
        empty_cells = self.get_empty_cells()
        return [
            Move(piece=piece, cell=cell)
            for piece in sorted(self._available.values(), key=lambda p: p.index)
            for cell in empty_cells
        ]

    def board_state(self) -> BoardState:
        """Evaluate the board.

        Returns:
            A win with the cells of the first winning line (rows, then
            columns, then diagonals), a draw when no turn can be played,
            otherwise a game in progress.
        """
        for line in LINES:
            if is_winning_line(self._cells[index] for index in line):
                cells = [self.get_cell(index) for index in line]
                logger.debug("Winning line on cells %s", list(line))
                return BoardState.win(cells)
        if not self.can_play_another_turn():
            return BoardState.draw()
        return BoardState.in_progress()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells and self._available == other._available

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = []
        for y in range(BOARD_SIDE):
            row = []
            for x in range(BOARD_SIDE):
                code = self._cells[x + BOARD_SIDE * y]
                row.append("...." if code is None else Piece.from_index(code).as_text())
            rows.append(" ".join(row))
        return "Board(\n  " + "\n  ".join(rows) + "\n)"
