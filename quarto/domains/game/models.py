# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Data models for the Quarto game domain.

This module defines enums, Pydantic models and value types for:
- The four binary piece attributes and the 16 pieces
- Board cells and moves
- Heuristic scores
- Board state (in progress, win, draw)

A piece is identified by its index in the canonical enumeration, where
Color varies slowest and Shape fastest, the first member of each attribute
counting as 0. The index doubles as the 4-bit code used by the scorer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable

from pydantic import BaseModel, ConfigDict, Field

from quarto.domains.game.exceptions import (
    IndexOutOfBoundError,
    InvalidPieceNotationError,
)

BOARD_SIDE = 4
CELL_COUNT = BOARD_SIDE * BOARD_SIDE
PIECE_COUNT = 16


class Color(str, Enum):
    """Piece color."""

    WHITE = "W"
    DARK = "D"

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Hole(str, Enum):
    """Whether the top of the piece is hollow."""

    EMPTY = "E"
    FULL = "F"

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Height(str, Enum):
    """Piece height."""

    SMALL = "X"
    TALL = "T"

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Shape(str, Enum):
    """Piece base shape."""

    CIRCLE = "C"
    SQUARE = "S"

    @property
    def label(self) -> str:
        return self.name.capitalize()


AttributeValue = Color | Hole | Height | Shape

# Attribute enums from the most to the least significant bit of a piece code.
ATTRIBUTES: tuple[type[Enum], ...] = (Color, Hole, Height, Shape)

_BIT: dict[Enum, int] = {
    member: position for attribute in ATTRIBUTES for position, member in enumerate(attribute)
}


class Piece(BaseModel):
    """One of the 16 Quarto pieces.

    Attributes:
        color: Piece color.
        hole: Whether the top is hollow.
        height: Piece height.
        shape: Base shape.
    """

    model_config = ConfigDict(frozen=True)

    color: Color = Field(description="Piece color")
    hole: Hole = Field(description="Hollow or full top")
    height: Height = Field(description="Small or tall")
    shape: Shape = Field(description="Circle or square base")

    @property
    def index(self) -> int:
        """Position of the piece in the canonical enumeration (0..15)."""
        return (
            _BIT[self.color] << 3
            | _BIT[self.hole] << 2
            | _BIT[self.height] << 1
            | _BIT[self.shape]
        )

    @property
    def code(self) -> int:
        """4-bit encoding of the attributes, Color being the high bit."""
        return self.index

    def attribute_values(self) -> tuple[AttributeValue, ...]:
        """Return the four attribute values in Color, Hole, Height, Shape order."""
        return (self.color, self.hole, self.height, self.shape)

    def has(self, value: AttributeValue) -> bool:
        """Tell whether the piece holds the given attribute value."""
        return value in self.attribute_values()

    def as_text(self) -> str:
        """Return the upper-case four-letter encoding, e.g. ``"WEXC"``."""
        return "".join(value.value for value in self.attribute_values())

    @classmethod
    def from_text(cls, text: str) -> "Piece":
        """Parse the four-letter encoding of a piece.

        Letters are read in Color, Hole, Height, Shape order and are
        case-insensitive.

        Args:
            text: Piece text such as ``"dfts"``.

        Returns:
            The canonical piece.

        Raises:
            InvalidPieceNotationError: If the text is not exactly four valid
                acronyms.
        """
        if not isinstance(text, str) or len(text) != len(ATTRIBUTES):
            raise InvalidPieceNotationError(str(text))
        try:
            values = [
                attribute(letter)
                for attribute, letter in zip(ATTRIBUTES, text.upper(), strict=True)
            ]
        except ValueError as e:
            raise InvalidPieceNotationError(text) from e
        color, hole, height, shape = values
        return cls(color=color, hole=hole, height=height, shape=shape)

    @classmethod
    def from_index(cls, index: int) -> "Piece":
        """Return the canonical piece at the given enumeration index.

        Raises:
            IndexOutOfBoundError: If the index is outside 0..15.
        """
        if not 0 <= index < PIECE_COUNT:
            raise IndexOutOfBoundError(
                f"Piece index {index} is out of bounds",
                details={"index": index},
            )
        return _PIECES[index]

    def __str__(self) -> str:
        return self.as_text()

    def __repr__(self) -> str:
        return f"Piece({self.as_text()!r})"


def _build_pieces() -> tuple[Piece, ...]:
    pieces = []
    for code in range(PIECE_COUNT):
        color, hole, height, shape = (
            list(attribute)[(code >> shift) & 1]
            for attribute, shift in zip(ATTRIBUTES, (3, 2, 1, 0), strict=True)
        )
        pieces.append(Piece(color=color, hole=hole, height=height, shape=shape))
    return tuple(pieces)


_PIECES = _build_pieces()


def all_pieces() -> list[Piece]:
    """Return the 16 pieces in index order."""
    return list(_PIECES)


class Cell(BaseModel):
    """Snapshot of one board cell.

    Cells handed out by the board are copies; the board alone owns occupancy.

    Attributes:
        index: Linear index ``x + 4 * y``.
        piece: Piece standing on the cell, if any.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, lt=CELL_COUNT, description="Linear cell index")
    piece: Piece | None = Field(default=None, description="Placed piece")

    @property
    def x(self) -> int:
        return self.index % BOARD_SIDE

    @property
    def y(self) -> int:
        return self.index // BOARD_SIDE

    @property
    def is_empty(self) -> bool:
        return self.piece is None

    @classmethod
    def at(cls, index: int, piece: Piece | None = None) -> "Cell":
        """Build a cell, raising IndexOutOfBoundError for a bad index."""
        check_cell_index(index)
        return cls(index=index, piece=piece)

    @staticmethod
    def coordinate_to_index(x: int, y: int) -> int:
        """Convert an ``(x, y)`` coordinate to a linear index.

        Raises:
            IndexOutOfBoundError: If either coordinate is outside 0..3.
        """
        if not (0 <= x < BOARD_SIDE and 0 <= y < BOARD_SIDE):
            raise IndexOutOfBoundError(
                f"Coordinate ({x}, {y}) is out of bounds",
                details={"x": x, "y": y},
            )
        return x + BOARD_SIDE * y

    @staticmethod
    def index_to_coordinate(index: int) -> tuple[int, int]:
        """Convert a linear index to an ``(x, y)`` coordinate."""
        check_cell_index(index)
        return index % BOARD_SIDE, index // BOARD_SIDE


def check_cell_index(index: int) -> None:
    """Raise IndexOutOfBoundError unless ``index`` addresses a board cell."""
    if not 0 <= index < CELL_COUNT:
        raise IndexOutOfBoundError(
            f"Cell index {index} is out of bounds",
            details={"index": index},
        )


class Move(BaseModel):
    """Placement of a piece on a cell.

    Attributes:
        piece: Piece to place.
        cell: Target cell.
    """

    model_config = ConfigDict(frozen=True)

    piece: Piece = Field(description="Piece to place")
    cell: Cell = Field(description="Target cell")

    @classmethod
    def at(cls, piece: Piece, index: int) -> "Move":
        """Shortcut building a move on the cell at ``index``."""
        return cls(piece=piece, cell=Cell.at(index))

    def __str__(self) -> str:
        return f"{self.piece} at ({self.cell.x}, {self.cell.y})"


@dataclass(frozen=True, order=True)
class Score:
    """Heuristic value of a board.

    A score is either a number of points or a win. Ordering compares the win
    flag first, so ``Score.WIN`` is greater than any number of points.
    Adding a win to anything gives a win.
    """

    win: bool = False
    points: int = 0

    WIN: ClassVar["Score"]

    def __post_init__(self) -> None:
        if self.points < 0:
            raise ValueError(f"Score points must be non-negative, got {self.points}")
        if self.win and self.points:
            raise ValueError("A winning score carries no points")

    @classmethod
    def point(cls, points: int) -> "Score":
        return cls(points=points)

    @classmethod
    def total(cls, scores: Iterable["Score"]) -> "Score":
        """Sum scores, saturating to ``Score.WIN``."""
        points = 0
        for score in scores:
            if score.win:
                return cls.WIN
            points += score.points
        return cls(points=points)

    @property
    def is_win(self) -> bool:
        return self.win

    def __add__(self, other: "Score") -> "Score":
        if not isinstance(other, Score):
            return NotImplemented
        return Score.total((self, other))

    def __str__(self) -> str:
        if self.win:
            return "Winning board !"
        return f"{self.points} points"


Score.WIN = Score(win=True)


class BoardStatus(str, Enum):
    """Outcome of a board evaluation."""

    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


class BoardState(BaseModel):
    """State of a board after a move.

    Attributes:
        status: Whether the game goes on, is won or is drawn.
        winning_cells: Cells of the first winning line, empty otherwise.
    """

    model_config = ConfigDict(frozen=True)

    status: BoardStatus = Field(description="Game status")
    winning_cells: tuple[Cell, ...] = Field(
        default=(),
        description="Cells of the winning line",
    )

    @classmethod
    def in_progress(cls) -> "BoardState":
        return cls(status=BoardStatus.IN_PROGRESS)

    @classmethod
    def win(cls, cells: Iterable[Cell]) -> "BoardState":
        return cls(status=BoardStatus.WIN, winning_cells=tuple(cells))

    @classmethod
    def draw(cls) -> "BoardState":
        return cls(status=BoardStatus.DRAW)

    @property
    def is_in_progress(self) -> bool:
        return self.status is BoardStatus.IN_PROGRESS

    @property
    def is_win(self) -> bool:
        return self.status is BoardStatus.WIN

    @property
    def is_draw(self) -> bool:
        return self.status is BoardStatus.DRAW

    def __str__(self) -> str:
        if self.is_win:
            cells = ", ".join(f"({cell.x}, {cell.y})" for cell in self.winning_cells)
            return f"Win on {cells}"
        return "Draw" if self.is_draw else "Game in progress"
