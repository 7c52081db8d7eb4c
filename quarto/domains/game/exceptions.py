# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Custom exceptions for the Quarto game domain.

This module defines the exception hierarchy for board and search operations:
- QuartoError: Base exception for all Quarto errors
- IndexOutOfBoundError: Coordinate or cell index outside the board
- PieceDoesNotExistError: Pool lookup returned an unexpected piece
- PieceDoesNotBelongPlayableError: Piece is not in the available pool
- CellIsNotEmptyError: Placement into an occupied cell
- NoBestMoveError: A strategy had no candidate to choose from
- InvalidPieceNotationError: Malformed piece text
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from quarto.domains.game.models import Cell, Piece


class QuartoError(Exception):
    """Base exception for all Quarto errors.

    A failing board operation raises one of the subclasses and leaves the
    board unchanged.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation with details if available."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class IndexOutOfBoundError(QuartoError):
    """Raised when a coordinate or cell index is outside the 4x4 board."""

    pass


class PieceDoesNotExistError(QuartoError):
    """Raised when the pool holds a different piece than the one requested."""

    pass


class PieceDoesNotBelongPlayableError(QuartoError):
    """Raised when a piece is not in the available pool."""

    pass


class CellIsNotEmptyError(QuartoError):
    """Raised when a piece is placed on an occupied cell.

    Attributes:
        cell: Snapshot of the occupied cell.
        piece: Piece already standing on the cell.
    """

    def __init__(self, cell: "Cell", piece: "Piece", message: str | None = None):
        self.cell = cell
        self.piece = piece
        super().__init__(
            message or f"Cell {cell.index} is already occupied",
            details={"cell": cell.index, "piece": str(piece)},
        )


class NoBestMoveError(QuartoError):
    """Raised when a strategy cannot produce a move or a piece."""

    pass


class InvalidPieceNotationError(QuartoError, ValueError):
    """Raised when a piece text is not four valid attribute acronyms."""

    def __init__(self, text: str, message: str | None = None):
        self.text = text
        super().__init__(
            message or f"Invalid piece notation: {text!r}",
            details={"text": text},
        )
