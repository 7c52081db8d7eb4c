# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Heuristic board scoring.

Each of the 10 lines is scored from the pieces already placed on it,
partially filled lines included. For every one of the 8 attribute values,
the number of pieces on the line holding it maps to points:

    0 or 1 -> 0, 2 -> 1, 3 -> 2, 4 -> win

Line scores and the board total are summed with saturation to a win, so a
winning board always scores ``Score.WIN``.
"""

from collections.abc import Iterable

from quarto.domains.game.board import LINES, Board
from quarto.domains.game.models import Piece, Score

ATTRIBUTE_BITS = (3, 2, 1, 0)

_POINTS_BY_COUNT = (0, 0, 1, 2)


def count_points(count: int) -> Score:
    """Map the number of pieces sharing one attribute value to a score."""
    if count >= 4:
        return Score.WIN
    return Score.point(_POINTS_BY_COUNT[count])


def _line_points(codes: list[int]) -> int | None:
    """Score a list of piece codes, returning None for a win."""
    size = len(codes)
    points = 0
    for bit in ATTRIBUTE_BITS:
        ones = sum((code >> bit) & 1 for code in codes)
        for count in (ones, size - ones):
            if count >= 4:
                return None
            points += _POINTS_BY_COUNT[count]
    return points


def line_score(pieces: Iterable[Piece]) -> Score:
    """Score the pieces placed on one line."""
    points = _line_points([piece.code for piece in pieces])
    if points is None:
        return Score.WIN
    return Score.point(points)


def calc_score(board: Board) -> Score:
    """Compute the heuristic score of a board.

    Args:
        board: Board to evaluate.

    Returns:
        ``Score.WIN`` if any line is winning, otherwise the sum of the
        points of all lines.
    """
    cells = board.cell_codes()
    total = 0
    for line in LINES:
        codes = [cells[index] for index in line if cells[index] is not None]
        points = _line_points(codes)
        if points is None:
            return Score.WIN
        total += points
    return Score.point(total)
