# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Minimax game-tree strategy.

This module provides a depth-bounded minimax search that:
- Builds the full game tree for each decision, keeping every node
- Evaluates leaves with the heuristic scorer
- Chooses a move (optionally constrained to the piece handed over)
- Chooses the piece that is worst for the opponent to receive

Candidates are generated piece index first, then cell index, and ties are
broken by that order: a node's move is the first child whose score equals
the node's score. No pruning is applied, so the chosen move only depends on
the board, the piece and the depth.
"""

import logging
from dataclasses import dataclass, field

from quarto.domains.game.board import Board
from quarto.domains.game.exceptions import NoBestMoveError
from quarto.domains.game.models import Move, Piece, Score
from quarto.domains.game.scoring import calc_score
from quarto.domains.game.strategies.base import Strategy, StrategyType, candidate_moves

logger = logging.getLogger(__name__)

# (lowest pieces played, highest pieces played, depth)
DEPTH_BANDS = (
    (0, 7, 2),
    (8, 10, 3),
    (11, 15, 4),
)


@dataclass(slots=True)
class SearchNode:
    """Node of the minimax game tree.

    Attributes:
        depth: Remaining depth below this node.
        maximise: Whether this node keeps the highest child score.
        piece: Piece every move of this node must place, if any.
        move: Move played to reach this node (None for the root).
        score: Node value once expanded.
        children: Expanded children in generation order.
    """

    depth: int
    maximise: bool = True
    piece: Piece | None = None
    move: Move | None = None
    score: Score = field(default_factory=Score)
    children: list["SearchNode"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def expand(self, board: Board) -> Score:
        """Build the subtree of this node and compute its score.

        Args:
            board: Board reached by this node. It is never mutated: every
                child works on its own clone.

        Returns:
            The node score.
        """
        if self.depth == 0 or not board.can_play_another_turn():
            self.score = calc_score(board)
            return self.score

        self.score = Score() if self.maximise else Score.WIN
        for move in candidate_moves(board, self.piece):
            child_board = board.clone()
            child_board.play_and_remove(move)

            child = SearchNode(depth=self.depth - 1, maximise=not self.maximise, move=move)
            child.expand(child_board)
            self.children.append(child)

            if self.maximise:
                self.score = max(self.score, child.score)
            else:
                self.score = min(self.score, child.score)
        return self.score

    def best_child(self) -> "SearchNode":
        """Return the first child whose score equals this node's score.

        Raises:
            NoBestMoveError: If the node has no child.
        """
        for child in self.children:
            if child.score == self.score:
                return child
        raise NoBestMoveError(
            "Search produced no candidate",
            details={"depth": self.depth, "piece": str(self.piece) if self.piece else None},
        )

    def best_move(self) -> Move:
        """Return the move of the best child."""
        move = self.best_child().move
        assert move is not None
        return move

    def size(self) -> int:
        """Count the nodes of the subtree, this node included."""
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children)
        return count

    def as_tree(self, max_level: int | None = None) -> str:
        """Render the subtree as indented text, one node per line.

        Args:
            max_level: Deepest level to render (None renders everything).
        """
        lines: list[str] = []
        self._render(lines, 0, max_level)
        return "\n".join(lines)

    def _render(self, lines: list[str], level: int, max_level: int | None) -> None:
        label = "root" if self.move is None else str(self.move)
        kind = "max" if self.maximise else "min"
        lines.append(f"{'  ' * level}{label} [{kind}] {self.score}")
        if max_level is not None and level >= max_level:
            return
        for child in self.children:
            child._render(lines, level + 1, max_level)

    def __repr__(self) -> str:
        return (
            f"SearchNode(move={self.move}, score={self.score}, depth={self.depth}, "
            f"maximise={self.maximise}, children={len(self.children)})"
        )


class MinMaxTreeStrategy(Strategy):
    """Strategy searching a depth-bounded minimax game tree.

    A fresh tree is built for every decision; nothing is kept between calls.

    Args:
        depth: Number of plies to search.

    Example:
        strategy = MinMaxTreeStrategy(depth=MinMaxTreeStrategy.calc_adequate_depth(8))
        move = strategy.calc_move(board, piece=handed_over)
        piece = strategy.choose_piece_for_opponent(board_after_move)
    """

    def __init__(self, depth: int) -> None:
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        self.depth = depth

    @property
    def strategy_type(self) -> StrategyType:
        return StrategyType.MINMAX_TREE

    @staticmethod
    def calc_adequate_depth(pieces_played: int) -> int:
        """Pick the search depth from the number of pieces already played.

        The search goes deeper toward the endgame, where the tree is smaller.

        Returns:
            2 for 0..7 pieces played, 3 for 8..10, 4 for 11..15, else 0.
        """
        for low, high, depth in DEPTH_BANDS:
            if low <= pieces_played <= high:
                return depth
        return 0

    def search(
        self,
        board: Board,
        piece: Piece | None = None,
        depth: int | None = None,
    ) -> SearchNode:
        """Build and expand a maximising root for the given board.

        Args:
            board: Board to search from, left untouched.
            piece: Piece every root move must place.
            depth: Depth override (defaults to the strategy depth).

        Returns:
            The expanded root node.
        """
        root = SearchNode(depth=self.depth if depth is None else depth, piece=piece)
        root.expand(board)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Searched depth %d with %s: %d nodes, root %s",
                root.depth,
                piece or "any piece",
                root.size(),
                root.score,
            )
        return root

    def calc_move(self, board: Board, piece: Piece | None = None) -> Move:
        """Choose the move with the best minimax score.

        Raises:
            NoBestMoveError: If the search produced no candidate, or the best
                move does not place the imposed piece.
        """
        root = self.search(board, piece)
        move = root.best_move()
        if piece is not None and move.piece != piece:
            raise NoBestMoveError(
                f"Best move places {move.piece} instead of {piece}",
                details={"move": str(move), "piece": str(piece)},
            )
        logger.info("Minmax move %s at depth %d (%s)", move, root.depth, root.score)
        return move

    def choose_piece_for_opponent(self, board: Board) -> Piece:
        """Choose the piece whose best placement scores lowest for the opponent.

        Children of an unconstrained search are grouped by piece, keeping the
        highest score per piece. The piece with the lowest of these is handed
        over, the lowest piece index winning ties. When even that piece lets
        the opponent win, the search is retried one level shallower, down to
        depth 1.

        Raises:
            NoBestMoveError: If there is no piece to hand over.
        """
        depth = self.depth
        while True:
            root = self.search(board, depth=depth)
            best_by_piece: dict[int, Score] = {}
            for child in root.children:
                index = child.move.piece.index
                current = best_by_piece.get(index)
                if current is None or child.score > current:
                    best_by_piece[index] = child.score

            if not best_by_piece:
                raise NoBestMoveError(
                    "No piece to hand over",
                    details={"depth": depth},
                )

            index = min(best_by_piece, key=lambda i: (best_by_piece[i], i))
            score = best_by_piece[index]
            if score.is_win and depth > 1:
                logger.info(
                    "Every piece lets the opponent win at depth %d, retrying at depth %d",
                    depth,
                    depth - 1,
                )
                depth -= 1
                continue

            piece = board.get_piece_from_available(index)
            logger.info("Minmax hands over %s at depth %d (%s)", piece, depth, score)
            return piece

    def __repr__(self) -> str:
        return f"MinMaxTreeStrategy(depth={self.depth})"
