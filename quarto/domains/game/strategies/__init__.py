# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Quarto strategies.

This package provides:
- Strategy: Abstract base class for all strategies
- RandomStrategy: Uniformly random play for the opening
- MinMaxTreeStrategy: Depth-bounded minimax game-tree search
- StrategyRegistry: Registry of strategy factories
- adequate_strategy: Strategy selection from the board

Usage:
    from quarto.domains.game.strategies import adequate_strategy

    strategy = adequate_strategy(board)
    piece = strategy.choose_piece_for_opponent(board)
"""

from quarto.domains.game.strategies.base import Strategy, StrategyType, candidate_moves
from quarto.domains.game.strategies.minmax_tree import MinMaxTreeStrategy, SearchNode
from quarto.domains.game.strategies.random_strategy import RandomStrategy
from quarto.domains.game.strategies.registry import (
    StrategyNotRegisteredError,
    StrategyRegistry,
    adequate_strategy,
    get_strategy_registry,
    reset_strategy_registry,
)

__all__ = [
    # Base
    "Strategy",
    "StrategyType",
    "candidate_moves",
    # Implementations
    "RandomStrategy",
    "MinMaxTreeStrategy",
    "SearchNode",
    # Registry
    "StrategyRegistry",
    "StrategyNotRegisteredError",
    "get_strategy_registry",
    "reset_strategy_registry",
    "adequate_strategy",
]
