# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Strategy registry and selection.

This module provides:
- StrategyRegistry: Registry of strategy factories by type
- get_strategy_registry: Factory function for the default registry
- adequate_strategy: Pick the strategy fitting a board

Usage:
    from quarto.domains.game.strategies import adequate_strategy

    strategy = adequate_strategy(board)
    move = strategy.calc_move(board, piece)
"""

import logging
from collections.abc import Callable
from typing import Any, Iterator

from quarto.core.config.settings import Settings, get_settings
from quarto.domains.game.board import Board
from quarto.domains.game.exceptions import QuartoError
from quarto.domains.game.models import CELL_COUNT
from quarto.domains.game.strategies.base import Strategy, StrategyType
from quarto.domains.game.strategies.minmax_tree import MinMaxTreeStrategy
from quarto.domains.game.strategies.random_strategy import RandomStrategy

logger = logging.getLogger(__name__)

StrategyFactory = Callable[..., Strategy]


class StrategyNotRegisteredError(QuartoError):
    """Raised when creating a strategy of an unregistered type.

    Attributes:
        strategy_type: The strategy type that was not found.
        available: List of available strategy types.
    """

    def __init__(self, strategy_type: StrategyType, available: list[StrategyType]) -> None:
        self.strategy_type = strategy_type
        self.available = available
        available_str = ", ".join(t.value for t in available)
        super().__init__(
            f"Strategy '{strategy_type.value}' not registered. "
            f"Available: {available_str or 'none'}"
        )


class StrategyRegistry:
    """Registry mapping strategy types to factories.

    Factories are called with keyword arguments (``depth`` for the minimax
    tree, ``seed`` for the random strategy) and return a fresh strategy.

    Example:
        registry = StrategyRegistry()
        registry.register(StrategyType.MINMAX_TREE, MinMaxTreeStrategy)
        strategy = registry.create(StrategyType.MINMAX_TREE, depth=3)
    """

    def __init__(self) -> None:
        self._factories: dict[StrategyType, StrategyFactory] = {}

    def register(self, strategy_type: StrategyType, factory: StrategyFactory) -> None:
        """Register a factory for a strategy type.

        Raises:
            ValueError: If a factory for this type already exists.
        """
        if strategy_type in self._factories:
            raise ValueError(
                f"Strategy '{strategy_type.value}' is already registered. "
                f"Use replace() to override."
            )
        self._factories[strategy_type] = factory
        logger.debug("Registered strategy: %s", strategy_type.value)

    def replace(self, strategy_type: StrategyType, factory: StrategyFactory) -> None:
        """Register or replace the factory for a strategy type."""
        if strategy_type in self._factories:
            logger.debug("Replacing strategy: %s", strategy_type.value)
        self._factories[strategy_type] = factory

    def create(self, strategy_type: StrategyType, **kwargs: Any) -> Strategy:
        """Create a strategy of the given type.

        Args:
            strategy_type: Type of strategy.
            **kwargs: Arguments passed to the factory.

        Returns:
            A new strategy instance.

        Raises:
            StrategyNotRegisteredError: If no factory is registered.
        """
        factory = self._factories.get(strategy_type)
        if factory is None:
            raise StrategyNotRegisteredError(
                strategy_type=strategy_type,
                available=self.list_types(),
            )
        return factory(**kwargs)

    def has(self, strategy_type: StrategyType) -> bool:
        return strategy_type in self._factories

    def list_types(self) -> list[StrategyType]:
        return list(self._factories.keys())

    def __len__(self) -> int:
        return len(self._factories)

    def __contains__(self, strategy_type: StrategyType) -> bool:
        return strategy_type in self._factories

    def __iter__(self) -> Iterator[StrategyType]:
        return iter(self._factories)

    def __repr__(self) -> str:
        types = ", ".join(t.value for t in self._factories)
        return f"StrategyRegistry([{types}])"


# Global default registry instance (lazy-loaded)
_default_registry: StrategyRegistry | None = None


def get_strategy_registry() -> StrategyRegistry:
    """Get or create the global default strategy registry.

    Returns:
        The default registry, holding the random and minimax-tree strategies.
    """
    global _default_registry

    if _default_registry is None:
        registry = StrategyRegistry()
        registry.register(StrategyType.RANDOM, RandomStrategy)
        registry.register(StrategyType.MINMAX_TREE, MinMaxTreeStrategy)
        _default_registry = registry

    return _default_registry


def reset_strategy_registry() -> None:
    """Reset the global default strategy registry.

    Useful for testing.
    """
    global _default_registry
    _default_registry = None


def adequate_strategy(board: Board, settings: Settings | None = None) -> Strategy:
    """Pick the strategy fitting the board.

    The random strategy is used for the opening plies, while more than
    ``16 - random_opening_plies`` cells are empty. Afterwards the minimax
    tree is used, searching deeper as pieces get played.

    Args:
        board: Current board.
        settings: Settings to use (defaults to get_settings()).

    Returns:
        A new strategy instance.
    """
    ai = (settings or get_settings()).ai
    registry = get_strategy_registry()
    pieces_played = board.pieces_played()

    if len(board.get_empty_cells()) > CELL_COUNT - ai.random_opening_plies:
        seed = None if ai.random_seed is None else ai.random_seed + pieces_played
        logger.debug("Opening ply %d: random strategy", pieces_played)
        return registry.create(StrategyType.RANDOM, seed=seed)

    depth = MinMaxTreeStrategy.calc_adequate_depth(pieces_played)
    if ai.max_depth is not None:
        depth = min(depth, ai.max_depth)
    logger.debug("%d pieces played: minmax tree at depth %d", pieces_played, depth)
    return registry.create(StrategyType.MINMAX_TREE, depth=depth)
