# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Strategy registry for managing the AI opponents.

This module provides:
- StrategyRegistry: Central registry of move strategies by difficulty
- get_strategy_registry: Factory function for the default registry

Usage:
    from reversi.engines import get_strategy_registry

    registry = get_strategy_registry()
    strategy = registry.get(GameDifficulty.HARD)
    move = strategy.select_move(board, Cell.BLACK)
"""

import logging
from typing import Iterator

from reversi.engines.base import MoveStrategy
from reversi.models import GameDifficulty

logger = logging.getLogger(__name__)


class StrategyNotRegisteredError(Exception):
    """Raised when attempting to get an unregistered strategy.

    Attributes:
        difficulty: The difficulty that was not found.
        available: List of available difficulties.
    """

    def __init__(self, difficulty: GameDifficulty, available: list[GameDifficulty]) -> None:
        self.difficulty = difficulty
        self.available = available
        available_str = ", ".join(d.value for d in available)
        message = (
            f"Strategy for '{difficulty.value}' not registered. "
            f"Available: {available_str or 'none'}"
        )
        super().__init__(message)


class StrategyRegistry:
    """Registry mapping difficulty levels to strategy instances.

    Example:
        registry = StrategyRegistry()
        registry.register(RandomStrategy())
        registry.register(MinimaxStrategy(depth=3))

        hard = registry.get(GameDifficulty.HARD)
    """

    def __init__(self) -> None:
        """Initialize an empty strategy registry."""
        self._strategies: dict[GameDifficulty, MoveStrategy] = {}

    def register(self, strategy: MoveStrategy) -> None:
        """Register a strategy under its difficulty.

        Args:
            strategy: Strategy instance to register.

        Raises:
            ValueError: If a strategy for this difficulty already exists.
        """
        difficulty = strategy.difficulty

        if difficulty in self._strategies:
            raise ValueError(
                f"Strategy for '{difficulty.value}' is already registered. "
                f"Use replace() to override."
            )

        self._strategies[difficulty] = strategy
        logger.info(
            "Registered strategy: %s (%s)",
            strategy.name,
            difficulty.value,
        )

    def replace(self, strategy: MoveStrategy) -> None:
        """Register or replace the strategy for its difficulty.

        Args:
            strategy: Strategy instance to register or replace.
        """
        difficulty = strategy.difficulty

        if difficulty in self._strategies:
            logger.info(
                "Replacing strategy for %s: %s",
                difficulty.value,
                strategy.name,
            )

        self._strategies[difficulty] = strategy

    def get(self, difficulty: GameDifficulty) -> MoveStrategy:
        """Get the strategy for a difficulty.

        Args:
            difficulty: Difficulty level.

        Returns:
            The registered strategy.

        Raises:
            StrategyNotRegisteredError: If no strategy is registered.
        """
        if difficulty not in self._strategies:
            raise StrategyNotRegisteredError(
                difficulty=difficulty,
                available=list(self._strategies.keys()),
            )

        return self._strategies[difficulty]

    def list_difficulties(self) -> list[GameDifficulty]:
        """List all registered difficulties."""
        return list(self._strategies.keys())

    def get_info(self) -> list[dict[str, str]]:
        """Get 'difficulty' and 'name' for each registered strategy."""
        return [
            {
                "difficulty": strategy.difficulty.value,
                "name": strategy.name,
            }
            for strategy in self._strategies.values()
        ]

    def __len__(self) -> int:
        return len(self._strategies)

    def __contains__(self, difficulty: GameDifficulty) -> bool:
        return difficulty in self._strategies

    def __iter__(self) -> Iterator[GameDifficulty]:
        return iter(self._strategies)

    def __repr__(self) -> str:
        difficulties = ", ".join(d.value for d in self._strategies.keys())
        return f"StrategyRegistry([{difficulties}])"


# Global default registry instance (lazy-loaded)
_default_registry: StrategyRegistry | None = None


def get_strategy_registry() -> StrategyRegistry:
    """Get or create the global default strategy registry.

    Returns:
        The default registry with one strategy per difficulty.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = _create_default_registry()

    return _default_registry


def _create_default_registry() -> StrategyRegistry:
    """Create the default registry from the search settings."""
    from reversi.config.settings import get_settings
    from reversi.engines.strategies import (
        AdaptiveMinimaxStrategy,
        GreedyStrategy,
        MinimaxStrategy,
        RandomStrategy,
    )

    settings = get_settings().search
    registry = StrategyRegistry()
    registry.register(RandomStrategy(seed=settings.random_seed))
    registry.register(GreedyStrategy())
    registry.register(MinimaxStrategy(depth=settings.hard_depth))
    registry.register(AdaptiveMinimaxStrategy())

    logger.info(
        "Created default StrategyRegistry with %d strategies: %s",
        len(registry),
        [info["name"] for info in registry.get_info()],
    )

    return registry


def reset_strategy_registry() -> None:
    """Reset the global default strategy registry.

    Useful for testing or after changing settings.
    """
    global _default_registry
    _default_registry = None
    logger.info("Strategy registry reset")
