# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Base classes for the Reversi engine.

This module defines:
- The EngineError hierarchy raised by the board model and the search
- MoveStrategy: the ABC every difficulty level implements

A strategy answers a single question for the presentation layer:
"given a board and a player, which coordinate should be played?"
Strategies are stateless apart from their configuration, so one instance
can serve any number of games.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from reversi.models import GameDifficulty

if TYPE_CHECKING:
    from reversi.engines.board import Board, Cell, Coordinate


class EngineError(Exception):
    """Base exception for Reversi engine errors.

    Attributes:
        message: Error description.
        details: Additional error details.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidPositionError(EngineError):
    """Raised when a board snapshot or position notation cannot be parsed."""

    pass


class InvalidMoveError(EngineError):
    """Raised when a move is applied to an off-board, occupied or non-capturing cell."""

    pass


class NoLegalMoveError(EngineError):
    """Raised when a move is requested for a player that has to pass."""

    pass


@dataclass(frozen=True)
class MoveChoice:
    """A strategy's decision.

    Attributes:
        move: Coordinate to play.
        value: Search value of the move, if the strategy scores moves.
        depth: Search depth used, if the strategy searches.
    """

    move: "Coordinate"
    value: int | None = None
    depth: int | None = None


class MoveStrategy(ABC):
    """Abstract base class for move selection strategies.

    Each difficulty level of the AI opponent is one strategy. The board
    passed in is never mutated; strategies search on their own copies.

    Example:
        class FirstMoveStrategy(MoveStrategy):
            @property
            def difficulty(self) -> GameDifficulty:
                return GameDifficulty.EASY

            @property
            def name(self) -> str:
                return "First legal move"

            def choose(self, board, color):
                return MoveChoice(move=board.legal_moves(color)[0])
    """

    @property
    @abstractmethod
    def difficulty(self) -> GameDifficulty:
        """Get the difficulty level this strategy plays at.

        Returns:
            GameDifficulty enum value.
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the human-readable strategy name.

        Returns:
            Strategy name (e.g., "Adaptive-depth minimax").
        """
        pass

    @abstractmethod
    def choose(self, board: "Board", color: "Cell") -> MoveChoice:
        """Choose the move to play, with whatever score the strategy computed.

        Args:
            board: Snapshot of the live board.
            color: The player to move.

        Returns:
            MoveChoice whose move is legal for ``color`` on ``board``.

        Raises:
            NoLegalMoveError: If ``color`` has no legal move.
        """
        pass

    def select_move(self, board: "Board", color: "Cell") -> "Coordinate":
        """Coordinate ``color`` should play on ``board``."""
        return self.choose(board, color).move

    def __repr__(self) -> str:
        """Return string representation."""
        return f"{self.__class__.__name__}(difficulty={self.difficulty.value})"
