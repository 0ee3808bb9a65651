# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Move selection strategies, one per difficulty level.

- RandomStrategy (EASY): any legal move, uniformly at random
- GreedyStrategy (NORMAL): grabs a corner when it can, otherwise the move
  whose resulting board has the best disc count
- MinimaxStrategy (HARD): heuristic minimax at a fixed, shallow depth
- AdaptiveMinimaxStrategy (INSANE): heuristic minimax whose depth follows
  the stage of the game (see depth_for_piece_count)
"""

import random
from abc import abstractmethod

from reversi.engines.base import MoveChoice, MoveStrategy, NoLegalMoveError
from reversi.engines.board import Board, Cell, Coordinate, generate_moves
from reversi.engines.evaluation import SCORE_ONLY, evaluate
from reversi.engines.search import depth_for_piece_count, search_root
from reversi.models import GameDifficulty
from reversi.utils.logging import get_logger

logger = get_logger(__name__)

# Corners in the order the greedy player grabs them
GREEDY_CORNER_ORDER = (
    Coordinate(0, 7),
    Coordinate(7, 0),
    Coordinate(0, 0),
    Coordinate(7, 7),
)


def _no_move(board: Board, color: Cell) -> NoLegalMoveError:
    return NoLegalMoveError(
        message=f"{color.name} has no legal move",
        details={"piece_count": board.piece_count},
    )


class RandomStrategy(MoveStrategy):
    """Plays a random legal move.

    Args:
        seed: Seed for reproducible games; None for an unseeded generator.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    @property
    def difficulty(self) -> GameDifficulty:
        return GameDifficulty.EASY

    @property
    def name(self) -> str:
        return "Random mover"

    def choose(self, board: Board, color: Cell) -> MoveChoice:
        moves = board.legal_moves(color)
        if not moves:
            raise _no_move(board, color)
        return MoveChoice(move=self._random.choice(moves))


class GreedyStrategy(MoveStrategy):
    """Takes any available corner, otherwise maximizes the immediate disc count.

    Children are scored with the score-only profile from the mover's point
    of view; the first of equally good moves wins.
    """

    @property
    def difficulty(self) -> GameDifficulty:
        return GameDifficulty.NORMAL

    @property
    def name(self) -> str:
        return "Greedy corner grabber"

    def choose(self, board: Board, color: Cell) -> MoveChoice:
        children = generate_moves(board, color)
        if not children:
            raise _no_move(board, color)

        moves = {child.move for child in children}
        for corner in GREEDY_CORNER_ORDER:
            if corner in moves:
                return MoveChoice(move=corner)

        best = children[0]
        best_value = evaluate(best.board, color, SCORE_ONLY)
        for child in children[1:]:
            value = evaluate(child.board, color, SCORE_ONLY)
            if value > best_value:
                best, best_value = child, value

        return MoveChoice(move=best.move, value=best_value)


class SearchStrategy(MoveStrategy):
    """Shared root search for the minimax strategies."""

    @abstractmethod
    def depth_for(self, board: Board) -> int:
        """Depth to search ``board`` at."""
        pass

    def choose(self, board: Board, color: Cell) -> MoveChoice:
        depth = self.depth_for(board)
        result = search_root(board, depth, color)
        logger.debug(
            "Minimax move chosen",
            strategy=self.name,
            piece_count=board.piece_count,
            depth=depth,
            move=result.move,
            value=result.value,
        )
        return MoveChoice(move=result.move, value=result.value, depth=depth)


class MinimaxStrategy(SearchStrategy):
    """Heuristic minimax with corner pruning at a fixed depth.

    Args:
        depth: Search depth (plies).
    """

    def __init__(self, depth: int = 3) -> None:
        if depth < 1:
            raise ValueError(f"Search depth must be positive, got {depth}")
        self.depth = depth

    @property
    def difficulty(self) -> GameDifficulty:
        return GameDifficulty.HARD

    @property
    def name(self) -> str:
        return f"Minimax (depth {self.depth})"

    def depth_for(self, board: Board) -> int:
        return self.depth


class AdaptiveMinimaxStrategy(SearchStrategy):
    """Heuristic minimax searching deeper in the opening and the endgame."""

    @property
    def difficulty(self) -> GameDifficulty:
        return GameDifficulty.INSANE

    @property
    def name(self) -> str:
        return "Adaptive-depth minimax"

    def depth_for(self, board: Board) -> int:
        return depth_for_piece_count(board.piece_count)
