# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Reversi engine module.

This module provides:
- Board, Cell, Coordinate: the board model, move legality and application
- generate_moves / corner_prune: move generation and corner-aware pruning
- evaluate / profile_for: stage-weighted static evaluation
- select_move / search_root: depth-limited heuristic minimax
- MoveStrategy and its implementations, one per difficulty
- StrategyRegistry: registry of strategies by difficulty
- ReversiEngine: facade working on Position/GameState models

Usage:
    from reversi.engines import Board, Cell, select_move

    board = Board.from_grid(snapshot, Cell.BLACK)
    move = select_move(board, max_depth=4, maximizing=Cell.BLACK)
"""

from reversi.engines.base import (
    EngineError,
    InvalidMoveError,
    InvalidPositionError,
    MoveChoice,
    MoveStrategy,
    NoLegalMoveError,
)
from reversi.engines.board import (
    BOARD_SIZE,
    CORNERS,
    Board,
    Cell,
    Child,
    Coordinate,
    generate_moves,
)
from reversi.engines.evaluation import (
    LOSS_VALUE,
    POSITION_WEIGHTS,
    SCORE_ONLY,
    WIN_VALUE,
    WeightProfile,
    evaluate,
    profile_for,
    stable_disc_value,
)
from reversi.engines.pruning import PRUNE_PIECE_LIMIT, corner_prune
from reversi.engines.search import (
    SearchResult,
    depth_for_piece_count,
    maximize,
    minimize,
    search_root,
    select_move,
)
from reversi.engines.strategies import (
    AdaptiveMinimaxStrategy,
    GreedyStrategy,
    MinimaxStrategy,
    RandomStrategy,
)
from reversi.engines.registry import (
    StrategyNotRegisteredError,
    StrategyRegistry,
    get_strategy_registry,
    reset_strategy_registry,
)
from reversi.engines.reversi import ReversiEngine

__all__ = [
    # Base
    "EngineError",
    "InvalidMoveError",
    "InvalidPositionError",
    "NoLegalMoveError",
    "MoveChoice",
    "MoveStrategy",
    # Board
    "BOARD_SIZE",
    "CORNERS",
    "Board",
    "Cell",
    "Child",
    "Coordinate",
    "generate_moves",
    # Evaluation
    "LOSS_VALUE",
    "WIN_VALUE",
    "POSITION_WEIGHTS",
    "SCORE_ONLY",
    "WeightProfile",
    "evaluate",
    "profile_for",
    "stable_disc_value",
    # Pruning
    "PRUNE_PIECE_LIMIT",
    "corner_prune",
    # Search
    "SearchResult",
    "depth_for_piece_count",
    "maximize",
    "minimize",
    "search_root",
    "select_move",
    # Strategies
    "RandomStrategy",
    "GreedyStrategy",
    "MinimaxStrategy",
    "AdaptiveMinimaxStrategy",
    # Registry
    "StrategyRegistry",
    "StrategyNotRegisteredError",
    "get_strategy_registry",
    "reset_strategy_registry",
    # Facade
    "ReversiEngine",
]
