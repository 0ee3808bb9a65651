# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Depth-limited heuristic minimax.

The search always maximizes for one fixed color and assumes the opponent
answers with the move that is worst for it under the same evaluator. Nodes
alternate between the maximizer's turn and the minimizer's turn; a node
becomes a leaf when the depth budget is spent or neither side can move, and
leaves are scored by ``evaluate`` with the weight profile of the leaf's own
piece count.

A side without a legal move passes: the same board is searched as the other
side's node one level deeper.

There is no alpha-beta cutoff; the corner pruner is what keeps the tree
small enough. The search is synchronous and can take a while at high depth.
"""

from dataclasses import dataclass, field

from reversi.engines.base import NoLegalMoveError
from reversi.engines.board import Board, Cell, Child, Coordinate, generate_moves
from reversi.engines.evaluation import evaluate
from reversi.engines.pruning import corner_prune, should_prune
from reversi.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SearchResult:
    """Outcome of a root search.

    Attributes:
        move: The chosen coordinate.
        value: Minimax value of the chosen move.
        depth: Depth budget the search ran with.
        scores: Value of every root move that survived pruning, in order.
    """

    move: Coordinate
    value: int
    depth: int
    scores: list[tuple[Coordinate, int]] = field(default_factory=list)


def _candidates(board: Board, color: Cell) -> list[Child]:
    children = generate_moves(board, color)
    if children and should_prune(board):
        children = corner_prune(board, children, color)
    return children


def _is_leaf(board: Board, depth: int, max_depth: int) -> bool:
    return depth >= max_depth or board.is_terminal()


def maximize(board: Board, depth: int, max_depth: int, maximizing: Cell = Cell.BLACK) -> int:
    """Value of ``board`` with ``maximizing`` to move.

    Args:
        board: Current node.
        depth: Depth of this node.
        max_depth: Depth at which nodes become leaves.
        maximizing: The color the whole search maximizes for.

    Returns:
        The highest value among the (pruned) children.
    """
    if _is_leaf(board, depth, max_depth):
        return evaluate(board, maximizing)

    children = _candidates(board, maximizing)
    if not children:
        return minimize(board, depth + 1, max_depth, maximizing)

    return max(minimize(child.board, depth + 1, max_depth, maximizing) for child in children)


def minimize(board: Board, depth: int, max_depth: int, maximizing: Cell = Cell.BLACK) -> int:
    """Value of ``board`` with the opponent of ``maximizing`` to move.

    Args:
        board: Current node.
        depth: Depth of this node.
        max_depth: Depth at which nodes become leaves.
        maximizing: The color the whole search maximizes for.

    Returns:
        The lowest value among the (pruned) children.
    """
    if _is_leaf(board, depth, max_depth):
        return evaluate(board, maximizing)

    children = _candidates(board, maximizing.opponent)
    if not children:
        return maximize(board, depth + 1, max_depth, maximizing)

    return min(maximize(child.board, depth + 1, max_depth, maximizing) for child in children)


def search_root(board: Board, max_depth: int, maximizing: Cell = Cell.BLACK) -> SearchResult:
    """Search every root move of ``maximizing`` and keep the best.

    Ties go to the first move in generation order.

    Args:
        board: Snapshot of the live board (not modified).
        max_depth: Depth budget.
        maximizing: Player to move and to maximize for.

    Returns:
        SearchResult for the chosen move.

    Raises:
        NoLegalMoveError: If ``maximizing`` has to pass.
    """
    children = _candidates(board, maximizing)
    if not children:
        raise NoLegalMoveError(
            message=f"{maximizing.name} has no legal move",
            details={"piece_count": board.piece_count},
        )

    best: Child | None = None
    best_value = 0
    scores = []
    for child in children:
        value = minimize(child.board, 1, max_depth, maximizing)
        scores.append((child.move, value))
        if best is None or value > best_value:
            best = child
            best_value = value

    logger.debug(
        "Root search finished",
        color=maximizing,
        depth=max_depth,
        candidates=len(children),
        move=best.move,
        value=best_value,
    )
    return SearchResult(move=best.move, value=best_value, depth=max_depth, scores=scores)


def select_move(board: Board, max_depth: int, maximizing: Cell = Cell.BLACK) -> Coordinate:
    """Coordinate ``maximizing`` should play on ``board``.

    Raises:
        NoLegalMoveError: If ``maximizing`` has to pass.
    """
    return search_root(board, max_depth, maximizing).move


def depth_for_piece_count(piece_count: int) -> int:
    """Search depth for the stage of the game.

    The opening has few moves, so it is searched deeper; the crowded
    middlegame shallower; the last moves deep enough to reach the end.
    """
    if 4 <= piece_count < 12:
        return 5
    if 12 <= piece_count < 48:
        return 4
    if 48 <= piece_count < 54:
        return 6
    return 12
