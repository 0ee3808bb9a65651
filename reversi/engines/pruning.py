# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Corner-aware pruning of generated moves.

Before the search recurses into a node's children it narrows them down:
1. If some moves take a corner that is still empty, only those are kept.
2. Otherwise, if some moves leave the opponent no corner to take on the
   next turn, only those are kept.
3. Otherwise every move is kept.

This is a preference, not a rule: an empty result never replaces the
candidates. Near the end of the game corners stop mattering more than the
final count, so the search only prunes below PRUNE_PIECE_LIMIT discs.
"""

from reversi.engines.board import CORNERS, Board, Cell, Child

PRUNE_PIECE_LIMIT = 56


def takes_corner(parent: Board, child: Board, color: Cell) -> bool:
    """Whether ``child`` fills a corner with ``color`` that was empty on ``parent``."""
    return any(
        parent[corner] == Cell.EMPTY and child[corner] == color for corner in CORNERS
    )


def concedes_corner(board: Board, color: Cell) -> bool:
    """Whether the opponent of ``color`` can play a corner on ``board``."""
    opponent = color.opponent
    return any(board.is_move_valid(corner.row, corner.col, opponent) for corner in CORNERS)


def corner_prune(parent: Board, children: list[Child], color: Cell) -> list[Child]:
    """Filter ``children`` of ``parent`` in favour of ``color``.

    Board and move stay paired because whole Child records are filtered.

    Args:
        parent: Board the children were generated from.
        children: Generated (board, move) pairs.
        color: The player who made the moves.

    Returns:
        The preferred subset, or ``children`` itself if no preference applies.
    """
    capturing = [child for child in children if takes_corner(parent, child.board, color)]
    if capturing:
        return capturing

    denying = [child for child in children if not concedes_corner(child.board, color)]
    if denying:
        return denying

    return children


def should_prune(board: Board) -> bool:
    """Pruning applies while the board holds fewer than PRUNE_PIECE_LIMIT discs."""
    return board.piece_count < PRUNE_PIECE_LIMIT
