# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Static evaluation of Reversi positions.

The evaluator combines four factors, each expressed as the maximizer's
share of the combined total so they are on a comparable scale:
- score: disc count
- mobility: number of legal moves
- position: sum of POSITION_WEIGHTS over owned squares
- stability: heuristic count of discs that are hard to flip back

How much each factor matters depends on the stage of the game, measured by
the number of discs on the board. Early on only mobility counts, so the
engine does not overextend; in the endgame only the disc count does.
"""

from dataclasses import dataclass

from reversi.engines.board import BOARD_SIZE, CORNERS, DIRECTIONS, Board, Cell, is_on_board

# Values returned for finished games (32-bit integer bounds)
WIN_VALUE = 2**31 - 1
LOSS_VALUE = -(2**31)

# Corners anchor every flip, so they dominate; the squares next to a corner
# are worth nothing because they hand the corner to the opponent.
POSITION_WEIGHTS: tuple[tuple[int, ...], ...] = (
    (300, 0, 72, 56, 56, 72, 0, 300),
    (0, 0, 0, 0, 0, 0, 0, 0),
    (72, 0, 21, 16, 16, 21, 0, 72),
    (56, 0, 16, 21, 21, 16, 0, 56),
    (56, 0, 16, 21, 21, 16, 0, 56),
    (72, 0, 21, 16, 16, 21, 0, 72),
    (0, 0, 0, 0, 0, 0, 0, 0),
    (300, 0, 72, 56, 56, 72, 0, 300),
)


@dataclass(frozen=True)
class WeightProfile:
    """Multipliers applied to the four evaluation factors."""

    score: int
    position: int
    mobility: int
    stability: int


SCORE_ONLY = WeightProfile(score=100, position=0, mobility=0, stability=0)

# (exclusive piece-count bound, profile), checked in order
STAGE_PROFILES: tuple[tuple[int, WeightProfile], ...] = (
    (16, WeightProfile(score=0, position=0, mobility=100, stability=0)),
    (24, WeightProfile(score=0, position=30, mobility=70, stability=0)),
    (32, WeightProfile(score=30, position=30, mobility=30, stability=10)),
    (50, WeightProfile(score=30, position=20, mobility=20, stability=30)),
    (56, WeightProfile(score=60, position=10, mobility=10, stability=20)),
)


def profile_for(piece_count: int) -> WeightProfile:
    """Select the weight profile for a board holding ``piece_count`` discs."""
    for bound, profile in STAGE_PROFILES:
        if piece_count < bound:
            return profile
    return SCORE_ONLY


def percentage(mine: int, theirs: int) -> int:
    """Difference as a percentage of the total, truncated toward zero.

    Returns 0 when both totals are zero.
    """
    total = mine + theirs
    if total == 0:
        return 0
    return int(100.0 * (mine - theirs) / total)


def positional_value(board: Board, color: Cell) -> int:
    """Sum of POSITION_WEIGHTS over the squares held by ``color``."""
    return sum(POSITION_WEIGHTS[square.row][square.col] for square in board.squares(color))


def _corner_neighbours(row: int, col: int) -> tuple[tuple[int, int], ...]:
    dr = 1 if row == 0 else -1
    dc = 1 if col == 0 else -1
    return ((row, col + dc), (row + dr, col), (row + dr, col + dc))


def _is_enclosed(board: Board, row: int, col: int) -> bool:
    """No ray from (row, col) meets an empty square before leaving the board."""
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        while is_on_board(r, c):
            if board[r, c] == Cell.EMPTY:
                return False
            r += dr
            c += dc
    return True


def stable_disc_value(board: Board, color: Cell) -> int:
    """Weighted count of stable discs for ``color``.

    - +2 for each owned corner, whose runs of ``color`` along its row and
      column are marked as anchored
    - +1 for each owned corner whose three neighbours are also owned
    - +1 for every disc (of either color) whose eight rays are all filled
      up to the edge
    - +2 for every anchored square

    Corner and edge discs may score under several rules; they are the ones
    that matter most for stability.
    """
    anchored: set[tuple[int, int]] = set()
    value = 0

    for corner in CORNERS:
        if board[corner] != color:
            continue
        value += 2
        dr = 1 if corner.row == 0 else -1
        dc = 1 if corner.col == 0 else -1

        r = corner.row
        while is_on_board(r, corner.col) and board[r, corner.col] == color:
            anchored.add((r, corner.col))
            r += dr
        c = corner.col
        while is_on_board(corner.row, c) and board[corner.row, c] == color:
            anchored.add((corner.row, c))
            c += dc

        if all(board[square] == color for square in _corner_neighbours(*corner)):
            value += 1

    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if board[row, col] != Cell.EMPTY and _is_enclosed(board, row, col):
                value += 1

    return value + 2 * len(anchored)


def evaluate(
    board: Board,
    maximizing: Cell = Cell.BLACK,
    profile: WeightProfile | None = None,
) -> int:
    """Evaluate ``board`` from the point of view of ``maximizing``.

    Args:
        board: Board to evaluate.
        maximizing: The color the search is maximizing for.
        profile: Weights to use; defaults to the profile for the board's
            own piece count.

    Returns:
        WIN_VALUE or LOSS_VALUE for a finished game (a draw counts as a
        loss), otherwise the weighted sum of the four factor percentages.
    """
    minimizing = maximizing.opponent

    max_moves = board.count_moves(maximizing)
    min_moves = board.count_moves(minimizing)
    if max_moves == 0 and min_moves == 0:
        if board.score(maximizing) > board.score(minimizing):
            return WIN_VALUE
        return LOSS_VALUE

    if profile is None:
        profile = profile_for(board.piece_count)

    score_value = percentage(board.score(maximizing), board.score(minimizing))
    mobility_value = percentage(max_moves, min_moves)
    position_value = percentage(
        positional_value(board, maximizing), positional_value(board, minimizing)
    )
    stability_value = percentage(
        stable_disc_value(board, maximizing), stable_disc_value(board, minimizing)
    )

    return (
        score_value * profile.score
        + mobility_value * profile.mobility
        + position_value * profile.position
        + stability_value * profile.stability
    )
