# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Board model, move legality and move generation.

The Board is the value type the search works on: an 8x8 grid of cells with
cached piece counts and the player to move. Every node of the search
tree owns its own copy; a board is only mutated while it is being
built, before any other node has seen it.

Coordinates are (row, col) with row 0 at the top. For identity they also
carry the integer code ``col * 10 + row``, which only works while the board
dimension stays below ten.

Example:
    board = Board.initial()
    for child in generate_moves(board, Cell.WHITE):
        print(child.move, child.board.white_score)
"""

from collections.abc import Iterator, Sequence
from enum import IntEnum
from typing import NamedTuple

from reversi.engines.base import InvalidMoveError, InvalidPositionError

BOARD_SIZE = 8

# All eight directions as (row step, col step)
DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]


class Cell(IntEnum):
    """Content of a board square."""

    EMPTY = 0
    BLACK = -1
    WHITE = 1

    @property
    def opponent(self) -> "Cell":
        """The other color (EMPTY stays EMPTY)."""
        return Cell(-self.value)


class Coordinate(NamedTuple):
    """A board square as (row, col)."""

    row: int
    col: int

    @property
    def code(self) -> int:
        """Integer identity of the square: ``col * 10 + row``."""
        return self.col * 10 + self.row

    @property
    def notation(self) -> str:
        """Column letter and 1-based row, e.g. "d3" for (2, 3)."""
        return f"{chr(ord('a') + self.col)}{self.row + 1}"

    @classmethod
    def from_code(cls, code: int) -> "Coordinate":
        """Decode a ``col * 10 + row`` integer.

        Raises:
            ValueError: If the code does not name a square on the board.
        """
        col, row = divmod(code, 10)
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise ValueError(f"Move code out of range: {code}")
        return cls(row, col)


CORNERS = (
    Coordinate(0, 0),
    Coordinate(0, BOARD_SIZE - 1),
    Coordinate(BOARD_SIZE - 1, 0),
    Coordinate(BOARD_SIZE - 1, BOARD_SIZE - 1),
)


def is_on_board(row: int, col: int) -> bool:
    """Check whether (row, col) lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Board:
    """8x8 Reversi board with cached disc counts.

    Attributes:
        piece_count: Number of discs on the board.
        black_score: Number of black discs.
        white_score: Number of white discs.
        turn: The player to move. Generated children hand the turn to the
            opponent of the player who moved.
    """

    __slots__ = ("_grid", "piece_count", "black_score", "white_score", "turn")

    def __init__(self, turn: Cell = Cell.WHITE) -> None:
        """Create an empty board."""
        self._grid: list[list[Cell]] = [
            [Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self.piece_count = 0
        self.black_score = 0
        self.white_score = 0
        self.turn = turn

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]], turn: Cell) -> "Board":
        """Build a board from an external 8x8 snapshot.

        Args:
            grid: Rows of cells, as Cell members or the raw values -1, 0, 1.
            turn: The player to move on the snapshot.

        Returns:
            A new board; only non-empty cells contribute to the counts.

        Raises:
            InvalidPositionError: If the grid is not 8x8 or holds unknown values.
        """
        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise InvalidPositionError(
                message=f"Board must be {BOARD_SIZE}x{BOARD_SIZE}",
                details={"rows": len(grid)},
            )

        board = cls(Cell(turn))
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                try:
                    cell = Cell(grid[row][col])
                except ValueError as e:
                    raise InvalidPositionError(
                        message=f"Unknown cell value at ({row}, {col}): {grid[row][col]!r}",
                    ) from e
                if cell != Cell.EMPTY:
                    board._grid[row][col] = cell
                    board._count(cell, 1)
        return board

    @classmethod
    def initial(cls, turn: Cell = Cell.WHITE) -> "Board":
        """Standard opening: two discs of each color in the centre."""
        board = cls(turn)
        for row, col, cell in (
            (3, 3, Cell.WHITE),
            (4, 4, Cell.WHITE),
            (3, 4, Cell.BLACK),
            (4, 3, Cell.BLACK),
        ):
            board._grid[row][col] = cell
            board._count(cell, 1)
        return board

    def copy(self, turn: Cell | None = None) -> "Board":
        """Return a full copy, optionally relabeling the turn."""
        board = Board.__new__(Board)
        board._grid = [row[:] for row in self._grid]
        board.piece_count = self.piece_count
        board.black_score = self.black_score
        board.white_score = self.white_score
        board.turn = self.turn if turn is None else turn
        return board

    # =========================================================================
    # Accessors
    # =========================================================================

    def __getitem__(self, square: tuple[int, int]) -> Cell:
        row, col = square
        return self._grid[row][col]

    @property
    def grid(self) -> tuple[tuple[Cell, ...], ...]:
        """Read-only view of the cells, row by row."""
        return tuple(tuple(row) for row in self._grid)

    def score(self, color: Cell) -> int:
        """Number of discs of ``color``."""
        return self.black_score if color == Cell.BLACK else self.white_score

    def squares(self, color: Cell) -> Iterator[Coordinate]:
        """Iterate over the squares holding ``color`` in row-major order."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self._grid[row][col] == color:
                    yield Coordinate(row, col)

    # =========================================================================
    # Move Legality
    # =========================================================================

    def is_move_valid(self, row: int, col: int, color: Cell) -> bool:
        """Check whether ``color`` may play at (row, col).

        The square must be on the board and empty, and at least one direction
        must capture: the neighbour holds the opposite color and, walking on
        over non-empty squares, a disc of ``color`` is reached before the
        edge or a gap.
        """
        grid = self._grid
        if not is_on_board(row, col) or grid[row][col] != Cell.EMPTY:
            return False

        opponent = -color
        for dr, dc in DIRECTIONS:
            r, c = row + dr, col + dc
            if not (is_on_board(r, c) and grid[r][c] == opponent):
                continue
            while is_on_board(r, c) and grid[r][c] != Cell.EMPTY:
                if grid[r][c] == color:
                    return True
                r += dr
                c += dc
        return False

    def _capture_runs(self, row: int, col: int, color: Cell) -> list[list[Coordinate]]:
        """Opponent discs that a move at (row, col) would flip, one run per direction."""
        grid = self._grid
        opponent = -color
        runs = []

        for dr, dc in DIRECTIONS:
            run = []
            r, c = row + dr, col + dc
            while is_on_board(r, c) and grid[r][c] == opponent:
                run.append(Coordinate(r, c))
                r += dr
                c += dc
            if run and is_on_board(r, c) and grid[r][c] == color:
                runs.append(run)

        return runs

    def flips_for(self, row: int, col: int, color: Cell) -> list[Coordinate]:
        """All discs a move at (row, col) would flip (empty if illegal)."""
        if not is_on_board(row, col) or self._grid[row][col] != Cell.EMPTY:
            return []
        return [square for run in self._capture_runs(row, col, color) for square in run]

    def count_moves(self, color: Cell) -> int:
        """Number of legal moves for ``color``."""
        return sum(
            1
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self.is_move_valid(row, col, color)
        )

    def legal_moves(self, color: Cell) -> list[Coordinate]:
        """Legal moves for ``color`` in row-major order."""
        return [
            Coordinate(row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self.is_move_valid(row, col, color)
        ]

    def has_moves(self, color: Cell) -> bool:
        """Whether ``color`` has at least one legal move."""
        return any(
            self.is_move_valid(row, col, color)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
        )

    def is_terminal(self) -> bool:
        """Neither player can move."""
        return not self.has_moves(Cell.BLACK) and not self.has_moves(Cell.WHITE)

    # =========================================================================
    # Move Application
    # =========================================================================

    def apply_move(self, row: int, col: int, color: Cell) -> int:
        """Place a disc of ``color`` at (row, col) and flip every captured run.

        Updates the piece count and both scores. The turn is left alone;
        the move generator advances it.

        Args:
            row: Target row.
            col: Target column.
            color: Color of the disc placed.

        Returns:
            Number of discs flipped.

        Raises:
            InvalidMoveError: If the square is off the board, occupied, or
                the move captures nothing.
        """
        if not is_on_board(row, col):
            raise InvalidMoveError(
                message=f"Square ({row}, {col}) is off the board",
                details={"row": row, "col": col},
            )
        if self._grid[row][col] != Cell.EMPTY:
            raise InvalidMoveError(
                message=f"Square ({row}, {col}) is already occupied",
                details={"row": row, "col": col},
            )

        runs = self._capture_runs(row, col, color)
        if not runs:
            raise InvalidMoveError(
                message=f"Move at ({row}, {col}) does not flip any discs",
                details={"row": row, "col": col, "color": color.name},
            )

        self._grid[row][col] = color
        self._count(color, 1)

        flipped = 0
        for run in runs:
            for square in run:
                self._grid[square.row][square.col] = color
            self._count(color, len(run), piece_delta=0)
            self._count(color.opponent, -len(run), piece_delta=0)
            flipped += len(run)

        return flipped

    def play(self, row: int, col: int, color: Cell) -> "Board":
        """Return the board after ``color`` plays at (row, col), turn advanced."""
        child = self.copy(turn=color)
        child.apply_move(row, col, color)
        child.turn = color.opponent
        return child

    def _count(self, color: Cell, delta: int, piece_delta: int | None = None) -> None:
        if color == Cell.BLACK:
            self.black_score += delta
        else:
            self.white_score += delta
        self.piece_count += delta if piece_delta is None else piece_delta

    # =========================================================================
    # Dunder methods
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        """Boards are equal when every square matches."""
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        symbols = {Cell.EMPTY: ".", Cell.BLACK: "B", Cell.WHITE: "W"}
        return "\n".join("".join(symbols[cell] for cell in row) for row in self._grid)

    def __repr__(self) -> str:
        return (
            f"Board(pieces={self.piece_count}, black={self.black_score}, "
            f"white={self.white_score}, turn={self.turn.name})"
        )


class Child(NamedTuple):
    """A generated board paired with the move that produced it."""

    board: Board
    move: Coordinate


def generate_moves(board: Board, color: Cell) -> list[Child]:
    """Enumerate every legal move of ``color`` as (child board, move) pairs.

    Squares are scanned in row-major order, so the result is deterministic.
    Each child is a fresh copy with the move applied, one more piece, and the
    turn passed to the opponent.

    Args:
        board: Parent board (not modified).
        color: Player to move.

    Returns:
        List of Child records.
    """
    children = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if board.is_move_valid(row, col, color):
                children.append(Child(board.play(row, col, color), Coordinate(row, col)))
    return children
