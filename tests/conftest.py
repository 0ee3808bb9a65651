# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

Boards are written as eight strings of ``.``/``B``/``W``, top row first;
missing rows are empty.
"""

from collections.abc import Callable, Generator, Sequence

import pytest

from reversi.config.settings import clear_settings_cache
from reversi.engines.board import BOARD_SIZE, Board, Cell
from reversi.engines.registry import reset_strategy_registry

SYMBOL_CELLS = {".": Cell.EMPTY, "B": Cell.BLACK, "W": Cell.WHITE}

BoardFactory = Callable[..., Board]


def build_board(rows: Sequence[str], turn: Cell = Cell.BLACK) -> Board:
    """Build a board from row strings, padding missing rows with empty ones."""
    padded = list(rows) + ["." * BOARD_SIZE] * (BOARD_SIZE - len(rows))
    grid = [[SYMBOL_CELLS[symbol] for symbol in row] for row in padded]
    return Board.from_grid(grid, turn)


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


# =============================================================================
# Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_global_state() -> Generator[None, None, None]:
    """Drop cached settings and the default registry around every test."""
    clear_settings_cache()
    reset_strategy_registry()
    yield
    clear_settings_cache()
    reset_strategy_registry()


# =============================================================================
# Board Fixtures
# =============================================================================


@pytest.fixture
def make_board() -> BoardFactory:
    """Provide the row-string board builder."""
    return build_board


@pytest.fixture
def opening_board() -> Board:
    """Standard opening position."""
    return Board.initial()


@pytest.fixture
def corner_capture_board() -> Board:
    """Black can take a1 along the top row, plus the four opening replies."""
    return build_board(
        [
            ".WB.....",
            "........",
            "........",
            "...WB...",
            "...BW...",
        ]
    )


@pytest.fixture
def corner_denial_board() -> Board:
    """White threatens a1; only black's d1 closes the threat."""
    return build_board(
        [
            ".BW.....",
            "........",
            "........",
            "...WB...",
            "...BW...",
        ]
    )


@pytest.fixture
def corner_conceded_board() -> Board:
    """White threatens a1 and no black move removes the threat."""
    return build_board(
        [
            ".BWB....",
            "........",
            "........",
            "...WB...",
            "...BW...",
        ]
    )


@pytest.fixture
def last_move_board() -> Board:
    """Black's only move, c1, flips the last white disc and ends the game."""
    return build_board(["BW......"])


@pytest.fixture
def midgame_board() -> Board:
    """A position a few moves into the game, black to move."""
    return build_board(
        [
            "........",
            "........",
            "..WB....",
            "..WWB...",
            "..BBW...",
            "...W....",
        ]
    )


@pytest.fixture
def crowded_board() -> Board:
    """A 25-disc middle game where black holds a1 and the a-file below it."""
    return build_board(
        [
            "B.......",
            "BB.W....",
            "B.WWBW..",
            "..WBBW..",
            "..BWWB..",
            "..BWBW..",
            "..WWB...",
            "...B....",
        ]
    )
