# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the ReversiEngine facade."""

import os
from unittest.mock import patch

import pytest
from structlog.testing import capture_logs

from reversi.engines.base import InvalidPositionError
from reversi.engines.board import Cell
from reversi.engines.registry import StrategyNotRegisteredError, StrategyRegistry
from reversi.engines.reversi import ReversiEngine
from reversi.engines.strategies import GreedyStrategy, MinimaxStrategy
from reversi.models import (
    GameDifficulty,
    GameStatus,
    Move,
    MoveResult,
    Player,
    Position,
)

OPENING_NOTATION = (
    "......../......../......../...WB.../...BW.../......../......../........ W"
)


def position(rows: list[str], side: str) -> Position:
    """Build a Position from the top rows, padding with empty rows."""
    padded = rows + ["........"] * (8 - len(rows))
    return Position(notation="/".join(padded) + f" {side}")


@pytest.fixture
def engine() -> ReversiEngine:
    """Engine with fast strategies only."""
    registry = StrategyRegistry()
    registry.register(GreedyStrategy())
    registry.register(MinimaxStrategy(depth=2))
    return ReversiEngine(registry=registry)


class TestInitialPosition:
    """Tests for starting positions."""

    def test_default_first_player_is_white(self, engine: ReversiEngine) -> None:
        """Test the opening notation and metadata."""
        start = engine.get_initial_position()

        assert start.notation == OPENING_NOTATION
        assert start.metadata == {"current_player": "white", "size": 8}
        assert start.board_state[3] == list("...WB...")

    def test_black_first(self, engine: ReversiEngine) -> None:
        """Test choosing black as the first player."""
        start = engine.get_initial_position("black")

        assert start.notation.endswith(" B")

    def test_unknown_player_raises(self, engine: ReversiEngine) -> None:
        """Test that an unknown color is rejected."""
        with pytest.raises(ValueError):
            engine.get_initial_position("green")


class TestValidateMove:
    """Tests for move validation."""

    def test_valid_move(self, engine: ReversiEngine) -> None:
        """Test a legal opening move for white."""
        validation = engine.validate_move(engine.get_initial_position(), Move(notation="e3"))

        assert validation.is_valid is True
        assert validation.result == MoveResult.VALID
        assert validation.flipped == 1
        assert validation.new_position is not None
        assert validation.new_position.notation.startswith(
            "......../......../....W.../...WW.../...BW..."
        )
        assert validation.new_position.notation.endswith(" B")
        assert validation.new_position.metadata["current_player"] == "black"

    def test_occupied_square(self, engine: ReversiEngine) -> None:
        """Test that playing onto a disc is invalid."""
        validation = engine.validate_move(engine.get_initial_position(), Move(notation="d4"))

        assert validation.is_valid is False
        assert validation.result == MoveResult.INVALID
        assert "occupied" in validation.error_message

    def test_non_capturing_square(self, engine: ReversiEngine) -> None:
        """Test that a move flipping nothing is invalid."""
        validation = engine.validate_move(engine.get_initial_position(), Move(notation="a1"))

        assert validation.is_valid is False
        assert "does not flip" in validation.error_message

    @pytest.mark.parametrize("notation", ["z9", "a0", "a9", "4d", "x"])
    def test_bad_notation(self, engine: ReversiEngine, notation: str) -> None:
        """Test that unparsable notation is invalid."""
        validation = engine.validate_move(engine.get_initial_position(), Move(notation=notation))

        assert validation.is_valid is False
        assert validation.error_message

    def test_pass_with_moves_is_invalid(self, engine: ReversiEngine) -> None:
        """Test that passing is refused while a move exists."""
        validation = engine.validate_move(engine.get_initial_position(), Move(notation="pass"))

        assert validation.is_valid is False

    def test_pass_without_moves(self, engine: ReversiEngine) -> None:
        """Test that a stuck player passes to the opponent."""
        validation = engine.validate_move(position(["WB......"], "B"), Move(notation="pass"))

        assert validation.is_valid is True
        assert validation.new_position.notation.endswith(" W")

    def test_opponent_forced_to_pass(self, engine: ReversiEngine) -> None:
        """Test that the mover keeps the turn when the opponent cannot move."""
        validation = engine.validate_move(position(["BW.BW..."], "B"), Move(notation="c1"))

        assert validation.is_valid is True
        assert validation.is_game_over is False
        assert validation.new_position.notation.startswith("BBBBW...")
        assert validation.new_position.notation.endswith(" B")

    def test_game_ending_move(self, engine: ReversiEngine) -> None:
        """Test that the last move reports the winner."""
        validation = engine.validate_move(position(["BW......"], "B"), Move(notation="c1"))

        assert validation.is_valid is True
        assert validation.is_game_over is True
        assert validation.winner == Player.BLACK
        assert validation.result == MoveResult.WINNING
        assert validation.flipped == 1

    @pytest.mark.parametrize(
        "notation",
        [
            "xyz W",
            "......../........ W",
            "......../......../......../...WB.../...BW.../......../......../........ X",
            "......../......../......../...WB.../...BW.../......../......../........ .",
        ],
    )
    def test_invalid_position_raises(self, engine: ReversiEngine, notation: str) -> None:
        """Test that malformed positions are rejected."""
        with pytest.raises(InvalidPositionError):
            engine.validate_move(Position(notation=notation), Move(notation="d3"))


class TestLegalMoves:
    """Tests for legal move listing."""

    def test_opening_moves(self, engine: ReversiEngine) -> None:
        """Test white's opening moves in row-major order."""
        moves = engine.get_legal_moves(engine.get_initial_position())

        assert [move.notation for move in moves] == ["e3", "f4", "c5", "d6"]
        assert moves[0].square == "e3"

    def test_pass_when_stuck(self, engine: ReversiEngine) -> None:
        """Test that a stuck player can only pass."""
        moves = engine.get_legal_moves(position(["WB......"], "B"))

        assert [move.notation for move in moves] == ["pass"]
        assert moves[0].square is None


class TestAIMove:
    """Tests for AI move selection."""

    def test_greedy_takes_corner(self, engine: ReversiEngine) -> None:
        """Test that a corner move is reported as excellent."""
        start = position([".WB.....", "........", "........", "...WB...", "...BW..."], "B")

        ai_move = engine.get_ai_move(start, GameDifficulty.NORMAL)

        assert ai_move.move == "a1"
        assert ai_move.move_quality == "excellent"
        assert ai_move.difficulty == GameDifficulty.NORMAL

    def test_minimax_move_is_legal(self, engine: ReversiEngine) -> None:
        """Test a search move with its metadata."""
        start = engine.get_initial_position()

        ai_move = engine.get_ai_move(start, GameDifficulty.HARD)

        legal = [move.notation for move in engine.get_legal_moves(start)]
        assert ai_move.move in legal
        assert ai_move.depth == 2
        assert ai_move.evaluation is not None
        assert ai_move.thinking_time_ms >= 0

    def test_forced_pass(self, engine: ReversiEngine) -> None:
        """Test that a stuck player gets a pass."""
        ai_move = engine.get_ai_move(position(["WB......"], "B"), GameDifficulty.HARD)

        assert ai_move.move == "pass"
        assert ai_move.move_quality == "forced"

    def test_unregistered_difficulty(self, engine: ReversiEngine) -> None:
        """Test that a difficulty without a strategy raises."""
        with pytest.raises(StrategyNotRegisteredError):
            engine.get_ai_move(engine.get_initial_position(), GameDifficulty.EASY)

    def test_default_difficulty_from_settings(self, engine: ReversiEngine) -> None:
        """Test that the configured difficulty is used when none is given."""
        with patch.dict(os.environ, {"SEARCH_DEFAULT_DIFFICULTY": "normal"}):
            ai_move = engine.get_ai_move(engine.get_initial_position())

        assert ai_move.difficulty == GameDifficulty.NORMAL

    def test_logs_selected_move(self, engine: ReversiEngine) -> None:
        """Test the structured log event for a chosen move."""
        with capture_logs() as logs:
            ai_move = engine.get_ai_move(engine.get_initial_position(), GameDifficulty.NORMAL)

        events = [log for log in logs if log["event"] == "AI move selected"]
        assert len(events) == 1
        assert events[0]["move"].notation == ai_move.move
        assert events[0]["difficulty"] == "normal"
        assert events[0]["player"] == Cell.WHITE


class TestGameOver:
    """Tests for game-over detection."""

    def test_opening_is_not_over(self, engine: ReversiEngine) -> None:
        """Test the starting position."""
        assert engine.is_game_over(engine.get_initial_position()) == (False, None, None)

    def test_more_pieces_wins(self, engine: ReversiEngine) -> None:
        """Test a finished game with a winner."""
        assert engine.is_game_over(position(["BBB....."], "W")) == (
            True,
            "more_pieces",
            "black",
        )

    def test_draw(self, engine: ReversiEngine) -> None:
        """Test a finished game with equal discs."""
        finished = position(["B......."] + ["........"] * 6 + [".......W"], "B")

        assert engine.is_game_over(finished) == (True, "draw", None)

    def test_invalid_position_is_not_over(self, engine: ReversiEngine) -> None:
        """Test that an unparsable position is reported as not over."""
        assert engine.is_game_over(Position(notation="nonsense W")) == (False, None, None)


class TestDisplay:
    """Tests for display data."""

    def test_opening_display(self, engine: ReversiEngine) -> None:
        """Test counts, grid and moves of the opening."""
        display = engine.position_to_display(engine.get_initial_position())

        assert display["size"] == 8
        assert display["current_player"] == "white"
        assert display["black_count"] == 2
        assert display["white_count"] == 2
        assert display["grid"][3][3] == "white"
        assert display["grid"][3][4] == "black"
        assert display["grid"][0][0] is None
        assert display["legal_moves"] == ["e3", "f4", "c5", "d6"]

    def test_invalid_display(self, engine: ReversiEngine) -> None:
        """Test display of an unparsable position."""
        assert "error" in engine.position_to_display(Position(notation="nonsense W"))


class TestGameState:
    """Tests for game state handling."""

    def test_create_game_state(self, engine: ReversiEngine) -> None:
        """Test a fresh game."""
        state = engine.create_game_state()

        assert state.position.notation == OPENING_NOTATION
        assert state.current_player == Player.WHITE
        assert state.status == GameStatus.ACTIVE
        assert state.move_count == 0

    def test_apply_valid_move(self, engine: ReversiEngine) -> None:
        """Test that a legal move advances the state."""
        state = engine.create_game_state()

        new_state, validation = engine.apply_move(state, Move(notation="e3"))

        assert validation.is_valid is True
        assert new_state.move_count == 1
        assert new_state.current_player == "black"
        assert [move.notation for move in new_state.move_history] == ["e3"]
        assert state.move_count == 0

    def test_apply_invalid_move(self, engine: ReversiEngine) -> None:
        """Test that an illegal move leaves the state alone."""
        state = engine.create_game_state()

        new_state, validation = engine.apply_move(state, Move(notation="a1"))

        assert validation.is_valid is False
        assert new_state is state

    def test_apply_game_ending_move(self, engine: ReversiEngine) -> None:
        """Test that the last move completes the game."""
        state = engine.create_game_state("black")
        state.position = position(["BW......"], "B")

        new_state, _ = engine.apply_move(state, Move(notation="c1"))

        assert new_state.status == GameStatus.COMPLETED
        assert new_state.result == "black"

    def test_create_game_state_ignores_case(self, engine: ReversiEngine) -> None:
        """Test that a capitalized first player is accepted."""
        state = engine.create_game_state("Black")

        assert state.current_player == Player.BLACK
        assert state.position.notation.endswith(" B")
