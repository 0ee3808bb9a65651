# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pydantic models exchanged between a Reversi UI and the engine facade.

The search never sees these: it works on the Board value type. The models
carry what a presentation layer needs between calls, so the engine itself
stays stateless.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class GameDifficulty(str, Enum):
    """Strength of the AI opponent.

    - EASY: a random legal move
    - NORMAL: a free corner, else the move with the best disc count
    - HARD: minimax at a fixed shallow depth
    - INSANE: minimax with a depth that follows the stage of the game
    """

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    INSANE = "insane"


class Player(str, Enum):
    """A side of the board."""

    BLACK = "black"
    WHITE = "white"


class GameStatus(str, Enum):
    """Whether a game can still be played."""

    ACTIVE = "active"
    COMPLETED = "completed"


class MoveResult(str, Enum):
    """Outcome of a submitted move, from the mover's point of view."""

    VALID = "valid"
    INVALID = "invalid"
    WINNING = "winning"
    LOSING = "losing"
    DRAW = "draw"


class Position(BaseModel):
    """A board snapshot plus the side to move.

    Attributes:
        notation: Eight rows of ``.``/``B``/``W`` joined by ``/``, a space,
            then ``B`` or ``W`` for the side to move.
        board_state: The same rows split into single-character cells.
        metadata: ``current_player`` and the board ``size``.
    """

    notation: str = Field(description="Rows of ./B/W joined by '/', then the side to move")
    board_state: list[list[str]] = Field(
        default_factory=list,
        description="Rows of single-character cells",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Side to move and board size",
    )


class Move(BaseModel):
    """A move as typed by a player: a square like "d3", or "pass"."""

    notation: str = Field(description="Square (column letter, 1-based row) or 'pass'")
    square: str | None = Field(
        default=None,
        description="Square the disc is placed on; None for a pass",
    )


class MoveValidation(BaseModel):
    """What happened when a move was submitted.

    Attributes:
        is_valid: Whether the move was legal and played.
        result: VALID, INVALID, or the final outcome if the move ended the game.
        new_position: Position after the move, with the next side to move.
        error_message: Why the move was refused.
        flipped: Number of discs the move turned over.
        is_game_over: Whether neither side can move any more.
        winner: The side with more discs once the game is over.
    """

    is_valid: bool = Field(description="Move was legal and has been played")
    result: MoveResult = Field(description="Outcome category")
    new_position: Position | None = Field(
        default=None,
        description="Position after the move",
    )
    error_message: str | None = Field(
        default=None,
        description="Reason the move was refused",
    )
    flipped: int = Field(default=0, description="Discs turned over")
    is_game_over: bool = Field(
        default=False,
        description="Neither side can move",
    )
    winner: Player | None = Field(
        default=None,
        description="Side with more discs at the end; None for a draw",
    )


class AIMove(BaseModel):
    """The opponent's reply and how it was found.

    Attributes:
        move: Square in move notation, or "pass".
        difficulty: Difficulty whose strategy chose the move.
        thinking_time_ms: Wall-clock time the strategy took.
        evaluation: Minimax or disc-count value, for strategies that score.
        depth: Search depth, for the minimax strategies.
        move_quality: "excellent" for a corner, "forced" for a pass,
            otherwise "normal".
    """

    move: str = Field(description="Square in move notation, or 'pass'")
    difficulty: GameDifficulty = Field(description="Difficulty that chose the move")
    thinking_time_ms: int = Field(
        default=0,
        description="Wall-clock time of the strategy in milliseconds",
    )
    evaluation: int | None = Field(
        default=None,
        description="Value the strategy gave the move",
    )
    depth: int | None = Field(default=None, description="Search depth used")
    move_quality: str = Field(
        default="normal",
        description="excellent, normal or forced",
    )


class GameState(BaseModel):
    """A game in progress, passed back and forth by the caller.

    Attributes:
        position: Current board and side to move.
        move_history: Accepted moves, oldest first.
        current_player: Side to move.
        status: ACTIVE until neither side can move.
        result: Winning side or "draw" once completed.
        move_count: Number of accepted moves, passes included.
        metadata: Free-form data owned by the caller.
    """

    position: Position = Field(description="Board and side to move")
    move_history: list[Move] = Field(
        default_factory=list,
        description="Accepted moves, oldest first",
    )
    current_player: Player = Field(
        default=Player.WHITE,
        description="Side to move",
    )
    status: GameStatus = Field(
        default=GameStatus.ACTIVE,
        description="ACTIVE or COMPLETED",
    )
    result: str | None = Field(
        default=None,
        description="Winning side or 'draw' once completed",
    )
    move_count: int = Field(
        default=0,
        description="Accepted moves, passes included",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Caller-owned data",
    )
