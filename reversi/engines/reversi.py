# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Reversi engine facade for presentation layers.

This module provides the engine a UI talks to:
- Standard Reversi rules (8x8 board, flipping mechanic, forced passes)
- AI moves from the strategy registered for the requested difficulty
- Game-over detection and display data

The engine is stateless - all game state is passed via Position/GameState
objects, so one engine can serve many games.

Position notation: eight rows of ``.``/``B``/``W`` separated by ``/``, then a
space and the side to move. Move notation: column letter and 1-based row,
e.g. "d3" is column d (index 3), row index 2.
"""

import time
from typing import Any

from reversi.config.settings import get_settings
from reversi.engines.base import InvalidMoveError, InvalidPositionError
from reversi.engines.board import BOARD_SIZE, CORNERS, Board, Cell
from reversi.engines.registry import StrategyRegistry, get_strategy_registry
from reversi.models import (
    AIMove,
    GameDifficulty,
    GameState,
    GameStatus,
    Move,
    MoveResult,
    MoveValidation,
    Player,
    Position,
)
from reversi.utils.logging import get_logger

logger = get_logger(__name__)

SYMBOLS = {Cell.EMPTY: ".", Cell.BLACK: "B", Cell.WHITE: "W"}
CELLS = {symbol: cell for cell, symbol in SYMBOLS.items()}
PLAYERS = {Cell.BLACK: Player.BLACK, Cell.WHITE: Player.WHITE}


class ReversiEngine:
    """Reversi engine backed by the move strategies.

    Args:
        registry: Strategies by difficulty; defaults to the global registry.

    Example:
        engine = ReversiEngine()
        position = engine.get_initial_position()
        validation = engine.validate_move(position, Move(notation="d3"))
        reply = engine.get_ai_move(validation.new_position, GameDifficulty.HARD)
    """

    def __init__(self, registry: StrategyRegistry | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> StrategyRegistry:
        """Strategy registry used for AI moves."""
        if self._registry is None:
            self._registry = get_strategy_registry()
        return self._registry

    @property
    def name(self) -> str:
        """Get the engine name."""
        return "Heuristic Minimax Reversi Engine"

    def get_initial_position(self, first_player: str = "white") -> Position:
        """Get the starting position (centre four discs).

        Args:
            first_player: "white" or "black".
        """
        return self._board_to_position(Board.initial(self._parse_player(first_player)))

    def validate_move(
        self,
        position: Position,
        move: Move,
    ) -> MoveValidation:
        """Validate a move and play it if it is legal.

        Args:
            position: Current board position.
            move: Move to validate (e.g., "d3" or "pass").

        Returns:
            MoveValidation with result and new position if valid.

        Raises:
            InvalidPositionError: If the position cannot be parsed.
        """
        board = self._position_to_board(position)
        current_player = board.turn

        if move.notation.lower() == "pass":
            if board.has_moves(current_player):
                return MoveValidation(
                    is_valid=False,
                    result=MoveResult.INVALID,
                    error_message="Cannot pass when you have legal moves.",
                )
            passed = board.copy(turn=current_player.opponent)
            if not passed.has_moves(passed.turn):
                return self._game_over_validation(passed, current_player)
            return MoveValidation(
                is_valid=True,
                result=MoveResult.VALID,
                new_position=self._board_to_position(passed),
            )

        try:
            col, row = self._parse_move(move.notation)
        except ValueError as e:
            return MoveValidation(
                is_valid=False,
                result=MoveResult.INVALID,
                error_message=str(e),
            )

        try:
            new_board = board.copy(turn=current_player)
            flipped = new_board.apply_move(row, col, current_player)
        except InvalidMoveError as e:
            return MoveValidation(
                is_valid=False,
                result=MoveResult.INVALID,
                error_message=f"Move {move.notation}: {e.message}.",
            )

        new_board.turn = current_player.opponent
        if not new_board.has_moves(new_board.turn):
            if not new_board.has_moves(current_player):
                return self._game_over_validation(new_board, current_player, flipped)
            # Opponent must pass, current player continues
            new_board.turn = current_player

        return MoveValidation(
            is_valid=True,
            result=MoveResult.VALID,
            new_position=self._board_to_position(new_board),
            flipped=flipped,
        )

    def get_legal_moves(self, position: Position) -> list[Move]:
        """Get all legal moves, or a single "pass" when there are none."""
        board = self._position_to_board(position)
        squares = board.legal_moves(board.turn)

        if not squares:
            return [Move(notation="pass")]

        moves = []
        for square in squares:
            notation = square.notation
            moves.append(Move(notation=notation, square=notation))
        return moves

    def get_ai_move(
        self,
        position: Position,
        difficulty: GameDifficulty | None = None,
    ) -> AIMove:
        """Get the AI's move for the side to move.

        Blocks for the whole search; deeper difficulties can take seconds.

        Args:
            position: Current game position.
            difficulty: Difficulty level; defaults to the configured one.

        Returns:
            AIMove with the chosen move and search metadata.

        Raises:
            InvalidPositionError: If the position cannot be parsed.
            StrategyNotRegisteredError: If no strategy plays at ``difficulty``.
        """
        board = self._position_to_board(position)
        current_player = board.turn
        if difficulty is None:
            difficulty = get_settings().search.default_difficulty

        if not board.has_moves(current_player):
            return AIMove(move="pass", difficulty=difficulty, move_quality="forced")

        strategy = self.registry.get(difficulty)
        started = time.perf_counter()
        choice = strategy.choose(board, current_player)
        elapsed_ms = int((time.perf_counter() - started) * 1000)

        notation = choice.move.notation
        move_quality = "excellent" if choice.move in CORNERS else "normal"

        logger.info(
            "AI move selected",
            difficulty=difficulty.value,
            player=current_player,
            move=choice.move,
            depth=choice.depth,
            value=choice.value,
            elapsed_ms=elapsed_ms,
        )

        return AIMove(
            move=notation,
            difficulty=difficulty,
            thinking_time_ms=elapsed_ms,
            evaluation=choice.value,
            depth=choice.depth,
            move_quality=move_quality,
        )

    def is_game_over(self, position: Position) -> tuple[bool, str | None, str | None]:
        """Check if the game is over.

        Returns:
            Tuple of (is_over, result_type, winner); result_type is
            "more_pieces" or "draw", winner "black", "white" or None.
        """
        try:
            board = self._position_to_board(position)
        except InvalidPositionError:
            return False, None, None

        if not board.is_terminal():
            return False, None, None

        winner = self._winner(board)
        if winner is None:
            return True, "draw", None
        return True, "more_pieces", winner.value

    def position_to_display(self, position: Position) -> dict[str, Any]:
        """Convert position to display format."""
        try:
            board = self._position_to_board(position)
        except InvalidPositionError:
            return {"error": "Invalid position"}

        display_grid = [
            [PLAYERS[cell].value if cell in PLAYERS else None for cell in row]
            for row in board.grid
        ]

        return {
            "grid": display_grid,
            "size": BOARD_SIZE,
            "current_player": PLAYERS[board.turn].value,
            "black_count": board.black_score,
            "white_count": board.white_score,
            "legal_moves": [
                square.notation
                for square in board.legal_moves(board.turn)
            ],
        }

    def create_game_state(self, first_player: str = "white") -> GameState:
        """Create a new game state with the initial position.

        Args:
            first_player: Color that moves first ("white" or "black").

        Returns:
            GameState with initial position.
        """
        position = self.get_initial_position(first_player)
        return GameState(
            position=position,
            move_history=[],
            current_player=position.metadata["current_player"],
        )

    def apply_move(
        self,
        state: GameState,
        move: Move,
    ) -> tuple[GameState, MoveValidation]:
        """Validate a move and apply it to a game state.

        Args:
            state: Current game state.
            move: Move to apply.

        Returns:
            Tuple of (new_state, validation_result); the state is returned
            unchanged if the move is invalid.
        """
        validation = self.validate_move(state.position, move)

        if not validation.is_valid or validation.new_position is None:
            return state, validation

        new_state = GameState(
            position=validation.new_position,
            move_history=state.move_history + [move],
            current_player=validation.new_position.metadata["current_player"],
            status=state.status,
            move_count=state.move_count + 1,
            metadata=state.metadata.copy(),
        )

        if validation.is_game_over:
            new_state.status = GameStatus.COMPLETED
            new_state.result = validation.winner.value if validation.winner else "draw"

        return new_state, validation

    # =========================================================================
    # Private Helper Methods
    # =========================================================================

    def _game_over_validation(
        self,
        board: Board,
        mover: Cell,
        flipped: int = 0,
    ) -> MoveValidation:
        winner = self._winner(board)
        if winner is None:
            result = MoveResult.DRAW
        elif winner == PLAYERS[mover]:
            result = MoveResult.WINNING
        else:
            result = MoveResult.LOSING

        return MoveValidation(
            is_valid=True,
            result=result,
            new_position=self._board_to_position(board),
            flipped=flipped,
            is_game_over=True,
            winner=winner,
        )

    def _winner(self, board: Board) -> Player | None:
        if board.black_score > board.white_score:
            return Player.BLACK
        if board.white_score > board.black_score:
            return Player.WHITE
        return None

    def _board_to_position(self, board: Board) -> Position:
        """Convert a Board to a Position."""
        rows = ["".join(SYMBOLS[cell] for cell in row) for row in board.grid]
        notation = "/".join(rows) + f" {SYMBOLS[board.turn]}"

        return Position(
            notation=notation,
            board_state=[list(row) for row in rows],
            metadata={
                "current_player": PLAYERS[board.turn].value,
                "size": BOARD_SIZE,
            },
        )

    def _position_to_board(self, position: Position) -> Board:
        """Convert a Position to a Board with the side to move as its turn."""
        parts = position.notation.split(" ")
        rows = parts[0].split("/")
        turn_symbol = parts[1] if len(parts) > 1 else "W"

        try:
            turn = CELLS[turn_symbol]
            grid = [[CELLS[symbol] for symbol in row] for row in rows]
        except KeyError as e:
            raise InvalidPositionError(
                message=f"Invalid position: unknown symbol {e}",
                details={"notation": position.notation},
            ) from e
        if turn == Cell.EMPTY:
            raise InvalidPositionError(
                message="Invalid position: side to move must be B or W",
                details={"notation": position.notation},
            )

        return Board.from_grid(grid, turn)

    def _parse_player(self, player: str) -> Cell:
        for cell, side in PLAYERS.items():
            if side.value == player.lower():
                return cell
        raise ValueError(f"Unknown player: {player}")

    def _parse_move(self, notation: str) -> tuple[int, int]:
        """Parse move notation (e.g., 'd3') to (col, row)."""
        notation = notation.lower().strip()
        if len(notation) < 2:
            raise ValueError(f"Invalid notation: {notation}")

        col_char = notation[0]
        row_str = notation[1:]

        if not col_char.isalpha():
            raise ValueError(f"Invalid column: {col_char}")

        col = ord(col_char) - ord("a")
        if col < 0 or col >= BOARD_SIZE:
            raise ValueError(f"Column out of range: {col_char}")

        try:
            row = int(row_str) - 1
        except ValueError:
            raise ValueError(f"Invalid row: {row_str}")

        if row < 0 or row >= BOARD_SIZE:
            raise ValueError(f"Row out of range: {row_str}")

        return col, row

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
