"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules.
"""

from typing import Optional
from dataclasses import dataclass

from .board import Board, Mark
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Only the mark whose turn it is may move
    3. Index must be 0-8
    4. Can only place on empty cells
    """

    def validate_move(
        self,
        game_state: GameState,
        index: int,
        mark: Mark
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark in (0-8).
            mark: Mark being placed.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check whose turn it is
        if mark != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's {game_state.current_player.value}'s turn, not {mark.value}'s"
            )

        # Check if index is in valid range
        if not Board.in_range(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be 0-8."
            )

        # Check if cell is empty
        if game_state.board.is_occupied(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {game_state.board[index].value}"
            )

        return ValidationResult(is_valid=True)
