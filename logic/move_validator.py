"""
Move validator for Hidden-Grid TicTacToe.
Validates that a human move follows the rules.
"""

from typing import List, Optional
from dataclasses import dataclass

from .coords import is_on_board, to_row_col
from .game_state import GameState, Mark, HUMAN_MARK


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates moves.

    Rules:
    1. Game must not be over
    2. It must be the mover's turn
    3. The index must be on the 5x5 board (outer cells included)
    4. Can only place on empty cells
    """

    def validate_move(
        self,
        game_state: GameState,
        index: int,
        mark: Mark = HUMAN_MARK
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Flat board index (0-24).
            mark: Who wants to move (default: the human).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if game_state.current_player != mark:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {mark.value}'s turn!"
            )

        if not is_on_board(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{len(game_state.board) - 1}."
            )

        cell = game_state.board[index]
        if cell is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {to_row_col(index)} is already occupied by {cell.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of empty board indices, empty if the game is over.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
