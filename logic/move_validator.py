"""
Move validator for TicTacToe.
Validates that a requested move follows the rules before it is applied.
"""

from typing import Optional, List
from dataclasses import dataclass

from .game_state import BOARD_CELLS, GameState, Mark


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
    2. Index must be a cell 0-8
    3. Can only place on empty cells
    4. A human cannot move while it is the computer's turn
    """

    def validate_move(
        self,
        game_state: GameState,
        index: int,
        computer_player: Optional[Mark] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark on (0-8).
            computer_player: The computer's mark when playing against it.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is a cell
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be 0-{BOARD_CELLS - 1}."
            )

        # Check if cell is empty
        occupant = game_state.board[index]
        if occupant != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        # Clicks are blocked while the computer is to move
        if computer_player is not None and game_state.current_player == computer_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's the computer's turn ({computer_player.value})"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            Cell indices, ascending. Empty once the game is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
