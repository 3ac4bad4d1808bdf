"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import Board, Mark, get_empty_cells
from .win_checker import Outcome


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
    2. Index must be on the board (0-8)
    3. Can only place on empty cells
    4. Only the mark holding the turn may move
    """

    def validate_move(
        self,
        board: Board,
        index: int,
        mark: Mark,
        outcome: Outcome,
        expected_mark: Mark
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place the mark in (0-8).
            mark: Mark being placed.
            outcome: Current outcome of the board.
            expected_mark: Mark that holds the turn.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if outcome.is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not 0 <= index <= 8:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-8."
            )

        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index].value}"
            )

        if mark != expected_mark:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's {expected_mark.value}'s turn, not {mark.value}'s"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board, outcome: Outcome) -> List[int]:
        """
        Get all cells the next mark may play.

        Returns:
            Empty cell indices, or an empty list once the game is over.
        """
        if outcome.is_terminal:
            return []
        return get_empty_cells(board)
