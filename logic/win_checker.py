"""
Win checker for TicTacToe.
Checks if a mark has three in a row or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass
from .game_state import Board, Mark, DRAW_KEY


# All possible winning lines, as board indices
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class OutcomeKind(Enum):
    """Classification of a board."""
    NONE = "none"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of checking a board.

    NONE while the game is live; WIN (with a winner) or DRAW once terminal.
    """
    kind: OutcomeKind = OutcomeKind.NONE
    winner: Optional[Mark] = None

    @classmethod
    def none(cls) -> "Outcome":
        return cls(OutcomeKind.NONE)

    @classmethod
    def win(cls, mark: Mark) -> "Outcome":
        return cls(OutcomeKind.WIN, mark)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeKind.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.NONE

    @property
    def score_key(self) -> Optional[str]:
        """The score counter this outcome feeds, or None while live."""
        if self.kind == OutcomeKind.WIN:
            return self.winner.value
        if self.kind == OutcomeKind.DRAW:
            return DRAW_KEY
        return None


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 equal marks in a row
    (horizontally, vertically, or diagonally).
    Lines are always checked in the order rows, columns, diagonals.
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no line is complete.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the first complete line in scan order.

        Returns:
            The winning triple of indices, or None.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if board[a] is not None and board[a] == board[b] == board[c]:
                return line
        return None

    def check_draw(self, board: Board) -> bool:
        """A draw is a full board with no complete line."""
        if self.check_winner(board) is not None:
            return False
        return all(cell is not None for cell in board)

    def detect_outcome(self, board: Board) -> Outcome:
        """
        Classify the board.

        All 8 lines are checked before falling back to the draw check.

        Returns:
            Outcome.win(mark), Outcome.draw(), or Outcome.none().
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome.win(winner)
        if self.check_draw(board):
            return Outcome.draw()
        return Outcome.none()


_checker = WinChecker()


def detect_outcome(board: Board) -> Outcome:
    """Classify a board (see WinChecker.detect_outcome)."""
    return _checker.detect_outcome(board)


def get_winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """Get the winning triple for highlighting, or None."""
    return _checker.get_winning_line(board)
