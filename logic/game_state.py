"""
Game state for TicTacToe.
Defines the board, the marks, the play modes, and the score counters.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass


class Mark(Enum):
    """The two player symbols."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X


class GameMode(Enum):
    """How the second seat is played."""
    TWO_PLAYER = "Two Players"
    VS_COMPUTER = "Vs Computer"


# A board is 9 cells, row by row: [0-2] top, [3-5] middle, [6-8] bottom
Board = Tuple[Optional[Mark], ...]

# Key used in the score for a drawn game
DRAW_KEY = "draw"


def empty_board() -> Board:
    """Create a board with all 9 cells empty."""
    return (None,) * 9


def apply_move(board: Board, index: int, mark: Mark) -> Board:
    """
    Place a mark on the board.

    Cells are write-once: an out-of-range index or a filled cell
    leaves the board as it was.

    Args:
        board: Current board.
        index: Cell index (0-8).
        mark: The mark to place.

    Returns:
        A new board with the mark placed, or the input board unchanged.
    """
    if not 0 <= index < 9:
        return board
    if board[index] is not None:
        return board

    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def get_empty_cells(board: Board) -> List[int]:
    """
    Get all empty cells on the board.

    Returns:
        Indices of empty cells in scan order (0..8).
    """
    return [i for i, cell in enumerate(board) if cell is None]


def count_marks(board: Board, mark: Mark) -> int:
    """Count how many cells hold the given mark."""
    return sum(1 for cell in board if cell == mark)


def next_mark(board: Board, first: Mark = Mark.X) -> Mark:
    """
    Get the mark whose turn it is.

    Turns alternate strictly, so the move count parity decides:
    an even number of filled cells means the first mover is up.
    """
    filled = count_marks(board, Mark.X) + count_marks(board, Mark.O)
    return first if filled % 2 == 0 else first.opposite()


def format_board(board: Board) -> str:
    """Render the board as text, empty cells shown by their 1-9 number."""
    symbols = [
        cell.value if cell is not None else str(i + 1)
        for i, cell in enumerate(board)
    ]
    rows = [" | ".join(symbols[i:i + 3]) for i in range(0, 9, 3)]
    return "\n---------\n".join(rows)


@dataclass
class Score:
    """
    Win and draw counters.

    Survives board resets; only a full reset clears it.
    """
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def increment(self, key: str):
        """
        Add one to a counter.

        Args:
            key: "X", "O", or "draw".
        """
        if key == Mark.X.value:
            self.x_wins += 1
        elif key == Mark.O.value:
            self.o_wins += 1
        elif key == DRAW_KEY:
            self.draws += 1
        else:
            raise ValueError(f"Unknown score key: {key!r}")

    def get(self, key: str) -> int:
        """Read one counter by key."""
        return self.as_dict()[key]

    def reset(self):
        """Zero every counter."""
        self.x_wins = 0
        self.o_wins = 0
        self.draws = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            Mark.X.value: self.x_wins,
            Mark.O.value: self.o_wins,
            DRAW_KEY: self.draws,
        }
