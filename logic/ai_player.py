"""
AI player for TicTacToe.
Picks the computer's move with a fixed list of rules.
"""

import random
from typing import Optional
from .config import GameConfig
from .game_state import Board, Mark, apply_move, get_empty_cells
from .win_checker import WinChecker


# Returned when the board has no empty cell left
NO_MOVE = None

_win_checker = WinChecker()


def _find_winning_cell(board: Board, mark: Mark) -> Optional[int]:
    """First empty cell (in index order) that completes a line for mark."""
    for index in get_empty_cells(board):
        if _win_checker.check_winner(apply_move(board, index, mark)) == mark:
            return index
    return None


def select_computer_move(
    board: Board,
    ai_mark: Mark,
    opponent_mark: Mark,
    rng: Optional[random.Random] = None
) -> Optional[int]:
    """
    Choose a cell for the computer.

    Rules, first match wins:
    1. Win now if possible
    2. Block the opponent's winning cell
    3. Take the center
    4. Take a random empty corner
    5. Take any random empty cell

    Args:
        board: Current board.
        ai_mark: The computer's mark.
        opponent_mark: The human's mark.
        rng: Random source for rules 4 and 5. Unseeded if None.

    Returns:
        Index of an empty cell, or NO_MOVE if the board is full.
    """
    if rng is None:
        rng = random.Random()

    empty = get_empty_cells(board)
    if not empty:
        return NO_MOVE

    winning = _find_winning_cell(board, ai_mark)
    if winning is not None:
        return winning

    blocking = _find_winning_cell(board, opponent_mark)
    if blocking is not None:
        return blocking

    if board[GameConfig.CENTER_INDEX] is None:
        return GameConfig.CENTER_INDEX

    corners = [i for i in GameConfig.CORNER_INDICES if board[i] is None]
    if corners:
        return rng.choice(corners)

    return rng.choice(empty)


class AIPlayer:
    """
    A beatable AI that plays TicTacToe with simple rules.

    It wins when it can and blocks when it must, but otherwise
    plays center, then random corners, then random cells.
    """

    def __init__(self, mark: Mark = Mark.O, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI controls (default: O)
            rng: Random source; pass a seeded Random for repeatable games.
        """
        self.mark = mark
        self.rng = rng or random.Random()

    def get_move(self, board: Board) -> Optional[int]:
        """Get the AI's move for this board, or NO_MOVE."""
        move = select_computer_move(board, self.mark, self.mark.opposite(), self.rng)

        if GameConfig.DEBUG_MODE:
            print(f"AI ({self.mark.value}) picks cell {move}")

        return move
