"""
Logic module for TicTacToe.
Handles the board, rules, turn flow, and the computer opponent.
"""

__version__ = "1.0.0"

from .game_state import (
    Board, GameMode, Mark, Score,
    apply_move, empty_board, get_empty_cells, next_mark,
)
from .win_checker import WinChecker, Outcome, OutcomeKind, detect_outcome
from .move_validator import MoveValidator
from .ai_player import AIPlayer, NO_MOVE, select_computer_move
from .game_controller import GameController, ControllerState
from .config import GameConfig
