"""
Game controller for TicTacToe.
Runs the turn state machine: human moves, computer moves, game over, resets.
"""

import random
from enum import Enum
from typing import Dict, List, Optional, Tuple
from .config import GameConfig
from .game_state import (
    Board, GameMode, Mark, Score, DRAW_KEY,
    apply_move, empty_board, next_mark,
)
from .move_validator import MoveValidator
from .win_checker import Outcome, OutcomeKind, WinChecker
from .ai_player import AIPlayer, NO_MOVE


class ControllerState(Enum):
    """Where the game is in its turn cycle."""
    AWAITING_HUMAN_MOVE = "awaiting_human_move"
    AWAITING_COMPUTER_MOVE = "awaiting_computer_move"
    TERMINAL = "terminal"


class GameController:
    """
    Owns the board, the turn, the score, and the play mode.

    Game flow:
    1. Human clicks a cell (handle_cell_click)
    2. Outcome is recomputed; the game may end here
    3. In Vs Computer mode the computer answers (play_computer_move)
    4. Repeat until someone wins or the board fills up

    The presentation layer owns any delay before step 3. Each reset bumps
    `epoch`; a delayed computer move scheduled under an older epoch is
    discarded instead of landing on the new board.
    """

    def __init__(
        self,
        mode: Optional[GameMode] = None,
        human_mark: Optional[Mark] = None,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the controller with an empty board.

        Args:
            mode: Play mode (default from config).
            human_mark: Mark the human plays in Vs Computer mode.
            config: Game configuration. Uses defaults if not provided.
            rng: Random source for the AI.
        """
        self.config = config or GameConfig()
        self.mode = mode or self.config.DEFAULT_MODE
        self.human_mark = human_mark or self.config.DEFAULT_HUMAN_MARK

        self.score = Score()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.human_mark.opposite(), rng)

        self._board: Board = empty_board()
        self._outcome = Outcome.none()
        self._state = ControllerState.AWAITING_HUMAN_MOVE
        self._epoch = 0

        self.reset_board()

    # ==================== ACCESSORS ====================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def epoch(self) -> int:
        """Counter bumped on every reset."""
        return self._epoch

    @property
    def turn(self) -> Mark:
        """Mark that moves next."""
        return next_mark(self._board, self.config.FIRST_MARK)

    @property
    def computer_mark(self) -> Mark:
        return self.human_mark.opposite()

    @property
    def is_human_turn(self) -> bool:
        """True when a click on the board should be accepted."""
        return self._state == ControllerState.AWAITING_HUMAN_MOVE

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self._board)

    @property
    def valid_moves(self) -> List[int]:
        """Cells the next mark may play; empty once the game is over."""
        return self.validator.get_valid_moves(self._board, self._outcome)

    # ==================== MOVES ====================

    def handle_cell_click(self, index: int, mark: Optional[Mark] = None) -> bool:
        """
        Apply a human move.

        Invalid moves are ignored: occupied cells, clicks after the game
        ended, clicks while the computer is to move, or the wrong mark.

        Args:
            index: Clicked cell (0-8).
            mark: Mark being placed. Defaults to the mark holding the turn.

        Returns:
            True if the move was applied.
        """
        if self._state != ControllerState.AWAITING_HUMAN_MOVE:
            self._debug(f"Ignoring click on {index}: state is {self._state.value}")
            return False

        expected = self.turn
        result = self.validator.validate_move(
            self._board, index, mark or expected, self._outcome, expected
        )
        if not result.is_valid:
            self._debug(f"Ignoring click on {index}: {result.error_message}")
            return False

        self._board = apply_move(self._board, index, expected)
        self._advance()
        return True

    def play_computer_move(self, epoch: Optional[int] = None) -> Optional[int]:
        """
        Let the computer move.

        Args:
            epoch: Epoch the move was scheduled under. A mismatch means the
                board was reset in between and the move is dropped.

        Returns:
            The cell the computer played, or None if nothing was played.
        """
        if epoch is not None and epoch != self._epoch:
            self._debug(f"Discarding computer move from epoch {epoch} (now {self._epoch})")
            return None

        if self._state != ControllerState.AWAITING_COMPUTER_MOVE:
            return None

        move = self.ai.get_move(self._board)
        if move is NO_MOVE:
            print("ERROR: AI could not find a move!")
            assert move is not NO_MOVE, "computer to move on a full board"
            return None

        self._board = apply_move(self._board, move, self.computer_mark)
        self._advance()
        return move

    def _advance(self):
        """Recompute the outcome after a move and pick the next state."""
        self._outcome = self.win_checker.detect_outcome(self._board)

        if self._outcome.is_terminal:
            self._state = ControllerState.TERMINAL
            self.score.increment(self._outcome.score_key)
            self._debug(f"Game over: {self.status_text()}")
        elif self.mode == GameMode.VS_COMPUTER and self.turn == self.computer_mark:
            self._state = ControllerState.AWAITING_COMPUTER_MOVE
        else:
            self._state = ControllerState.AWAITING_HUMAN_MOVE

    # ==================== RESETS ====================

    def reset_board(self):
        """Clear the board for a new game. The score is kept."""
        self._epoch += 1
        self._board = empty_board()
        self._advance()

    def reset_all(self):
        """Clear the board and zero the score."""
        self.reset_board()
        self.score.reset()

    def set_mode(self, mode: GameMode):
        """Switch play mode. Starts a new game, score kept."""
        self.mode = mode
        self.reset_board()

    def select_human_mark(self, mark: Mark):
        """Choose the human's mark for Vs Computer mode. Starts a new game."""
        self.human_mark = mark
        self.ai.mark = mark.opposite()
        self.reset_board()

    # ==================== DISPLAY HELPERS ====================

    def status_text(self) -> str:
        """One-line description of the game for the status bar."""
        if self._outcome.kind == OutcomeKind.WIN:
            return f"Player {self._outcome.winner.value} wins!"
        if self._outcome.kind == OutcomeKind.DRAW:
            return "It's a draw!"

        if self.mode == GameMode.VS_COMPUTER:
            if self.is_human_turn:
                return "Your turn"
            return "Computer's turn..."
        return f"Player {self.turn.value}'s turn"

    def score_labels(self) -> Dict[str, str]:
        """Labels for the score panel rows, keyed like the score."""
        labels = {
            Mark.X.value: "Player X",
            Mark.O.value: "Player O",
            DRAW_KEY: "Draw",
        }
        if self.mode == GameMode.VS_COMPUTER:
            for mark in Mark:
                owner = "You" if mark == self.human_mark else "Computer"
                labels[mark.value] = f"{owner} ({mark.value})"
        return labels

    def _debug(self, message: str):
        if self.config.DEBUG_MODE:
            print(message)
