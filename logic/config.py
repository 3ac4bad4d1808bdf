"""
Game configuration for TicTacToe.
Timings, defaults, and board constants used by the engine.
"""

from .game_state import GameMode, Mark


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune pacing and defaults.
    """

    # ==================== TIMING (milliseconds) ====================
    # Pause before the score panel shows a finished game
    SCORE_DELAY_MS = 150
    # Pause before the computer's move lands on the board
    COMPUTER_MOVE_DELAY_MS = 375

    # ==================== DEFAULTS ====================
    DEFAULT_MODE = GameMode.TWO_PLAYER
    DEFAULT_HUMAN_MARK = Mark.X

    # X always opens a game
    FIRST_MARK = Mark.X

    # ==================== BOARD ====================
    CENTER_INDEX = 4
    CORNER_INDICES = (0, 2, 6, 8)

    # ==================== DEBUG SETTINGS ====================
    # Print rejected moves and AI decisions to the console
    DEBUG_MODE = False
