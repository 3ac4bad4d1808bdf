"""
View module for TicTacToe.
Handles board rendering and colour themes.
"""

from .config import ViewConfig, hex_to_bgr
from .board_renderer import BoardRenderer
