"""
Board renderer for TicTacToe.
Draws the board into an image with OpenCV and maps clicks back to cells.
"""

import cv2
import numpy as np
from typing import Optional, Sequence
from logic.game_state import Board, Mark
from .config import ViewConfig, hex_to_bgr


class BoardRenderer:
    """
    Draws a board as a square BGR image.

    The image is split into a 3x3 grid of equal cells; cell (row, col)
    is board index row * 3 + col.
    """

    def __init__(self, config: Optional[ViewConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: View configuration. Uses defaults if not provided.
        """
        self.config = config or ViewConfig()

    @property
    def size(self) -> int:
        return self.config.BOARD_SIZE_PX

    def render(
        self,
        board: Board,
        winning_line: Optional[Sequence[int]] = None,
        theme: Optional[str] = None
    ) -> np.ndarray:
        """
        Draw the board.

        Args:
            board: Board to draw.
            winning_line: Cells to highlight, if the game was won.
            theme: Theme name (default from config).

        Returns:
            BGR image of shape (size, size, 3).
        """
        palette = self.config.palette(theme or self.config.DEFAULT_THEME)
        size = self.size
        cell_size = size // 3

        image = np.empty((size, size, 3), dtype=np.uint8)
        image[:] = hex_to_bgr(palette["background"])

        # Highlight winning cells first so marks draw on top
        if winning_line:
            highlight = hex_to_bgr(palette["highlight"])
            for index in winning_line:
                row, col = divmod(index, 3)
                cv2.rectangle(
                    image,
                    (col * cell_size, row * cell_size),
                    ((col + 1) * cell_size, (row + 1) * cell_size),
                    highlight,
                    -1
                )

        # Grid lines
        grid = hex_to_bgr(palette["grid"])
        for i in range(1, 3):
            x = i * cell_size
            cv2.line(image, (x, 0), (x, size), grid, self.config.GRID_THICKNESS)
            cv2.line(image, (0, x), (size, x), grid, self.config.GRID_THICKNESS)

        for index, cell in enumerate(board):
            if cell is None:
                continue
            row, col = divmod(index, 3)
            cx = col * cell_size + cell_size // 2
            cy = row * cell_size + cell_size // 2
            self._draw_mark(image, cell, cx, cy, cell_size, palette)

        return image

    def _draw_mark(self, image, mark, cx, cy, cell_size, palette):
        half = int(cell_size / 2 * (1 - 2 * self.config.MARK_MARGIN_RATIO))
        thickness = self.config.MARK_THICKNESS

        if mark == Mark.X:
            color = hex_to_bgr(palette["mark_x"])
            cv2.line(image, (cx - half, cy - half), (cx + half, cy + half),
                     color, thickness)
            cv2.line(image, (cx + half, cy - half), (cx - half, cy + half),
                     color, thickness)
        else:
            color = hex_to_bgr(palette["mark_o"])
            cv2.circle(image, (cx, cy), half, color, thickness)

    def cell_at(self, x: float, y: float, size: Optional[int] = None) -> Optional[int]:
        """
        Map a pixel to the board cell under it.

        Args:
            x: Horizontal position, from the left edge.
            y: Vertical position, from the top edge.
            size: Side length of the displayed board (default: render size).

        Returns:
            Board index (0-8), or None if the point is off the board.
        """
        size = size or self.size
        if not (0 <= x < size and 0 <= y < size):
            return None

        col = min(int(x * 3 // size), 2)
        row = min(int(y * 3 // size), 2)
        return row * 3 + col

    @staticmethod
    def to_rgb(image: np.ndarray) -> np.ndarray:
        """Convert a rendered BGR image to RGB for Pillow."""
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
