"""
View configuration for TicTacToe.
Board image geometry and the light/dark colour themes.
"""

from typing import Dict, Tuple


def hex_to_bgr(color: str) -> Tuple[int, int, int]:
    """Convert '#rrggbb' to an OpenCV (b, g, r) tuple."""
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #rrggbb colour, got {color!r}")
    r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    return (b, g, r)


class ViewConfig:
    """
    Configuration class for rendering settings.
    Change these values to restyle the board.
    """

    # ==================== BOARD IMAGE ====================
    BOARD_SIZE_PX = 360          # Square board image, in pixels
    GRID_THICKNESS = 4
    MARK_THICKNESS = 10
    MARK_MARGIN_RATIO = 0.22     # Gap between a mark and its cell edge

    # ==================== THEMES ====================
    # Base colours: primary blue, secondary yellow, accent red
    PRIMARY = "#1976d2"
    SECONDARY = "#fff176"
    ACCENT = "#e53935"

    THEMES: Dict[str, Dict[str, str]] = {
        "light": {
            "background": "#ffffff",
            "panel": "#f5f7fa",
            "text": "#222222",
            "grid": PRIMARY,
            "mark_x": ACCENT,
            "mark_o": "#f9a825",
            "highlight": SECONDARY,
            "button": "#e3eaf3",
        },
        "dark": {
            "background": "#1a1a2e",
            "panel": "#16213e",
            "text": "#ffffff",
            "grid": "#00d4ff",
            "mark_x": "#f87171",
            "mark_o": SECONDARY,
            "highlight": "#065f46",
            "button": "#2d3748",
        },
    }

    DEFAULT_THEME = "light"

    def palette(self, theme: str) -> Dict[str, str]:
        """
        Get the colours of a theme.

        Raises:
            ValueError: If the theme name is unknown.
        """
        if theme not in self.THEMES:
            raise ValueError(
                f"Unknown theme {theme!r}. Choose from {sorted(self.THEMES)}"
            )
        return self.THEMES[theme]
