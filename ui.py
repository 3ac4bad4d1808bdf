"""
TicTacToe UI
A graphical interface for the TicTacToe game using Tkinter.

Shows:
- The board, drawn by BoardRenderer, with the winning line highlighted
- Mode selection (2 Players / Vs Computer) and symbol selection
- Score panel and game status
- Play Again, Reset All, theme toggle
"""

import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

from logic.game_controller import GameController, ControllerState
from logic.game_state import DRAW_KEY, GameMode, Mark
from view.board_renderer import BoardRenderer
from view.config import ViewConfig


class TicTacToeUI:
    """
    Main UI class for the TicTacToe game.

    All engine calls happen on the Tk thread. The computer's move and the
    score panel refresh are delayed with root.after; both callbacks carry
    the controller epoch they were scheduled under.
    """

    def __init__(
        self,
        controller: Optional[GameController] = None,
        theme: Optional[str] = None,
        view_config: Optional[ViewConfig] = None
    ):
        """Initialize the UI."""
        self.controller = controller or GameController()
        self.view_config = view_config or ViewConfig()
        self.renderer = BoardRenderer(self.view_config)
        self.theme = theme or self.view_config.DEFAULT_THEME
        self.config = self.controller.config

        # Pending root.after handles
        self._computer_job: Optional[str] = None
        self._score_job: Optional[str] = None

        self._create_ui()
        self._apply_theme()
        self._schedule_computer_move()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Tic Tac Toe")
        self.root.resizable(False, False)

        self.style = ttk.Style()
        self.style.theme_use('clam')

        self.main_frame = ttk.Frame(self.root, padding=15)
        self.main_frame.pack(fill=tk.BOTH, expand=True)

        ttk.Label(self.main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 10))

        # Mode and symbol selection
        top_frame = ttk.Frame(self.main_frame)
        top_frame.pack(pady=5)

        self.mode_buttons = {}
        for text, mode in (("2 Players", GameMode.TWO_PLAYER), ("Vs Computer", GameMode.VS_COMPUTER)):
            btn = tk.Button(
                top_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=11,
                command=lambda m=mode: self._set_mode(m)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.mode_buttons[mode] = btn

        self.symbol_frame = ttk.Frame(self.main_frame)
        ttk.Label(self.symbol_frame, text="Your symbol:").pack(side=tk.LEFT, padx=(0, 8))
        self.symbol_buttons = {}
        for mark in Mark:
            btn = tk.Button(
                self.symbol_frame,
                text=mark.value,
                font=('Segoe UI', 10, 'bold'),
                width=4,
                command=lambda m=mark: self._select_symbol(m)
            )
            btn.pack(side=tk.LEFT, padx=3)
            self.symbol_buttons[mark] = btn

        # Score panel + board
        middle_frame = ttk.Frame(self.main_frame)
        middle_frame.pack(pady=10)
        self.middle_frame = middle_frame

        score_frame = ttk.Frame(middle_frame)
        score_frame.pack(side=tk.LEFT, fill=tk.Y, padx=(0, 15))
        ttk.Label(score_frame, text="Scores", style='Heading.TLabel').pack(anchor=tk.W, pady=(0, 5))

        self.score_labels = {}
        for key in (Mark.X.value, Mark.O.value, DRAW_KEY):
            label = ttk.Label(score_frame, text="")
            label.pack(anchor=tk.W)
            self.score_labels[key] = label

        size = self.renderer.size
        self.board_canvas = tk.Canvas(middle_frame, width=size, height=size, highlightthickness=0)
        self.board_canvas.pack(side=tk.LEFT)
        self.board_canvas.bind("<Button-1>", self._on_canvas_click)

        # Status and controls
        self.status_label = ttk.Label(self.main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        control_frame = ttk.Frame(self.main_frame)
        control_frame.pack(pady=5)

        self.control_buttons = []
        for text, command in (
            ("Play Again", self._reset_board),
            ("Reset All", self._reset_all),
            ("Theme", self._toggle_theme),
            ("Quit", self._quit),
        ):
            btn = tk.Button(
                control_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=10,
                command=command
            )
            btn.pack(side=tk.LEFT, padx=4)
            self.control_buttons.append(btn)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _apply_theme(self):
        """Push the current palette into every widget."""
        palette = self.view_config.palette(self.theme)
        bg = palette["panel"]
        fg = palette["text"]

        self.root.configure(bg=bg)
        self.style.configure('TFrame', background=bg)
        self.style.configure('TLabel', background=bg, foreground=fg, font=('Segoe UI', 11))
        self.style.configure('Title.TLabel', font=('Segoe UI', 20, 'bold'), foreground=ViewConfig.PRIMARY)
        self.style.configure('Heading.TLabel', font=('Segoe UI', 13, 'bold'))
        self.style.configure('Status.TLabel', font=('Segoe UI', 12, 'bold'))
        self.board_canvas.configure(bg=palette["background"])

        for btn in self.control_buttons:
            btn.configure(bg=palette["button"], fg=fg, activebackground=ViewConfig.SECONDARY)
        self._refresh()

    # ==================== ENGINE EVENTS ====================

    def _on_canvas_click(self, event):
        """Translate a canvas click into a cell move."""
        index = self.renderer.cell_at(event.x, event.y)
        if index is None:
            return

        if self.controller.handle_cell_click(index):
            self._after_move()

    def _after_move(self):
        """Queue whatever the new state needs, then redraw."""
        if self.controller.state == ControllerState.TERMINAL:
            self._score_job = self.root.after(
                self.config.SCORE_DELAY_MS,
                lambda e=self.controller.epoch: self._show_score(e)
            )
        else:
            self._schedule_computer_move()

        self._refresh()

    def _schedule_computer_move(self):
        if self.controller.state != ControllerState.AWAITING_COMPUTER_MOVE:
            return
        self._computer_job = self.root.after(
            self.config.COMPUTER_MOVE_DELAY_MS,
            lambda e=self.controller.epoch: self._computer_move(e)
        )

    def _computer_move(self, epoch: int):
        """Delayed callback: let the computer play under its epoch."""
        self._computer_job = None
        if self.controller.play_computer_move(epoch) is not None:
            self._after_move()

    def _show_score(self, epoch: int):
        self._score_job = None
        if epoch == self.controller.epoch:
            self._refresh_scores()

    def _cancel_pending(self):
        """Drop delayed callbacks queued for the old board."""
        for job in (self._computer_job, self._score_job):
            if job is not None:
                self.root.after_cancel(job)
        self._computer_job = None
        self._score_job = None

    # ==================== BUTTONS ====================

    def _set_mode(self, mode: GameMode):
        self._cancel_pending()
        self.controller.set_mode(mode)
        self._restart()

    def _select_symbol(self, mark: Mark):
        self._cancel_pending()
        self.controller.select_human_mark(mark)
        self._restart()

    def _reset_board(self):
        self._cancel_pending()
        self.controller.reset_board()
        self._restart()

    def _reset_all(self):
        self._cancel_pending()
        self.controller.reset_all()
        self._restart()

    def _restart(self):
        self._refresh()
        self._schedule_computer_move()

    def _toggle_theme(self):
        self.theme = "dark" if self.theme == "light" else "light"
        self._apply_theme()

    # ==================== DRAWING ====================

    def _refresh(self):
        """Redraw the board, status, and selection buttons."""
        self._update_board_canvas()
        self.status_label.configure(text=self.controller.status_text())

        vs_computer = self.controller.mode == GameMode.VS_COMPUTER
        if vs_computer:
            self.symbol_frame.pack(pady=5, before=self.middle_frame)
        else:
            self.symbol_frame.pack_forget()

        palette = self.view_config.palette(self.theme)
        for mode, btn in self.mode_buttons.items():
            active = mode == self.controller.mode
            btn.configure(
                bg=ViewConfig.PRIMARY if active else palette["button"],
                fg='white' if active else palette["text"]
            )
        for mark, btn in self.symbol_buttons.items():
            active = mark == self.controller.human_mark
            btn.configure(
                bg=ViewConfig.ACCENT if active else palette["button"],
                fg='white' if active else palette["text"]
            )

        # A finished game's score shows up after SCORE_DELAY_MS
        if self.controller.state != ControllerState.TERMINAL or self._score_job is None:
            self._refresh_scores()

    def _refresh_scores(self):
        labels = self.controller.score_labels()
        for key, label in self.score_labels.items():
            label.configure(text=f"{labels[key]}: {self.controller.score.get(key)}")

    def _update_board_canvas(self):
        """Render the board and put it on the canvas."""
        image = self.renderer.render(
            self.controller.board,
            self.controller.winning_line,
            self.theme
        )
        photo = ImageTk.PhotoImage(Image.fromarray(self.renderer.to_rgb(image)))

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

    def _quit(self):
        """Quit the application."""
        self._cancel_pending()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
