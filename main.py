"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.
Both drive the same GameController.

Run this script to play TicTacToe!
"""

import argparse
import sys
import time
from typing import Optional, TextIO

from logic.game_controller import GameController, ControllerState
from logic.game_state import GameMode, Mark, format_board


MODES = {
    "two": GameMode.TWO_PLAYER,
    "computer": GameMode.VS_COMPUTER,
}


class ConsoleGame:
    """
    Console front end for the game controller.

    Commands:
    - 1-9: play that cell (numbered left-to-right, top-to-bottom)
    - r: play again (score kept)
    - a: reset all (score cleared)
    - q: quit
    """

    def __init__(
        self,
        controller: GameController,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        pace: bool = True
    ):
        self.controller = controller
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.pace = pace

    def _print(self, text: str = ""):
        print(text, file=self.stdout)

    def _show(self):
        self._print()
        self._print(format_board(self.controller.board))
        self._print()
        self._print(self.controller.status_text())

    def _show_score(self):
        labels = self.controller.score_labels()
        parts = [f"{labels[key]}: {value}" for key, value in self.controller.score.as_dict().items()]
        self._print("Score: " + "  ".join(parts))

    def _computer_turn(self):
        """Let the computer move, pausing like the UI does."""
        if self.pace:
            time.sleep(self.controller.config.COMPUTER_MOVE_DELAY_MS / 1000)
        move = self.controller.play_computer_move(self.controller.epoch)
        if move is not None:
            self._print(f"Computer plays {move + 1}")
            self._after_move()

    def _after_move(self):
        self._show()
        if self.controller.state == ControllerState.TERMINAL:
            self._show_score()
            self._print("Type r to play again, a to reset all, q to quit.")

    def handle_command(self, command: str) -> bool:
        """
        Process one line of input.

        Returns:
            False when the player asked to quit.
        """
        command = command.strip().lower()

        if command == "q":
            return False
        if command in ("r", "a"):
            if command == "r":
                self.controller.reset_board()
            else:
                self.controller.reset_all()
            self._show()
        elif command.isascii() and command.isdigit():
            if self.controller.handle_cell_click(int(command) - 1):
                self._after_move()
            else:
                self._print("Illegal move. Try again.")
                free = self.controller.valid_moves
                if free:
                    self._print("Free cells: " + ", ".join(str(i + 1) for i in free))
        else:
            self._print("Please type a cell number 1-9, r, a, or q.")

        while self.controller.state == ControllerState.AWAITING_COMPUTER_MOVE:
            self._computer_turn()
        return True

    def run(self):
        """Play until the input ends or the player quits."""
        self._print("Cells:\n1 | 2 | 3\n4 | 5 | 6\n7 | 8 | 9")
        while self.controller.state == ControllerState.AWAITING_COMPUTER_MOVE:
            self._computer_turn()
        self._show()

        for line in self.stdin:
            if not self.handle_command(line):
                break

        self._print("Goodbye!")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tic Tac Toe")
    parser.add_argument(
        "--mode",
        choices=sorted(MODES),
        default="two",
        help="Play against a friend or the computer"
    )
    parser.add_argument(
        "--symbol",
        choices=[mark.value for mark in Mark],
        default=Mark.X.value,
        help="Your mark when playing the computer (X moves first)"
    )
    parser.add_argument(
        "--theme",
        choices=["light", "dark"],
        default="light",
        help="UI colour theme"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    controller = GameController(
        mode=MODES[args.mode],
        human_mark=Mark(args.symbol)
    )

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(controller, theme=args.theme)
        ui.run()
        return

    try:
        ConsoleGame(controller).run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")


if __name__ == "__main__":
    main()
