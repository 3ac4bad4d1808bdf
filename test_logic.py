"""
Tests for the TicTacToe logic module.
Covers the board, win/draw detection, move validation, and the AI.

Usage:
    python test_logic.py      # Run all tests
    pytest test_logic.py
"""

import random
import sys
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from logic.game_state import (
    Mark, Score, apply_move, count_marks, empty_board,
    format_board, get_empty_cells, next_mark,
)
from logic.win_checker import (
    WINNING_LINES, Outcome, OutcomeKind, WinChecker,
    detect_outcome, get_winning_line,
)
from logic.move_validator import MoveValidator
from logic.ai_player import AIPlayer, NO_MOVE, select_computer_move


X, O, _ = Mark.X, Mark.O, None


def board_of(*cells):
    assert len(cells) == 9
    return tuple(cells)


def random_playout(rng: random.Random, max_moves: int = 9):
    """Play random legal moves from an empty board, stopping at game over."""
    board = empty_board()
    for _ in range(max_moves):
        if detect_outcome(board).is_terminal:
            break
        board = apply_move(board, rng.choice(get_empty_cells(board)), next_mark(board))
    return board


def square_symmetries():
    """The 8 symmetries of the square, as index permutations."""
    grid = np.arange(9).reshape(3, 3)
    perms = []
    for k in range(4):
        rotated = np.rot90(grid, k)
        perms.append(rotated.flatten().tolist())
        perms.append(np.fliplr(rotated).flatten().tolist())
    return perms


# ==================== BOARD ====================

def test_empty_board():
    board = empty_board()
    assert len(board) == 9
    assert get_empty_cells(board) == list(range(9))
    assert next_mark(board) == Mark.X


def test_apply_move_returns_new_board():
    board = empty_board()
    moved = apply_move(board, 4, X)
    assert moved[4] == X
    assert board[4] is None
    assert [i for i in range(9) if moved[i] != board[i]] == [4]


def test_apply_move_on_filled_cell_is_noop():
    board = apply_move(empty_board(), 0, X)
    assert apply_move(board, 0, O) == board
    assert apply_move(board, 0, X) == board


@pytest.mark.parametrize("index", [-1, 9, 42])
def test_apply_move_out_of_range_is_noop(index):
    board = empty_board()
    assert apply_move(board, index, X) == board


def test_turns_alternate():
    rng = random.Random(7)
    for _ in range(200):
        board = empty_board()
        n = rng.randint(0, 9)
        for _ in range(n):
            board = apply_move(board, rng.choice(get_empty_cells(board)), next_mark(board))
        assert count_marks(board, X) == (n + 1) // 2
        assert count_marks(board, O) == n // 2


def test_next_mark_with_o_first():
    board = apply_move(empty_board(), 0, O)
    assert next_mark(board, first=O) == X


def test_format_board():
    board = board_of(X, _, _, _, O, _, _, _, _)
    assert format_board(board) == "X | 2 | 3\n---------\n4 | O | 6\n---------\n7 | 8 | 9"


def test_score_counters():
    score = Score()
    score.increment("X")
    score.increment("X")
    score.increment("draw")
    assert score.as_dict() == {"X": 2, "O": 0, "draw": 1}
    assert score.get("X") == 2

    score.reset()
    assert score.as_dict() == {"X": 0, "O": 0, "draw": 0}


def test_score_rejects_unknown_key():
    with pytest.raises(ValueError):
        Score().increment("Y")


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("line", WINNING_LINES)
def test_each_line_wins(line):
    cells = [None] * 9
    for index in line:
        cells[index] = O
    board = tuple(cells)
    assert detect_outcome(board) == Outcome.win(O)
    assert get_winning_line(board) == line


def test_lines_in_fixed_order():
    assert WINNING_LINES[:3] == ((0, 1, 2), (3, 4, 5), (6, 7, 8))
    assert WINNING_LINES[3:6] == ((0, 3, 6), (1, 4, 7), (2, 5, 8))
    assert WINNING_LINES[6:] == ((0, 4, 8), (2, 4, 6))


def test_first_line_wins_on_arbitrary_board():
    # Not reachable in play: both marks own a row; rows are scanned top-down
    board = board_of(O, O, O, X, X, X, _, _, _)
    assert detect_outcome(board) == Outcome.win(O)


def test_no_winner_yet():
    board = board_of(X, O, _, _, X, _, _, _, O)
    outcome = detect_outcome(board)
    assert outcome.kind == OutcomeKind.NONE
    assert not outcome.is_terminal
    assert outcome.score_key is None


def test_full_board_without_line_is_draw():
    board = board_of(X, O, X, X, O, O, O, X, X)
    outcome = detect_outcome(board)
    assert outcome == Outcome.draw()
    assert outcome.score_key == "draw"
    assert WinChecker().check_draw(board)


def test_win_on_last_cell_is_not_draw():
    board = board_of(X, O, X, O, X, O, O, X, X)
    assert detect_outcome(board) == Outcome.win(X)
    assert not WinChecker().check_draw(board)


def test_outcome_symmetric_under_square_symmetries_and_relabeling():
    rng = random.Random(2024)
    swap = {X: O, O: X, None: None}

    for _ in range(300):
        board = random_playout(rng, rng.randint(0, 9))
        outcome = detect_outcome(board)

        for perm in square_symmetries():
            transformed = tuple(board[i] for i in perm)
            assert detect_outcome(transformed) == outcome

            relabeled = tuple(swap[cell] for cell in transformed)
            other = detect_outcome(relabeled)
            assert other.kind == outcome.kind
            if outcome.kind == OutcomeKind.WIN:
                assert other.winner == outcome.winner.opposite()


def test_checker_leaves_board_untouched():
    board = board_of(X, X, X, O, O, _, _, _, _)
    before = tuple(board)
    WinChecker().detect_outcome(board)
    assert board == before


# ==================== MOVE VALIDATOR ====================

def test_validator_accepts_legal_move():
    result = MoveValidator().validate_move(empty_board(), 4, X, Outcome.none(), X)
    assert result.is_valid
    assert result.error_message is None


def test_validator_rejections():
    validator = MoveValidator()
    board = apply_move(empty_board(), 4, X)

    assert not validator.validate_move(board, 4, O, Outcome.none(), O).is_valid
    assert not validator.validate_move(board, 9, O, Outcome.none(), O).is_valid
    assert not validator.validate_move(board, 0, X, Outcome.none(), O).is_valid
    assert not validator.validate_move(board, 0, O, Outcome.win(X), O).is_valid


def test_valid_moves_empty_once_game_over():
    validator = MoveValidator()
    board = board_of(X, X, X, O, O, _, _, _, _)
    assert validator.get_valid_moves(board, detect_outcome(board)) == []
    assert validator.get_valid_moves(empty_board(), Outcome.none()) == list(range(9))


# ==================== AI ====================

class LastChoice:
    """Stand-in random source that always picks the last candidate."""

    def choice(self, seq):
        return seq[-1]


def test_ai_takes_win():
    board = board_of(X, X, _, O, O, _, _, _, _)
    assert select_computer_move(board, X, O) == 2


def test_ai_blocks():
    board = board_of(O, O, _, X, _, _, _, _, _)
    assert select_computer_move(board, X, O) == 2


def test_ai_prefers_win_over_block():
    board = board_of(O, O, _, X, X, _, _, _, _)
    assert select_computer_move(board, X, O) == 5


def test_ai_win_scan_is_index_order():
    # X can win at 2 (top row) or 6 (left column); 2 comes first
    board = board_of(X, X, _, X, O, O, _, O, _)
    assert select_computer_move(board, X, O) == 2


def test_ai_takes_center():
    board = board_of(X, _, _, _, _, _, _, _, _)
    assert select_computer_move(board, O, X) == 4


def test_ai_takes_random_corner():
    board = board_of(_, _, _, _, X, _, _, _, _)
    seen = set()
    for seed in range(100):
        move = select_computer_move(board, O, X, random.Random(seed))
        assert move in (0, 2, 6, 8)
        seen.add(move)
    assert seen == {0, 2, 6, 8}


def test_ai_corner_uses_injected_rng():
    board = board_of(_, _, _, _, X, _, _, _, _)
    assert select_computer_move(board, O, X, LastChoice()) == 8


def test_ai_takes_random_edge_when_nothing_else():
    board = board_of(X, _, O, O, O, X, X, _, O)
    seen = set()
    for seed in range(50):
        move = select_computer_move(board, X, O, random.Random(seed))
        assert move in (1, 7)
        seen.add(move)
    assert seen == {1, 7}


def test_ai_no_move_on_full_board():
    board = board_of(X, O, X, X, O, O, O, X, X)
    assert select_computer_move(board, X, O) is NO_MOVE


def test_ai_only_plays_empty_cells():
    rng = random.Random(99)
    for _ in range(300):
        board = random_playout(rng, rng.randint(0, 8))
        if detect_outcome(board).is_terminal:
            continue
        ai_mark = next_mark(board)
        move = select_computer_move(board, ai_mark, ai_mark.opposite(), rng)
        assert move in get_empty_cells(board)


def test_ai_player_wraps_selector():
    ai = AIPlayer(Mark.O, random.Random(1))
    board = board_of(X, X, _, _, O, _, _, _, _)
    assert ai.get_move(board) == 2


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
