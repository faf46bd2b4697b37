"""
Tests for the line catalog and board evaluation.

Run with:
    pytest test_rules.py
"""

import pytest

from logic.game_state import GameState, Mark, new_board, placed
from logic.win_checker import (
    Outcome,
    WinChecker,
    build_all_lines,
    count_lines_with_exactly,
    empty_indices,
    evaluate,
    get_all_lines,
)

X, O = Mark.X, Mark.O


def board_from_rows(rows):
    """Build a board from 5 strings like 'XO.. X' ('.' or ' ' is empty)."""
    symbols = {"X": X, "O": O, ".": None, " ": None}
    board = []
    for row in rows:
        assert len(row) == 5
        board.extend(symbols[ch] for ch in row)
    return board


# Full board with no three in a row anywhere
DRAW_ROWS = [
    "XXOOX",
    "OOXXO",
    "XXOOX",
    "OOXXO",
    "XXOOX",
]


# ==================== LINE CATALOG ====================

def test_catalog_has_48_lines():
    lines = build_all_lines()
    assert len(lines) == 48
    assert len(set(lines)) == 48


def test_every_line_has_three_distinct_cells():
    for line in build_all_lines():
        assert len(line) == 3
        assert len(set(line)) == 3
        assert all(0 <= i < 25 for i in line)


def test_catalog_order():
    lines = build_all_lines()

    # Horizontal, row by row
    assert lines[0] == (0, 1, 2)
    assert lines[1] == (1, 2, 3)
    assert lines[14] == (22, 23, 24)

    # Vertical, column by column
    assert lines[15] == (0, 5, 10)
    assert lines[16] == (5, 10, 15)
    assert lines[29] == (14, 19, 24)

    # Down-right diagonals
    assert lines[30] == (0, 6, 12)
    assert lines[38] == (12, 18, 24)

    # Up-right diagonals
    assert lines[39] == (10, 6, 2)
    assert lines[47] == (22, 18, 14)


def test_catalog_is_built_once():
    assert get_all_lines() is get_all_lines()
    assert get_all_lines() == build_all_lines()


# ==================== EVALUATE ====================

def test_empty_board_is_ongoing():
    result = evaluate(new_board())
    assert result.outcome == Outcome.ONGOING
    assert not result.done
    assert result.winner is None
    assert result.line is None


def test_horizontal_win_on_outer_row():
    board = board_from_rows([
        "XXX..",
        ".O...",
        "..O..",
        ".....",
        ".....",
    ])
    result = evaluate(board)
    assert result.outcome == Outcome.WON
    assert result.done
    assert result.winner == X
    assert result.line == (0, 1, 2)


def test_vertical_win():
    board = board_from_rows([
        "....O",
        "X...O",
        ".X..O",
        ".....",
        ".....",
    ])
    result = evaluate(board)
    assert result.winner == O
    assert result.line == (4, 9, 14)


def test_down_right_diagonal_win():
    board = board_from_rows([
        ".....",
        ".O...",
        "..O..",
        "...O.",
        "X.X..",
    ])
    result = evaluate(board)
    assert result.winner == O
    assert result.line == (6, 12, 18)


def test_up_right_diagonal_win():
    board = board_from_rows([
        ".....",
        ".....",
        "..X..",
        ".X...",
        "X.OO.",
    ])
    result = evaluate(board)
    assert result.winner == X
    assert result.line == (20, 16, 12)


def test_first_line_in_catalog_order_is_reported():
    # X completes a row, O completes a column; rows come first
    board = board_from_rows([
        "XXXO.",
        "...O.",
        "...O.",
        ".....",
        ".....",
    ])
    result = evaluate(board)
    assert result.winner == X
    assert result.line == (0, 1, 2)


def test_draw():
    result = evaluate(board_from_rows(DRAW_ROWS))
    assert result.outcome == Outcome.DRAW
    assert result.done
    assert result.winner is None
    assert result.line is None


def test_win_on_full_board_is_not_a_draw():
    rows = list(DRAW_ROWS)
    rows[0] = "XXXOX"
    result = evaluate(board_from_rows(rows))
    assert result.outcome == Outcome.WON
    assert result.winner == X


def test_evaluate_is_idempotent():
    board = board_from_rows([
        "X....",
        ".O...",
        "..X..",
        "...O.",
        ".....",
    ])
    snapshot = list(board)
    first = evaluate(board)
    assert evaluate(board) == first
    assert evaluate(board) == first
    assert board == snapshot


# ==================== HELPERS ====================

def test_empty_indices_ascending():
    board = new_board()
    board[3] = X
    board[0] = O
    board[24] = X
    empties = empty_indices(board)
    assert empties == [i for i in range(25) if i not in (0, 3, 24)]


def test_count_lines_with_exactly():
    board = new_board()
    assert count_lines_with_exactly(board, X, 0) == 48

    board[12] = X
    assert count_lines_with_exactly(board, X, 1) == 12
    assert count_lines_with_exactly(board, X, 0) == 36

    # O next to it kills the two rows through both cells
    board[13] = O
    assert count_lines_with_exactly(board, X, 1) == 10
    assert count_lines_with_exactly(board, O, 1) == 7


def test_count_lines_with_two():
    board = new_board()
    board[0] = O
    board[1] = O
    assert count_lines_with_exactly(board, O, 2) == 1

    board[2] = X
    assert count_lines_with_exactly(board, O, 2) == 0


# ==================== SCOPED PLACEMENT ====================

def test_placed_restores_cell():
    board = new_board()
    with placed(board, 7, X):
        assert board[7] == X
    assert board[7] is None


def test_placed_restores_previous_mark():
    board = new_board()
    board[7] = O
    with placed(board, 7, X):
        assert board[7] == X
    assert board[7] == O


def test_placed_restores_on_exception():
    board = new_board()
    with pytest.raises(RuntimeError):
        with placed(board, 3, X):
            raise RuntimeError("boom")
    assert board[3] is None


# ==================== WIN CHECKER ====================

def test_win_checker_marks_winner():
    state = GameState(board=board_from_rows([
        ".....",
        ".OOO.",
        ".XX..",
        ".....",
        ".....",
    ]))
    result = WinChecker().update_game_state(state)

    assert result.winner == O
    assert state.is_game_over
    assert state.winner == O
    assert state.winning_line == (6, 7, 8)
    assert not state.is_draw


def test_win_checker_marks_draw():
    state = GameState(board=board_from_rows(DRAW_ROWS))
    WinChecker().update_game_state(state)

    assert state.is_game_over
    assert state.is_draw
    assert state.winner is None


def test_win_checker_leaves_ongoing_game_alone():
    state = GameState()
    state.board[12] = O
    result = WinChecker().update_game_state(state)

    assert result.outcome == Outcome.ONGOING
    assert not state.is_game_over
