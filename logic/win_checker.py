"""
Win checker for Hidden-Grid TicTacToe.
Enumerates every three-in-a-row on the 5x5 board and evaluates positions.
"""

from enum import Enum
from functools import lru_cache
from typing import List, Optional, Tuple
from dataclasses import dataclass

from .config import BOARD_SIZE, WIN_LENGTH
from .coords import to_index
from .game_state import Board, GameState, Mark

Line = Tuple[int, ...]


class Outcome(Enum):
    """Status of a board."""
    ONGOING = "ongoing"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class EvalResult:
    """
    Result of evaluating a board.

    winner and line are only set when outcome is WON.
    """
    outcome: Outcome
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @property
    def done(self) -> bool:
        return self.outcome != Outcome.ONGOING

    @classmethod
    def ongoing(cls) -> "EvalResult":
        return cls(Outcome.ONGOING)

    @classmethod
    def won(cls, mark: Mark, line: Line) -> "EvalResult":
        return cls(Outcome.WON, winner=mark, line=line)

    @classmethod
    def draw(cls) -> "EvalResult":
        return cls(Outcome.DRAW)


def build_all_lines() -> Tuple[Line, ...]:
    """
    Build every winning line on the board.

    Order matters, evaluate() reports the first complete line:
    horizontal (row by row), vertical (column by column),
    down-right diagonals, then up-right diagonals.

    Returns:
        Tuple of lines, each a tuple of WIN_LENGTH indices.
    """
    lines: List[Line] = []
    last_start = BOARD_SIZE - WIN_LENGTH

    # Rows
    for r in range(BOARD_SIZE):
        for c in range(last_start + 1):
            lines.append(tuple(to_index(r, c + k) for k in range(WIN_LENGTH)))

    # Columns
    for c in range(BOARD_SIZE):
        for r in range(last_start + 1):
            lines.append(tuple(to_index(r + k, c) for k in range(WIN_LENGTH)))

    # Diagonals going down-right
    for r in range(last_start + 1):
        for c in range(last_start + 1):
            lines.append(tuple(to_index(r + k, c + k) for k in range(WIN_LENGTH)))

    # Diagonals going up-right
    for r in range(WIN_LENGTH - 1, BOARD_SIZE):
        for c in range(last_start + 1):
            lines.append(tuple(to_index(r - k, c + k) for k in range(WIN_LENGTH)))

    return tuple(lines)


@lru_cache(maxsize=None)
def get_all_lines() -> Tuple[Line, ...]:
    """The line catalog, built once on first use."""
    return build_all_lines()


def evaluate(board: Board) -> EvalResult:
    """
    Evaluate a board.

    Args:
        board: Flat 5x5 board.

    Returns:
        WON with the first complete line in catalog order,
        DRAW if the board is full, ONGOING otherwise.
    """
    for line in get_all_lines():
        first = board[line[0]]
        if first is not None and all(board[i] == first for i in line[1:]):
            return EvalResult.won(first, line)

    if any(cell is None for cell in board):
        return EvalResult.ongoing()

    return EvalResult.draw()


def empty_indices(board: Board) -> List[int]:
    """All empty indices in ascending order."""
    return [i for i, cell in enumerate(board) if cell is None]


def count_lines_with_exactly(board: Board, mark: Mark, k: int) -> int:
    """
    Count lines holding exactly k of mark and nothing of the other mark.

    A line with any foreign mark can no longer be won by mark,
    so it never counts.
    """
    count = 0
    for line in get_all_lines():
        mine = 0
        for i in line:
            cell = board[i]
            if cell is None:
                continue
            if cell != mark:
                break
            mine += 1
        else:
            if mine == k:
                count += 1
    return count


class WinChecker:
    """
    Applies board evaluation to a game session.
    """

    def check(self, game_state: GameState) -> EvalResult:
        """Evaluate the session board."""
        return evaluate(game_state.board)

    def update_game_state(self, game_state: GameState) -> EvalResult:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            The evaluation that was applied.
        """
        result = self.check(game_state)

        if result.outcome == Outcome.WON:
            game_state.winner = result.winner
            game_state.winning_line = result.line
            game_state.is_game_over = True
        elif result.outcome == Outcome.DRAW:
            game_state.is_draw = True
            game_state.is_game_over = True

        return result
