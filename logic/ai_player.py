"""
AI player for Hidden-Grid TicTacToe.
Picks the CPU's move: win now, block now, otherwise a heuristic score.

For the first turns the CPU only looks at the visible 3x3 center, so early
play stays on the board the human thinks they are playing on.
"""

import random
from typing import List, Optional, Sequence
from dataclasses import dataclass

from .config import CELL_COUNT, GameConfig
from .coords import is_center_zone
from .game_state import Board, GameState, Mark, CPU_MARK, placed
from .win_checker import Outcome, count_lines_with_exactly, empty_indices, evaluate

PREFER_CENTER_THROUGH_TURN = GameConfig.PREFER_CENTER_THROUGH_TURN

# Score weights
MY_TWO_WEIGHT = 100
BLOCK_WEIGHT = 80
MY_ONE_WEIGHT = 10
CENTER_BONUS = 3

# Score of a cell that is already taken
OCCUPIED_SCORE = -1_000_000


@dataclass(frozen=True)
class MoveContext:
    """
    Everything the selector needs for one decision.
    """
    board: Board
    cpu_mark: Mark
    opponent_mark: Mark
    turn_number: int        # 1-based
    allow_outer: bool       # Set by the caller on reveal turns

    def __post_init__(self):
        if len(self.board) != CELL_COUNT:
            raise ValueError(
                f"Board must have {CELL_COUNT} cells, got {len(self.board)}"
            )


def build_candidates(empties: List[int], allow_outer: bool) -> List[int]:
    """
    Candidate cells once the center phase is over.

    With allow_outer every empty cell is a candidate. Otherwise the
    center is preferred, falling back to the whole board when the
    center is full.
    """
    if allow_outer:
        return empties

    center = [i for i in empties if is_center_zone(i)]
    return center if center else empties


def find_immediate_winning_move(
    board: Board,
    mark: Mark,
    candidates: Sequence[int]
) -> Optional[int]:
    """
    Find a candidate that completes a line for mark.

    Used both to win (own mark) and to block (opponent's mark).

    Returns:
        The first such index in candidate order, or None.
    """
    for idx in candidates:
        if board[idx] is not None:
            continue

        with placed(board, idx, mark):
            result = evaluate(board)

        if result.outcome == Outcome.WON and result.winner == mark:
            return idx

    return None


def score_move(board: Board, idx: int, cpu_mark: Mark, opponent_mark: Mark) -> int:
    """
    Score how much a move brings the CPU closer to three in a row.

    - Own two-in-a-rows created weigh the most
    - Opponent two-in-a-rows broken come next (measured over the whole
      board, not only the lines through idx)
    - Own single marks on open lines count a little
    - Center cells get a small bonus to settle ties

    Args:
        board: Board with idx empty; left unchanged on return.
        idx: Candidate cell.
        cpu_mark: Mark of the side to move.
        opponent_mark: Mark of the other side.

    Returns:
        The heuristic score.
    """
    if board[idx] is not None:
        return OCCUPIED_SCORE

    with placed(board, idx, cpu_mark):
        my_two = count_lines_with_exactly(board, cpu_mark, 2)
        my_one = count_lines_with_exactly(board, cpu_mark, 1)

    opp_two_before = count_lines_with_exactly(board, opponent_mark, 2)

    with placed(board, idx, cpu_mark):
        opp_two_after = count_lines_with_exactly(board, opponent_mark, 2)

    blocks = max(0, opp_two_before - opp_two_after)
    center_bonus = CENTER_BONUS if is_center_zone(idx) else 0

    return (
        my_two * MY_TWO_WEIGHT
        + blocks * BLOCK_WEIGHT
        + my_one * MY_ONE_WEIGHT
        + center_bonus
    )


def pick_best_by_score(
    board: Board,
    candidates: Sequence[int],
    cpu_mark: Mark,
    opponent_mark: Mark,
    rng=None
) -> Optional[int]:
    """
    Pick the highest scoring candidate, ties broken at random.

    Returns:
        The chosen index, or None if there are no candidates.
    """
    if not candidates:
        return None

    rng = rng or random
    scores = {idx: score_move(board, idx, cpu_mark, opponent_mark) for idx in candidates}
    best_score = max(scores.values())
    best = [idx for idx in candidates if scores[idx] == best_score]

    return rng.choice(best)


def choose_move(context: MoveContext, rng=None) -> Optional[int]:
    """
    Choose the CPU's move.

    Args:
        context: Board, marks, turn number and outer permission.
        rng: Object with a choice() method used for tie-breaks
            (defaults to the random module).

    Returns:
        An empty cell index, or None if the board is full.
    """
    board = context.board
    empties = empty_indices(board)
    center_only = [i for i in empties if is_center_zone(i)]

    prefer_center = context.turn_number <= PREFER_CENTER_THROUGH_TURN and bool(center_only)

    # While preferring the center, outer threats are not looked at at all
    if prefer_center:
        candidates = center_only
    else:
        candidates = build_candidates(empties, context.allow_outer)

    win = find_immediate_winning_move(board, context.cpu_mark, candidates)
    if win is not None:
        return win

    block = find_immediate_winning_move(board, context.opponent_mark, candidates)
    if block is not None:
        return block

    return pick_best_by_score(
        board, candidates, context.cpu_mark, context.opponent_mark, rng
    )


class AIPlayer:
    """
    The CPU opponent.

    Wraps choose_move() for a game session: knows its own mark and
    decides when outer cells are allowed.
    """

    def __init__(self, mark: Mark = CPU_MARK, rng=None, config: Optional[GameConfig] = None):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: X)
            rng: Random source for tie-breaks (e.g. random.Random(seed))
            config: Game configuration.
        """
        self.mark = mark
        self.rng = rng or random.Random()
        self.config = config or GameConfig()

    def allow_outer(self, turn_number: int) -> bool:
        """Outer cells are open to the CPU on reveal turns."""
        return turn_number in self.config.OUTER_REVEAL_TURN_NUMBERS

    def get_best_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the CPU's move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            Board index of the move, or None if no move can be made.
        """
        if game_state.is_game_over:
            print("Warning: The game is already over!")
            return None

        if game_state.current_player != self.mark:
            print(f"Warning: It's not {self.mark.value}'s turn!")
            return None

        context = MoveContext(
            board=game_state.board,
            cpu_mark=self.mark,
            opponent_mark=self.mark.opposite(),
            turn_number=game_state.turn_number,
            allow_outer=self.allow_outer(game_state.turn_number),
        )
        return choose_move(context, self.rng)
