"""
Logic module for Hidden-Grid TicTacToe.
Handles board rules, game state and the CPU opponent.
"""

from .config import GameConfig
from .coords import to_index, to_row_col, is_center_zone, is_outer_zone
from .game_state import GameState, Mark, Move, new_board, placed
from .win_checker import (
    WinChecker,
    EvalResult,
    Outcome,
    build_all_lines,
    get_all_lines,
    evaluate,
    empty_indices,
    count_lines_with_exactly,
)
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, MoveContext, choose_move
from .turn_planner import CpuTurnPlan, plan_cpu_turn, human_move_reveals_grid

__version__ = "1.0.0"
