"""
Turn planning for Hidden-Grid TicTacToe.

Decides when the outer part of the board is shown and how long the CPU
"thinks" before placing. Nothing here draws anything; the caller gets a
plan and acts on it.
"""

from typing import Optional
from dataclasses import dataclass

from .ai_player import AIPlayer
from .config import GameConfig
from .coords import is_outer_zone
from .game_state import GameState


@dataclass
class CpuTurnPlan:
    """
    What the CPU will do this turn and how to present it.
    """
    index: int                      # Cell the CPU will take
    delay_ms: int                   # Wait before placing
    reveal_delay: bool              # First outer move on a reveal turn
    reveal_grid_before_place: bool  # Draw the full grid, then place
    status_text: str


def human_move_reveals_grid(game_state: GameState, index: int) -> bool:
    """
    Check if a human move should reveal the outer grid first.

    The first time the human plays outside the center, the full
    5x5 grid is drawn before the mark goes down.
    """
    return is_outer_zone(index) and not game_state.is_outer_grid_revealed


def plan_cpu_turn(
    game_state: GameState,
    ai: AIPlayer,
    config: Optional[GameConfig] = None
) -> Optional[CpuTurnPlan]:
    """
    Plan the CPU's turn.

    Marks the one-shot outer move reveal as used when the plan relies
    on it.

    Args:
        game_state: Current game state (CPU to move).
        ai: The CPU player.
        config: Game configuration.

    Returns:
        The plan, or None if the AI has no move.
    """
    config = config or GameConfig()

    index = ai.get_best_move(game_state)
    if index is None:
        return None

    is_outer = is_outer_zone(index)
    turn = game_state.turn_number

    reveal_delay = (
        not game_state.has_revealed_outer_move
        and is_outer
        and turn in config.OUTER_REVEAL_TURN_NUMBERS
    )

    if reveal_delay:
        game_state.has_revealed_outer_move = True
        delay_ms = config.OUTER_REVEAL_DELAY_MS
        status_text = "CPU ......"
    else:
        delay_ms = config.CPU_THINK_DELAY_MS
        status_text = "CPU is thinking..."

    reveal_grid_before_place = (
        is_outer
        and turn >= config.GRID_REVEAL_BEFORE_PLACE_FROM_TURN
        and not game_state.is_outer_grid_revealed
    )

    return CpuTurnPlan(
        index=index,
        delay_ms=delay_ms,
        reveal_delay=reveal_delay,
        reveal_grid_before_place=reveal_grid_before_place,
        status_text=status_text,
    )
