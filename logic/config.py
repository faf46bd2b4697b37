"""
Game configuration for Hidden-Grid TicTacToe.
Board geometry, AI turn policy and reveal timings.
"""


class GameConfig:
    """
    Configuration class for game rules and turn flow.
    Change these values to tweak how the game plays.
    """

    # ==================== BOARD SETTINGS ====================
    # The real board is 5x5, three in a row anywhere wins
    BOARD_SIZE = 5
    WIN_LENGTH = 3

    # Only the middle 3x3 is emphasized at the start
    VISIBLE_SIZE = 3

    # ==================== AI SETTINGS ====================
    # Through this turn (1-based) the CPU stays inside the visible center
    # as long as a center cell is free
    PREFER_CENTER_THROUGH_TURN = 9

    # Turns on which the CPU may play an outer cell
    OUTER_REVEAL_TURN_NUMBERS = frozenset({8, 9})

    # ==================== TIMINGS (milliseconds) ====================
    CPU_THINK_DELAY_MS = 300
    OUTER_REVEAL_DELAY_MS = 1000   # First outer CPU move on a reveal turn
    GRID_REVEAL_PAUSE_MS = 220     # Pause between grid reveal and placement

    # CPU outer moves from this turn on draw the full grid before placing
    GRID_REVEAL_BEFORE_PLACE_FROM_TURN = 9


# Module-level shortcuts used by the pure rule functions
BOARD_SIZE = GameConfig.BOARD_SIZE
WIN_LENGTH = GameConfig.WIN_LENGTH
VISIBLE_SIZE = GameConfig.VISIBLE_SIZE
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
