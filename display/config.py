"""
Display configuration for Hidden-Grid TicTacToe.
Window layout, colors and grid line styles.
"""

import cv2

from logic.config import BOARD_SIZE


class DisplayConfig:
    """
    Configuration class for drawing the board.
    Colors are BGR, as OpenCV expects.
    """

    # ==================== LAYOUT ====================
    CELL_SIZE = 120          # Pixels per cell
    PADDING_TOP = 120        # Title and status area
    PADDING_BOTTOM = 120     # Restart button area
    PADDING_LEFT = 0

    BOARD_PX = BOARD_SIZE * CELL_SIZE
    WIDTH = PADDING_LEFT * 2 + BOARD_PX
    HEIGHT = BOARD_PX + PADDING_TOP + PADDING_BOTTOM

    # Restart button (centered in the bottom padding)
    BUTTON_WIDTH = 200
    BUTTON_HEIGHT = 56

    # ==================== COLORS (BGR) ====================
    COLOR_BG = (20, 15, 11)
    COLOR_TEXT_MAIN = (243, 237, 230)
    COLOR_TEXT_SUB = (217, 209, 201)
    COLOR_TEXT_HINT = (158, 148, 139)
    COLOR_O = (87, 166, 255)       # Human marks (orange)
    COLOR_X = (255, 192, 121)      # CPU marks (light blue)
    COLOR_GRID_STRONG = (61, 54, 48)
    COLOR_GRID_WEAK = (51, 42, 31)
    COLOR_OVERLAY = (255, 255, 255)
    COLOR_WIN_LINE = (0, 255, 255)  # Yellow
    COLOR_BUTTON = (51, 42, 31)

    # ==================== GRID STYLE ====================
    WEAK_LINE_WIDTH = 2
    WEAK_ALPHA = 0.12
    OUTER_BORDER_WIDTH = 4
    OUTER_BORDER_ALPHA = 0.35
    STRONG_LINE_WIDTH = 6
    STRONG_ALPHA = 0.9

    # Full 5x5 grid drawn once the outer part has been revealed
    OVERLAY_LINE_WIDTH = 4
    OVERLAY_ALPHA = 0.55

    # ==================== MARKS ====================
    MARK_THICKNESS = 8
    MARK_MARGIN = CELL_SIZE // 5
    WIN_LINE_THICKNESS = 6

    # ==================== TEXT ====================
    FONT = cv2.FONT_HERSHEY_SIMPLEX
    TITLE_Y = 40
    STATUS_Y = 85

    WINDOW_NAME = "Hidden-Grid TicTacToe"
