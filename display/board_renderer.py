"""
Board renderer for Hidden-Grid TicTacToe.
Draws the game state into an OpenCV (BGR) image.
"""

import cv2
import numpy as np
from typing import List, Optional, Tuple

from logic.config import BOARD_SIZE, VISIBLE_SIZE
from logic.coords import CENTER_OFFSET, to_index, to_row_col
from logic.game_state import GameState, Mark, HUMAN_MARK
from .config import DisplayConfig

Point = Tuple[int, int]


def status_text_for(game_state: GameState) -> str:
    """Default status line for a game state."""
    if game_state.is_game_over:
        if game_state.winner == HUMAN_MARK:
            return "You win!"
        if game_state.winner is not None:
            return "CPU wins!"
        return "Draw!"

    if game_state.current_player == HUMAN_MARK:
        return f"Your turn (step {game_state.turn_number})"
    return f"CPU's turn (step {game_state.turn_number})"


class BoardRenderer:
    """
    Draws the 5x5 board.

    The whole 5x5 grid is drawn faintly and the center 3x3 is emphasized.
    Once the outer grid has been revealed, a brighter 5x5 overlay is added.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration.
        """
        self.config = config or DisplayConfig()

    # ==================== GEOMETRY ====================

    def cell_top_left(self, index: int) -> Point:
        """Pixel position of a cell's top-left corner."""
        row, col = to_row_col(index)
        x = self.config.PADDING_LEFT + col * self.config.CELL_SIZE
        y = self.config.PADDING_TOP + row * self.config.CELL_SIZE
        return x, y

    def cell_center(self, index: int) -> Point:
        """Pixel position of a cell's center."""
        x, y = self.cell_top_left(index)
        half = self.config.CELL_SIZE // 2
        return x + half, y + half

    def point_to_index(self, x: int, y: int) -> Optional[int]:
        """
        Convert a pixel position to a board index.

        Returns:
            The cell under (x, y), or None outside the board.
        """
        bx = x - self.config.PADDING_LEFT
        by = y - self.config.PADDING_TOP
        if bx < 0 or by < 0:
            return None

        col = bx // self.config.CELL_SIZE
        row = by // self.config.CELL_SIZE
        if row >= BOARD_SIZE or col >= BOARD_SIZE:
            return None

        return to_index(row, col)

    def restart_button_rect(self) -> Tuple[int, int, int, int]:
        """Restart button as (x1, y1, x2, y2)."""
        cfg = self.config
        cx = cfg.WIDTH // 2
        cy = cfg.HEIGHT - cfg.PADDING_BOTTOM // 2
        return (
            cx - cfg.BUTTON_WIDTH // 2,
            cy - cfg.BUTTON_HEIGHT // 2,
            cx + cfg.BUTTON_WIDTH // 2,
            cy + cfg.BUTTON_HEIGHT // 2,
        )

    def is_restart_click(self, x: int, y: int) -> bool:
        x1, y1, x2, y2 = self.restart_button_rect()
        return x1 <= x <= x2 and y1 <= y <= y2

    # ==================== DRAWING ====================

    def render(
        self,
        game_state: GameState,
        status_text: Optional[str] = None,
        hint_text: str = ""
    ) -> np.ndarray:
        """
        Draw the full window image.

        Args:
            game_state: State to draw.
            status_text: Status line (defaults to one derived from the state).
            hint_text: Small text above the restart button.

        Returns:
            BGR image of shape (HEIGHT, WIDTH, 3).
        """
        cfg = self.config
        img = np.zeros((cfg.HEIGHT, cfg.WIDTH, 3), dtype=np.uint8)
        img[:] = cfg.COLOR_BG

        self._draw_grid(img)
        if game_state.is_outer_grid_revealed:
            self._draw_outer_overlay(img)

        self._draw_marks(img, game_state)
        if game_state.winning_line:
            self._draw_win_line(img, game_state.winning_line)

        self._draw_text(img, status_text or status_text_for(game_state), hint_text)
        self._draw_restart_button(img)

        return img

    def _blend_lines(
        self,
        img: np.ndarray,
        lines: List[Tuple[Point, Point]],
        color: Tuple[int, int, int],
        thickness: int,
        alpha: float
    ):
        """Draw semi-transparent lines onto img in place."""
        overlay = img.copy()
        for pt1, pt2 in lines:
            cv2.line(overlay, pt1, pt2, color, thickness)
        cv2.addWeighted(overlay, alpha, img, 1 - alpha, 0, dst=img)

    def _grid_lines(self, left: int, top: int, cells: int, border: bool) -> List[Tuple[Point, Point]]:
        """Grid lines for a square block of cells."""
        size = self.config.CELL_SIZE
        span = cells * size
        start = 0 if border else 1
        stop = cells + 1 if border else cells

        lines = []
        for i in range(start, stop):
            lines.append(((left + i * size, top), (left + i * size, top + span)))
            lines.append(((left, top + i * size), (left + span, top + i * size)))
        return lines

    def _draw_grid(self, img: np.ndarray):
        """Faint 5x5 grid with the 3x3 center emphasized."""
        cfg = self.config
        left, top = cfg.PADDING_LEFT, cfg.PADDING_TOP

        # 5x5 border, then inner lines
        cv2.rectangle(img, (left, top), (left + cfg.BOARD_PX, top + cfg.BOARD_PX),
                      cfg.COLOR_GRID_WEAK, cfg.OUTER_BORDER_WIDTH)
        self._blend_lines(
            img, self._grid_lines(left, top, BOARD_SIZE, border=False),
            cfg.COLOR_GRID_WEAK, cfg.WEAK_LINE_WIDTH, cfg.WEAK_ALPHA
        )

        # Center 3x3 with its border
        center_left = left + CENTER_OFFSET * cfg.CELL_SIZE
        center_top = top + CENTER_OFFSET * cfg.CELL_SIZE
        self._blend_lines(
            img, self._grid_lines(center_left, center_top, VISIBLE_SIZE, border=True),
            cfg.COLOR_GRID_STRONG, cfg.STRONG_LINE_WIDTH, cfg.STRONG_ALPHA
        )

    def _draw_outer_overlay(self, img: np.ndarray):
        """Bright full 5x5 grid shown after the reveal."""
        cfg = self.config
        self._blend_lines(
            img, self._grid_lines(cfg.PADDING_LEFT, cfg.PADDING_TOP, BOARD_SIZE, border=True),
            cfg.COLOR_OVERLAY, cfg.OVERLAY_LINE_WIDTH, cfg.OVERLAY_ALPHA
        )

    def _draw_marks(self, img: np.ndarray, game_state: GameState):
        cfg = self.config
        marker_size = cfg.CELL_SIZE // 2 - cfg.MARK_MARGIN

        for index, mark in enumerate(game_state.board):
            if mark is None:
                continue

            cx, cy = self.cell_center(index)

            # Dim the loser's marks once the game is won
            dimmed = game_state.winner is not None and mark != game_state.winner

            if mark == Mark.O:
                color = self._dim(cfg.COLOR_O) if dimmed else cfg.COLOR_O
                cv2.circle(img, (cx, cy), marker_size, color, cfg.MARK_THICKNESS)
            else:
                color = self._dim(cfg.COLOR_X) if dimmed else cfg.COLOR_X
                cv2.line(img, (cx - marker_size, cy - marker_size),
                         (cx + marker_size, cy + marker_size), color, cfg.MARK_THICKNESS)
                cv2.line(img, (cx + marker_size, cy - marker_size),
                         (cx - marker_size, cy + marker_size), color, cfg.MARK_THICKNESS)

    @staticmethod
    def _dim(color: Tuple[int, int, int]) -> Tuple[int, int, int]:
        return tuple(c // 3 for c in color)

    def _draw_win_line(self, img: np.ndarray, line: Tuple[int, ...]):
        """Highlight the winning cells and join them."""
        cfg = self.config
        for index in line:
            x, y = self.cell_top_left(index)
            cv2.rectangle(img, (x + 4, y + 4),
                          (x + cfg.CELL_SIZE - 4, y + cfg.CELL_SIZE - 4),
                          cfg.COLOR_WIN_LINE, 2)

        cv2.line(img, self.cell_center(line[0]), self.cell_center(line[-1]),
                 cfg.COLOR_WIN_LINE, cfg.WIN_LINE_THICKNESS)

    def _draw_centered_text(
        self,
        img: np.ndarray,
        text: str,
        y: int,
        scale: float,
        color: Tuple[int, int, int],
        thickness: int
    ):
        (width, _), _ = cv2.getTextSize(text, self.config.FONT, scale, thickness)
        x = (img.shape[1] - width) // 2
        cv2.putText(img, text, (x, y), self.config.FONT, scale, color, thickness)

    def _draw_text(self, img: np.ndarray, status_text: str, hint_text: str):
        cfg = self.config
        self._draw_centered_text(img, "Tic-Tac-Toe", cfg.TITLE_Y, 1.0, cfg.COLOR_TEXT_MAIN, 2)
        self._draw_centered_text(img, status_text, cfg.STATUS_Y, 0.8, cfg.COLOR_TEXT_SUB, 2)

        if hint_text:
            hint_y = cfg.HEIGHT - cfg.PADDING_BOTTOM + 20
            self._draw_centered_text(img, hint_text, hint_y, 0.5, cfg.COLOR_TEXT_HINT, 1)

    def _draw_restart_button(self, img: np.ndarray):
        cfg = self.config
        x1, y1, x2, y2 = self.restart_button_rect()
        cv2.rectangle(img, (x1, y1), (x2, y2), cfg.COLOR_BUTTON, -1)

        label = "Restart (r)"
        (width, height), _ = cv2.getTextSize(label, cfg.FONT, 0.7, 2)
        cv2.putText(img, label, ((x1 + x2 - width) // 2, (y1 + y2 + height) // 2),
                    cfg.FONT, 0.7, cfg.COLOR_TEXT_MAIN, 2)
