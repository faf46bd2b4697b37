"""
Board coordinates for Hidden-Grid TicTacToe.
Maps flat cell indices to (row, col) and classifies center/outer zones.
"""

from typing import List, Tuple

from .config import BOARD_SIZE, VISIBLE_SIZE, CELL_COUNT

# Top-left row/col of the visible 3x3 center (1 on a 5x5 board)
CENTER_OFFSET = (BOARD_SIZE - VISIBLE_SIZE) // 2


def to_index(row: int, col: int) -> int:
    """Convert (row, col) to a flat board index."""
    return row * BOARD_SIZE + col


def to_row_col(index: int) -> Tuple[int, int]:
    """Convert a flat board index to (row, col)."""
    return index // BOARD_SIZE, index % BOARD_SIZE


def is_on_board_rc(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_on_board(index: int) -> bool:
    return 0 <= index < CELL_COUNT


def is_center_zone(index: int) -> bool:
    """
    Check if a cell lies in the visible center.

    On a 5x5 board the center is rows/cols 1..3.

    Args:
        index: Flat board index.

    Returns:
        True if both row and column are inside the center block.
    """
    row, col = to_row_col(index)
    return (
        CENTER_OFFSET <= row < CENTER_OFFSET + VISIBLE_SIZE
        and CENTER_OFFSET <= col < CENTER_OFFSET + VISIBLE_SIZE
    )


def is_outer_zone(index: int) -> bool:
    """Check if a cell lies outside the visible center."""
    return not is_center_zone(index)


def center_indices() -> List[int]:
    """All center-zone indices in ascending order."""
    return [i for i in range(CELL_COUNT) if is_center_zone(i)]


def outer_indices() -> List[int]:
    """All outer-zone indices in ascending order."""
    return [i for i in range(CELL_COUNT) if is_outer_zone(i)]
