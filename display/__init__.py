"""
Display module for Hidden-Grid TicTacToe.
Draws the board with OpenCV.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer, status_text_for
