"""
Game state management for Hidden-Grid TicTacToe.
Tracks the 5x5 board, whose turn it is, the turn number and reveal flags.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Iterator, List, Optional, Tuple
from dataclasses import dataclass, field

from .config import BOARD_SIZE, CELL_COUNT, VISIBLE_SIZE
from .coords import CENTER_OFFSET, is_center_zone, to_row_col


class Mark(Enum):
    """The two marks in the game."""
    O = "◯"   # Human, always moves first
    X = "×"   # CPU

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.X if self == Mark.O else Mark.O


# A cell is a Mark or None (empty); the board is a flat list of 25 cells
Cell = Optional[Mark]
Board = List[Cell]

HUMAN_MARK = Mark.O
CPU_MARK = Mark.X


def new_board() -> Board:
    """Create an empty 5x5 board."""
    return [None] * CELL_COUNT


@contextmanager
def placed(board: Board, index: int, mark: Mark) -> Iterator[Board]:
    """
    Temporarily put a mark on the board.

    The previous cell value is restored when the block exits, also on
    early return or exception.

    Args:
        board: Board to mutate in place.
        index: Cell to write.
        mark: Hypothetical mark.

    Yields:
        The same board, with the mark in place.
    """
    previous = board[index]
    board[index] = mark
    try:
        yield board
    finally:
        board[index] = previous


def format_board(board: Board, show_outer: bool = True) -> str:
    """
    Text representation of the 5x5 board.

    The center block is framed with double bars. When show_outer is False,
    empty outer cells are drawn as dots.
    """
    lines = ["    " + "   ".join(str(c) for c in range(BOARD_SIZE))]
    lines.append("  ┌" + "───┬" * (BOARD_SIZE - 1) + "───┐")

    for row in range(BOARD_SIZE):
        row_str = f"{row} │"
        for col in range(BOARD_SIZE):
            index = row * BOARD_SIZE + col
            cell = board[index]
            if cell is not None:
                symbol = cell.value
            elif is_center_zone(index) or show_outer:
                symbol = " "
            else:
                symbol = "·"
            # Double bars frame the visible center left and right
            on_center_edge = (
                CENTER_OFFSET <= row < CENTER_OFFSET + VISIBLE_SIZE
                and col in (CENTER_OFFSET - 1, CENTER_OFFSET + VISIBLE_SIZE - 1)
            )
            sep = "║" if on_center_edge else "│"
            row_str += f" {symbol} {sep}"
        lines.append(row_str)

        if row < BOARD_SIZE - 1:
            lines.append("  ├" + "───┼" * (BOARD_SIZE - 1) + "───┤")

    lines.append("  └" + "───┴" * (BOARD_SIZE - 1) + "───┘")
    return "\n".join(lines)


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark          # Who made the move
    index: int          # Flat board index (0-24)
    turn_number: int    # Turn on which it was played (1-based)

    @property
    def row_col(self) -> Tuple[int, int]:
        return to_row_col(self.index)


@dataclass
class GameState:
    """
    The complete state of one game session.

    Tracks:
    - The 5x5 board
    - Whose turn it is and the turn number (1-based)
    - Move history for this session
    - Game status (ongoing, won, draw)
    - One-shot reveal flags for the outer grid
    """

    board: Board = field(default_factory=new_board)

    # Human always starts
    current_player: Mark = HUMAN_MARK
    turn_number: int = 1

    moves: List[Move] = field(default_factory=list)

    # Game result (filled in by WinChecker)
    winner: Optional[Mark] = None
    winning_line: Optional[Tuple[int, ...]] = None
    is_draw: bool = False
    is_game_over: bool = False

    # Has the CPU already used the delayed "outer move" reveal?
    has_revealed_outer_move: bool = False
    # Is the full 5x5 grid drawn?
    is_outer_grid_revealed: bool = False

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark.

        Does not switch turns; call advance_turn() once the result
        has been checked and the game goes on.

        Args:
            index: Flat board index.

        Returns:
            True if the mark was placed, False otherwise.
        """
        if self.is_game_over:
            print("Game is already over!")
            return False

        if self.board[index] is not None:
            print(f"Cell {to_row_col(index)} is already occupied!")
            return False

        self.board[index] = self.current_player
        self.moves.append(Move(
            mark=self.current_player,
            index=index,
            turn_number=self.turn_number,
        ))
        return True

    def advance_turn(self):
        """Hand the turn to the other player."""
        self.current_player = self.current_player.opposite()
        self.turn_number += 1

    def get_empty_cells(self) -> List[int]:
        """All empty indices in ascending order."""
        return [i for i, cell in enumerate(self.board) if cell is None]

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            turn_number=self.turn_number,
            moves=list(self.moves),
            winner=self.winner,
            winning_line=self.winning_line,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over,
            has_revealed_outer_move=self.has_revealed_outer_move,
            is_outer_grid_revealed=self.is_outer_grid_revealed,
        )

    def print_board(self):
        """Print the board to console."""
        print()
        print(format_board(self.board, show_outer=self.is_outer_grid_revealed))

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nTurn {self.turn_number}: {self.current_player.value} to move")
