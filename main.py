"""
Main orchestration script for Hidden-Grid TicTacToe.

This script ties together:
- Logic (game state, move validation, win checking, CPU opponent)
- Turn planning (when the outer board is revealed, CPU thinking delays)
- Display (OpenCV window, or a text board in console mode)

You play O on what looks like a 3x3 board. The real board is 5x5.
"""

import random
import time
from typing import Optional

import cv2

from logic.config import GameConfig
from logic.coords import to_index, to_row_col, is_on_board_rc
from logic.game_state import GameState, HUMAN_MARK, CPU_MARK
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker
from logic.ai_player import AIPlayer
from logic.turn_planner import CpuTurnPlan, plan_cpu_turn, human_move_reveals_grid

from display.config import DisplayConfig
from display.board_renderer import BoardRenderer, status_text_for


class TicTacToeGame:
    """
    Main controller for one game session.

    Game flow:
    1. Human (O) picks a cell
    2. Board is checked for a win or draw
    3. CPU (X) plans its move, waits, maybe reveals the outer grid
    4. CPU places its mark, board is checked again
    5. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        config: Optional[GameConfig] = None,
        display_config: Optional[DisplayConfig] = None
    ):
        """
        Initialize the game.

        Args:
            seed: Seed for the CPU's tie-breaks (None for random play).
            config: Game configuration.
            display_config: Display configuration.
        """
        self.config = config or GameConfig()
        self.game_state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(CPU_MARK, rng=random.Random(seed), config=self.config)
        self.renderer = BoardRenderer(display_config)

        self.status_text: Optional[str] = None
        self.is_running = False

        # Window mode: CPU move waiting for its delay to pass
        self.pending_plan: Optional[CpuTurnPlan] = None
        self.pending_due: float = 0.0

    # ==================== GAME FLOW ====================

    def handle_human_move(self, index: int) -> bool:
        """
        Process a human move.

        Args:
            index: Flat board index picked by the human.

        Returns:
            True if the move was played.
        """
        if self.pending_plan is not None:
            return False

        result = self.validator.validate_move(self.game_state, index, HUMAN_MARK)
        if not result.is_valid:
            print(f"Invalid move: {result.error_message}")
            return False

        # First human move outside the center shows the whole grid
        if human_move_reveals_grid(self.game_state, index):
            self.reveal_outer_grid()

        print(f"\n>>> You placed {HUMAN_MARK.value} at {to_row_col(index)}")
        self.game_state.make_move(index)
        self.win_checker.update_game_state(self.game_state)

        if not self.game_state.is_game_over:
            self.game_state.advance_turn()

        self.status_text = None
        return True

    def start_cpu_turn(self) -> Optional[CpuTurnPlan]:
        """Plan the CPU's move and show its status."""
        print("\n>>> CPU is thinking...")

        plan = plan_cpu_turn(self.game_state, self.ai, self.config)
        if plan is None:
            print("ERROR: CPU could not find a move!")
            return None

        self.status_text = plan.status_text
        return plan

    def apply_cpu_move(self, plan: CpuTurnPlan) -> bool:
        """
        Place the CPU's planned mark.

        Returns:
            True if the mark was placed.
        """
        if self.game_state.is_game_over:
            return False
        if self.game_state.board[plan.index] is not None:
            return False

        print(f">>> CPU placed {CPU_MARK.value} at {to_row_col(plan.index)}")
        self.game_state.make_move(plan.index)
        self.win_checker.update_game_state(self.game_state)

        if not self.game_state.is_game_over:
            self.game_state.advance_turn()

        self.status_text = None
        return True

    def reveal_outer_grid(self):
        """Show the full 5x5 grid (only once per game)."""
        if not self.game_state.is_outer_grid_revealed:
            print(">>> The board is bigger than it looks...")
            self.game_state.is_outer_grid_revealed = True

    def reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.game_state = GameState()
        self.status_text = None
        self.pending_plan = None
        self.pending_due = 0.0

    def _show_game_result(self):
        """Print the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        self.game_state.print_board()

        if self.game_state.winner == HUMAN_MARK:
            print("\nCongratulations! You won!")
        elif self.game_state.winner == CPU_MARK:
            print("\nCPU wins! Better luck next time!")
        else:
            print("\nIt's a draw! Good game!")

        print("\n" + "="*60)

    # ==================== CONSOLE MODE ====================

    def _read_human_index(self) -> Optional[int]:
        """
        Ask the human for a cell.

        Accepts "row col" or a single index. Returns None to quit.
        """
        while True:
            text = input("\nYour move (row col, or q to quit): ").strip().lower()
            if text in ("q", "quit", "exit"):
                return None

            parts = text.replace(",", " ").split()
            try:
                numbers = [int(p) for p in parts]
            except ValueError:
                print("Please enter numbers, e.g. '2 3'.")
                continue

            if len(numbers) == 2 and is_on_board_rc(*numbers):
                return to_index(*numbers)
            if len(numbers) == 1:
                return numbers[0]

            print("Please enter a row and a column between 0 and 4.")

    def play_console(self):
        """Play in the terminal."""
        self.is_running = True
        self.game_state.print_board()

        while self.is_running and not self.game_state.is_game_over:
            if self.game_state.current_player == HUMAN_MARK:
                index = self._read_human_index()
                if index is None:
                    print("\nGame quit by user.")
                    self.is_running = False
                    break
                if not self.handle_human_move(index):
                    continue
            else:
                plan = self.start_cpu_turn()
                if plan is None:
                    break
                print(plan.status_text)
                time.sleep(plan.delay_ms / 1000)

                if plan.reveal_grid_before_place:
                    self.reveal_outer_grid()
                    time.sleep(self.config.GRID_REVEAL_PAUSE_MS / 1000)

                self.apply_cpu_move(plan)

            self.game_state.print_board()

        if self.game_state.is_game_over:
            self._show_game_result()

    # ==================== WINDOW MODE ====================

    def _on_mouse(self, event, x, y, flags, param):
        """OpenCV mouse callback."""
        if event != cv2.EVENT_LBUTTONDOWN:
            return

        if self.renderer.is_restart_click(x, y):
            self.reset_game()
            return

        if self.game_state.is_game_over or self.game_state.current_player != HUMAN_MARK:
            return

        index = self.renderer.point_to_index(x, y)
        if index is None:
            return

        if not self.handle_human_move(index):
            return

        if self.game_state.is_game_over:
            self._show_game_result()
        else:
            self._schedule_cpu_turn()

    def _schedule_cpu_turn(self):
        plan = self.start_cpu_turn()
        if plan is None:
            return
        self.pending_plan = plan
        self.pending_due = time.monotonic() + plan.delay_ms / 1000

    def _update_pending_cpu_move(self):
        """Place the CPU's move once its delay has passed."""
        if self.pending_plan is None or time.monotonic() < self.pending_due:
            return

        plan = self.pending_plan

        # Reveal first, then place after a short pause
        if plan.reveal_grid_before_place and not self.game_state.is_outer_grid_revealed:
            self.reveal_outer_grid()
            self.pending_due = time.monotonic() + self.config.GRID_REVEAL_PAUSE_MS / 1000
            return

        self.pending_plan = None
        self.apply_cpu_move(plan)

        if self.game_state.is_game_over:
            self._show_game_result()

    def play_window(self):
        """Play in an OpenCV window."""
        window = self.renderer.config.WINDOW_NAME
        cv2.namedWindow(window)
        cv2.setMouseCallback(window, self._on_mouse)

        print("Click a cell to play. Press 'r' to restart, 'q' to quit.\n")
        self.is_running = True

        while self.is_running:
            self._update_pending_cpu_move()

            status = self.status_text or status_text_for(self.game_state)
            frame = self.renderer.render(self.game_state, status, hint_text="Three in a row wins")
            cv2.imshow(window, frame)

            key = cv2.waitKey(30) & 0xFF
            if key == ord('q'):
                print("\nGame quit by user.")
                self.is_running = False
            elif key == ord('r'):
                self.reset_game()

        cv2.destroyAllWindows()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Hidden-Grid TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the terminal instead of a window"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the CPU's tie-breaks"
    )

    args = parser.parse_args()

    print("\n" + "="*60)
    print("   Hidden-Grid TicTacToe")
    print(f"   You play: {HUMAN_MARK.value}   CPU plays: {CPU_MARK.value}")
    print("="*60 + "\n")

    game = TicTacToeGame(seed=args.seed)

    try:
        if args.no_ui:
            game.play_console()
        else:
            game.play_window()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
