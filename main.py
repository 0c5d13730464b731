"""
Main script for console TicTacToe.

This script ties together:
- Core (board state, move validation, minimax AI)
- Console UI (printing the board, reading moves)

Run this script to play TicTacToe against the computer. It never loses.
"""

import argparse
import sys
from typing import List, Optional

from core.ai_player import AIPlayer, SearchInvariantError
from core.board import Board
from core.config import GameConfig
from core.move_validator import MoveValidator
from core.phase import Mark, Phase

from ui import ConsoleUI


class TicTacToeGame:
    """
    Main controller for a game against the computer.

    Game flow:
    1. The human types a cell number (0-8)
    2. The move is validated and placed; invalid moves are asked again
    3. If the game is not over, the AI computes and plays its reply
    4. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        human_mark: Mark = Mark.X,
        use_memo: Optional[bool] = None,
        verbose: Optional[bool] = None,
        ui: Optional[ConsoleUI] = None
    ):
        """
        Initialize the game.

        Args:
            human_mark: Which mark the human plays. X always moves first.
            use_memo: Let the AI reuse transposed positions.
            verbose: Print AI search statistics.
            ui: Console to talk to (default: stdin/stdout).
        """
        self.human_mark = human_mark
        self.ai_mark = human_mark.opposite()

        self.ui = ui if ui is not None else ConsoleUI()
        self.validator = MoveValidator()
        self.ai = AIPlayer(use_memo=use_memo, verbose=verbose)

        self.board = Board()
        self.is_running = False

    def start(self) -> Phase:
        """
        Play one game.

        Returns:
            The final phase (Turn if input ran out before the end).
        """
        self.ui.show_banner("TicTacToe - you cannot win")
        self.ui.show(f"   You play: {self.human_mark}")
        self.ui.show(f"   Computer plays: {self.ai_mark}\n")

        self.is_running = True
        self._game_loop()

        self._show_game_result()
        return self.board.phase

    def _game_loop(self):
        """Main game loop."""
        while self.is_running and not self.board.is_game_over:
            if self.board.current_mark == self.ai_mark:
                self._ai_move()
                continue

            self.ui.show_board(self.board)
            line = self.ui.read_line(GameConfig.PROMPT)
            if line is None:
                self.ui.show("\nNo more input.")
                self.is_running = False
                break

            self._process_human_move(line)

    def _process_human_move(self, line: str) -> bool:
        """
        Apply a move typed by the human.

        Returns:
            True if a mark was placed.
        """
        parsed = self.validator.parse_move(line)
        if not parsed.is_valid:
            # Not a number, just ask again
            return False

        result = self.validator.validate_move(self.board, parsed.index)
        if not result.is_valid:
            self.ui.show(f"{GameConfig.INVALID_MOVE_MESSAGE} {result.error_message}")
            return False

        self.board.place(parsed.index)
        return True

    def _ai_move(self):
        """Compute and play the AI's reply."""
        index = self.ai.compute_best_move(self.board)
        if not self.board.place(index):
            raise SearchInvariantError(f"AI chose an unplayable cell: {index}")
        self.ui.show(f"Computer plays {index}")

    def _show_game_result(self):
        self.ui.show_result(self.board, self.human_mark)

    def reset(self):
        """Reset the board for a new round."""
        self.board = Board()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="TicTacToe against an unbeatable computer")
    parser.add_argument(
        "--human-mark",
        choices=[GameConfig.FIRST_SYMBOL, GameConfig.SECOND_SYMBOL],
        default=GameConfig.HUMAN_SYMBOL,
        type=str.upper,
        help="Mark you play; X moves first (default: %(default)s)"
    )
    parser.add_argument(
        "--no-memo",
        action="store_true",
        help="Disable the AI's memoization table (much slower: the opening "
             "move alone searches over half a million positions)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print how many positions the AI searched"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    game = TicTacToeGame(
        human_mark=Mark.from_symbol(args.human_mark),
        use_memo=not args.no_memo,
        verbose=args.verbose or GameConfig.VERBOSE
    )

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
