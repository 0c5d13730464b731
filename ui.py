"""
Console UI for TicTacToe.
Prints the board and messages, and reads moves typed by the player.

Streams are injectable so a whole game can be scripted.
"""

import sys
from typing import Optional, TextIO

from core.board import Board
from core.config import GameConfig
from core.phase import Mark, Turn, Won, Tie


class ConsoleUI:
    """
    Text interface for the game.
    """

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None
    ):
        """
        Initialize the UI.

        Args:
            input_stream: Where moves are read from (default: stdin).
            output_stream: Where output goes (default: stdout).
        """
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout

    def show(self, text: str = ""):
        print(text, file=self.output_stream)

    def show_banner(self, title: str):
        line = "=" * GameConfig.BANNER_WIDTH
        self.show("\n" + line)
        self.show(f"   {title}")
        self.show(line + "\n")

    def show_board(self, board: Board):
        self.show(board.render())

    def read_line(self, prompt: str) -> Optional[str]:
        """
        Ask for a line of input.

        Returns:
            The line without its newline, or None at end of input.
        """
        self.output_stream.write(prompt)
        self.output_stream.flush()

        line = self.input_stream.readline()
        if line == "":
            return None
        return line.rstrip("\n")

    def show_result(self, board: Board, human_mark: Mark):
        """Announce how the game ended."""
        self.show_banner("GAME OVER!")
        self.show_board(board)
        self.show()

        phase = board.phase
        if isinstance(phase, Won):
            self.show(f"{phase.mark} Won!")
            line = board.get_winning_line()
            if line is not None:
                self.show(f"Winning line: {'-'.join(str(i) for i in line)}")
            if phase.mark == human_mark:
                self.show("Congratulations! You won!")
            else:
                self.show("Computer wins! Better luck next time!")
        elif isinstance(phase, Tie):
            self.show("Tie!")
        elif isinstance(phase, Turn):
            self.show("Game ended before a result.")
        else:
            raise TypeError(f"Not a game phase: {phase!r}")
