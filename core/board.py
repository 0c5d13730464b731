"""
Board state for TicTacToe.
Tracks the 9 cells and the game phase (whose turn, or how the game ended).
"""

from typing import Iterable, List, Optional, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig
from .phase import Mark, Phase, Turn, Won, TIE, FIRST, is_terminal
from .win_checker import WinChecker


_win_checker = WinChecker()

# Hashable copy of a board: (cells, phase)
Snapshot = Tuple[Tuple[Optional[Mark], ...], Phase]


@dataclass
class Board:
    """
    The complete state of a TicTacToe game.

    Cells are numbered 0-8 row by row:

         0 | 1 | 2
         3 | 4 | 5
         6 | 7 | 8

    ``phase`` is read-only and always equals evaluate(). It is recomputed
    after every placement.
    """

    # None means empty, otherwise the Mark in that cell
    cells: List[Optional[Mark]] = field(
        default_factory=lambda: [None] * GameConfig.NUM_CELLS
    )

    _phase: Phase = field(init=False)

    # Running sum of each winning line, updated by place()
    _line_sums: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self.cells = list(self.cells)
        if len(self.cells) != GameConfig.NUM_CELLS:
            raise ValueError(
                f"A board has {GameConfig.NUM_CELLS} cells, got {len(self.cells)}"
            )
        for cell in self.cells:
            if cell is not None and not isinstance(cell, Mark):
                raise TypeError(f"Cell must be a Mark or None, got {cell!r}")

        # X moves first, so X has as many marks as O or one more
        x_count = self.cells.count(Mark.X)
        o_count = self.cells.count(Mark.O)
        if x_count - o_count not in (0, 1):
            raise ValueError(f"Impossible mark counts: {x_count} X, {o_count} O")

        self._line_sums = _win_checker.line_sums(self.cells)
        self._phase = self.evaluate()

    @property
    def phase(self) -> Phase:
        return self._phase

    @classmethod
    def from_cells(cls, cells: Iterable[Optional[Mark]]) -> "Board":
        """Build a board from 9 cells; the phase is derived."""
        return cls(list(cells))

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from a compact string like "XX.OO....".

        X/O (any case) are marks; '.', '_', '-' or a digit is an empty cell.
        Whitespace and '|' separators are ignored, so the output of
        render() parses back.
        """
        cells: List[Optional[Mark]] = []
        for char in text:
            if char.isspace() or char == "|":
                continue
            if char in GameConfig.EMPTY_SYMBOLS or char.isdigit():
                cells.append(None)
            else:
                cells.append(Mark.from_symbol(char))
        return cls(cells)

    def evaluate(self) -> Phase:
        """
        Recompute the phase from the cell contents alone.

        Returns:
            Won(mark) for the first complete line found, Tie if every cell
            is taken, otherwise Turn of the mark that did not just move
            (equal counts mean O moved last).
        """
        winner = _win_checker.check_winner(self.cells)
        if winner is not None:
            return Won(winner)

        if self.is_full():
            return TIE

        return Turn(self._infer_last_mover().opposite())

    def _infer_last_mover(self) -> Mark:
        x_count = self.cells.count(Mark.X)
        o_count = self.cells.count(Mark.O)
        return FIRST.opposite() if x_count == o_count else FIRST

    def _phase_after(self, mover: Mark) -> Phase:
        """Same result as evaluate(), from the running line sums."""
        winner = _win_checker.winner_from_sums(self._line_sums)
        if winner is not None:
            return Won(winner)

        if self.is_full():
            return TIE

        return Turn(mover.opposite())

    def check_move(self, index: int) -> Optional[str]:
        """
        Check a move without making it.

        Returns:
            None if the move is legal, otherwise the reason it is not.
        """
        if not isinstance(self._phase, Turn):
            return "Game is already over!"

        if not 0 <= index < GameConfig.NUM_CELLS:
            return f"Invalid position {index}. Must be 0-{GameConfig.NUM_CELLS - 1}."

        if self.cells[index] is not None:
            return f"Cell {index} is already occupied by {self.cells[index]}"

        return None

    def place(self, index: int) -> bool:
        """
        Place the current mark at the given cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was made. False if the game is over, the index
            is out of range or the cell is taken; the board is then unchanged.
        """
        if self.check_move(index) is not None:
            return False

        mark = self._phase.mark
        self.cells[index] = mark
        _win_checker.add_mark(self._line_sums, index, mark)
        self._phase = self._phase_after(mark)
        return True

    def is_full(self) -> bool:
        """True if no cell is empty."""
        return all(cell is not None for cell in self.cells)

    def empty_cells(self) -> List[int]:
        """Indices of all empty cells, in ascending order."""
        return [i for i, cell in enumerate(self.cells) if cell is None]

    @property
    def current_mark(self) -> Optional[Mark]:
        """The mark to move, or None if the game is over."""
        if isinstance(self.phase, Turn):
            return self.phase.mark
        return None

    @property
    def is_game_over(self) -> bool:
        return is_terminal(self.phase)

    @property
    def winner(self) -> Optional[Mark]:
        if isinstance(self.phase, Won):
            return self.phase.mark
        return None

    def get_winning_line(self) -> Optional[Tuple[int, int, int]]:
        return _win_checker.get_winning_line(self.cells)

    def snapshot(self) -> Snapshot:
        """Hashable (cells, phase) pair; two boards are equal iff their snapshots are."""
        return tuple(self.cells), self.phase

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        # Skips __post_init__: the copied phase and line sums already match the cells
        new_board = object.__new__(Board)
        new_board.cells = list(self.cells)
        new_board._phase = self._phase
        new_board._line_sums = self._line_sums.copy()
        return new_board

    def render(self) -> str:
        """
        The board as text. Empty cells show their index so the player
        knows what to type:

            X|1|2
            3|O|5
            6|7|8
        """
        rows = []
        size = GameConfig.BOARD_SIZE
        for row in range(size):
            row_cells = []
            for col in range(size):
                index = row * size + col
                cell = self.cells[index]
                row_cells.append(str(index) if cell is None else cell.symbol)
            rows.append("|".join(row_cells))
        return "\n".join(rows)

    def print_board(self):
        """Print the board to console."""
        print(self.render())

    def __str__(self) -> str:
        return self.render()


def place(board: Board, index: int) -> bool:
    """Apply a move to ``board``; see Board.place()."""
    return board.place(index)


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    print(f"Initial phase: {board.phase}")

    # Simulate a game
    moves = [
        4,  # X center
        0,  # O top-left
        2,  # X top-right
        6,  # O bottom-left
        3,  # X middle-left
        5,  # O blocks middle-right
        1,  # X top-middle
        7,  # O bottom-middle
        8,  # X bottom-right - board is full
    ]

    for index in moves:
        print(f"\n{board.phase} -> {index}")
        board.place(index)
        board.print_board()

    print(f"\nFinal phase: {board.phase}")
    assert board.phase == TIE
    print("\nBoard test done!")
