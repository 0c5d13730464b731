"""
Win checker for TicTacToe.
Finds a completed line of three on a 3x3 board.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from .phase import Mark


# All possible winning lines (cell indices, row-major)
WINNING_LINES = np.array([
    # Rows
    [0, 1, 2],
    [3, 4, 5],
    [6, 7, 8],
    # Columns
    [0, 3, 6],
    [1, 4, 7],
    [2, 5, 8],
    # Diagonals
    [0, 4, 8],
    [2, 4, 6],
], dtype=np.intp)

# LINE_MEMBERSHIP[cell, line] is 1 if the cell lies on that line
LINE_MEMBERSHIP = np.zeros((9, len(WINNING_LINES)), dtype=np.int8)
for _line_number, _line in enumerate(WINNING_LINES):
    LINE_MEMBERSHIP[_line, _line_number] = 1
del _line_number, _line

Cells = Sequence[Optional[Mark]]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Each cell is scored with its mark value (X = +1, O = -1, empty = 0),
    so a line summing to +3 or -3 is held entirely by one mark.

    A board keeps its 8 line sums and updates them with add_mark() after
    each move, so a search never rescans all 9 cells.
    """

    WINNING_LINES = WINNING_LINES

    def line_sums(self, cells: Cells) -> np.ndarray:
        """Sum of the cell values on each winning line, in table order."""
        values = np.fromiter(
            (0 if cell is None else cell.value for cell in cells),
            dtype=np.int8,
            count=len(cells),
        )
        return values[self.WINNING_LINES].sum(axis=1, dtype=np.int8)

    def add_mark(self, line_sums: np.ndarray, index: int, mark: Mark):
        """Update ``line_sums`` in place for ``mark`` placed at ``index``."""
        line_sums += mark.value * LINE_MEMBERSHIP[index]

    def winner_from_sums(self, line_sums: np.ndarray) -> Optional[Mark]:
        """The mark holding the first complete line, or None."""
        line = self._first_full_line(line_sums)
        if line is None:
            return None
        return Mark.X if line_sums[line] > 0 else Mark.O

    def check_winner(self, cells: Cells) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            cells: The 9 board cells.

        Returns:
            The winning Mark, or None if no line is complete.
        """
        return self.winner_from_sums(self.line_sums(cells))

    def get_winning_line(self, cells: Cells) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a tuple of cell indices, or None.
        """
        line = self._first_full_line(self.line_sums(cells))
        if line is None:
            return None
        a, b, c = (int(i) for i in self.WINNING_LINES[line])
        return a, b, c

    def _first_full_line(self, line_sums: np.ndarray) -> Optional[int]:
        won = np.flatnonzero(np.abs(line_sums) == 3)
        if won.size == 0:
            return None
        return int(won[0])


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()
    X, O = Mark.X, Mark.O

    # Test 1: Horizontal win
    cells = [X, X, X,
             O, O, None,
             None, None, None]
    winner = checker.check_winner(cells)
    print(f"Test 1 (horizontal): winner = {winner}")
    assert winner == X

    # Test 2: Vertical win
    cells = [O, X, None,
             O, X, None,
             O, None, X]
    winner = checker.check_winner(cells)
    print(f"Test 2 (vertical): winner = {winner}")
    assert winner == O

    # Test 3: Diagonal win
    cells = [X, O, None,
             None, X, O,
             None, None, X]
    print(f"Test 3 (diagonal): line = {checker.get_winning_line(cells)}")
    assert checker.get_winning_line(cells) == (0, 4, 8)

    # Test 4: No winner
    cells = [X, O, None,
             None, O, None,
             None, None, X]
    winner = checker.check_winner(cells)
    print(f"Test 4 (no winner): winner = {winner}")
    assert winner is None

    # Test 5: Incremental sums match a full rescan
    sums = checker.line_sums([None] * 9)
    for index, mark in [(0, X), (4, O), (8, X)]:
        checker.add_mark(sums, index, mark)
    cells = [X, None, None, None, O, None, None, None, X]
    print(f"Test 5 (incremental): sums = {sums.tolist()}")
    assert sums.tolist() == checker.line_sums(cells).tolist()

    print("\nWinChecker test done!")
