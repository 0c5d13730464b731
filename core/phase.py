"""
Marks and game phases for TicTacToe.

A phase is one of three closed variants:
- Turn(mark): game ongoing, ``mark`` moves next
- Won(mark):  ``mark`` has completed a line
- Tie:        board full, no winner
"""

from enum import Enum
from typing import Union
from dataclasses import dataclass

from .config import GameConfig


class Mark(Enum):
    """The two marks. The value is used for scoring (X = +1, O = -1)."""
    X = 1
    O = -1

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self is Mark.X else Mark.X

    @property
    def symbol(self) -> str:
        return GameConfig.FIRST_SYMBOL if self is Mark.X else GameConfig.SECOND_SYMBOL

    @classmethod
    def from_symbol(cls, symbol: str) -> "Mark":
        """
        Look up a mark by its printed symbol (case-insensitive).

        Raises:
            ValueError: if the symbol is neither mark.
        """
        normalized = symbol.strip().upper()
        for mark in cls:
            if mark.symbol == normalized:
                return mark
        raise ValueError(f"Unknown mark symbol: {symbol!r}")

    def __str__(self) -> str:
        return self.symbol


# X always moves first
FIRST = Mark.X
SECOND = Mark.O


@dataclass(frozen=True)
class Turn:
    """Game ongoing; ``mark`` moves next."""
    mark: Mark

    def __str__(self) -> str:
        return f"Turn({self.mark})"


@dataclass(frozen=True)
class Won:
    """``mark`` completed a winning line."""
    mark: Mark

    def __str__(self) -> str:
        return f"Won({self.mark})"


@dataclass(frozen=True)
class Tie:
    """All cells taken, nobody won."""

    def __str__(self) -> str:
        return "Tie"


Phase = Union[Turn, Won, Tie]

TIE = Tie()


def is_terminal(phase: Phase) -> bool:
    """True for Won and Tie, False for Turn."""
    if isinstance(phase, Turn):
        return False
    if isinstance(phase, (Won, Tie)):
        return True
    raise TypeError(f"Not a game phase: {phase!r}")


def phase_value(phase: Phase) -> int:
    """
    Score of a finished game: the winner's mark value, or 0 for a tie.

    Raises:
        ValueError: if the game is still ongoing.
        TypeError: if ``phase`` is not a game phase.
    """
    if isinstance(phase, Won):
        return phase.mark.value
    if isinstance(phase, Tie):
        return 0
    if isinstance(phase, Turn):
        raise ValueError(f"Game is not over yet: {phase}")
    raise TypeError(f"Not a game phase: {phase!r}")
