"""
Core of the unbeatable TicTacToe player.
Handles the board state machine, win detection and the minimax solver.
"""

from .config import GameConfig
from .phase import Mark, Phase, Turn, Won, Tie, TIE, FIRST, SECOND
from .board import Board, place
from .win_checker import WinChecker, WINNING_LINES
from .move_validator import MoveValidator, ValidationResult
from .memo_table import MemoTable
from .ai_player import (
    AIPlayer,
    SearchInvariantError,
    SearchNode,
    SearchResult,
    compute_best_move,
)

__version__ = "1.0.0"
