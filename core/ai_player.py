"""
AI player for TicTacToe.
Uses the Minimax algorithm with a memoization table to choose the best move.
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass

from .board import Board
from .config import GameConfig
from .memo_table import MemoTable
from .phase import Mark, Turn, Won, Tie, phase_value


class SearchInvariantError(RuntimeError):
    """The search met an unevaluated position where a final value was required."""


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a position under optimal play.

    value: +1 if X wins, -1 if O wins, 0 for a tie.
    moves: The principal line of play from the evaluated position to the
        end of the game. Empty for a finished board.
    """
    value: int
    moves: Tuple[int, ...] = ()


@dataclass
class SearchNode:
    """A candidate position and the moves that led to it from the node being searched."""
    board: Board
    moves: Tuple[int, ...] = ()
    value: Optional[int] = None  # set once the subtree is evaluated


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI searches the whole game tree, so it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    Among moves with the same outcome it prefers the quickest win, the
    slowest loss, and then the lowest cell index.
    """

    def __init__(self, use_memo: Optional[bool] = None, verbose: Optional[bool] = None):
        """
        Initialize the AI player.

        Args:
            use_memo: Reuse results for transposed positions
                (default: GameConfig.USE_MEMO).
            verbose: Print search statistics after each move
                (default: GameConfig.VERBOSE).
        """
        self.use_memo = GameConfig.USE_MEMO if use_memo is None else use_memo
        self.verbose = GameConfig.VERBOSE if verbose is None else verbose

        # Statistics of the most recent search
        self.positions_evaluated = 0
        self.last_table: Optional[MemoTable[SearchResult]] = None

    def compute_best_move(self, board: Board) -> int:
        """
        Get the best move for the current position.

        Args:
            board: Current board. It is not modified.

        Returns:
            Index of the cell to play.

        Raises:
            ValueError: if the game on ``board`` is already over.
        """
        result = self.evaluate_position(board)
        best_move = result.moves[0]

        if self.verbose:
            print(
                f"AI evaluated {self.positions_evaluated} positions. "
                f"Best move: {best_move} (score: {result.value})"
            )
            if self.last_table is not None:
                print(
                    f"Memo table: {len(self.last_table)} positions, "
                    f"{self.last_table.hits} hits"
                )

        return best_move

    def evaluate_position(self, board: Board) -> SearchResult:
        """
        Solve ``board`` and return its value and principal line of play.

        A fresh memoization table is used for every call.
        """
        if not isinstance(board.phase, Turn):
            raise ValueError(f"No move to search, game is over: {board.phase}")

        self.positions_evaluated = 0
        table: Optional[MemoTable[SearchResult]] = MemoTable() if self.use_memo else None
        self.last_table = table

        return self._minimax(board.copy(), table)

    def _minimax(
        self,
        board: Board,
        table: Optional[MemoTable[SearchResult]]
    ) -> SearchResult:
        """
        Evaluate ``board`` assuming both sides play perfectly.

        Args:
            board: Position to evaluate (a private copy).
            table: Memoization table of this search, or None to disable.

        Returns:
            The position's value and the line of play that reaches it.
        """
        self.positions_evaluated += 1

        phase = board.phase
        if isinstance(phase, (Won, Tie)):
            result = SearchResult(phase_value(phase))
        elif isinstance(phase, Turn):
            children = self._expand(board)
            for node in children:
                child_result = None
                if table is not None:
                    child_result = table.lookup(node.board)
                if child_result is None:
                    child_result = self._minimax(node.board, table)
                node.value = child_result.value
                node.moves = node.moves + child_result.moves

            best = self._select_best(children, phase.mark)
            result = SearchResult(best.value, best.moves)
        else:
            raise TypeError(f"Not a game phase: {phase!r}")

        if table is not None:
            table.insert(board, result)
        return result

    def _expand(self, board: Board) -> List[SearchNode]:
        """One child node per empty cell, each on its own copy of the board."""
        children = []
        for index in board.empty_cells():
            child = board.copy()
            if not child.place(index):
                raise SearchInvariantError(f"Could not play empty cell {index}")
            children.append(SearchNode(child, (index,)))
        return children

    def _select_best(self, children: List[SearchNode], mover: Mark) -> SearchNode:
        """
        Pick the child that is best for ``mover``.

        Raises:
            SearchInvariantError: if a child has no value yet. The recursion
                always finishes a subtree before returning, so this means the
                win detection or the search itself is broken.
        """
        if not children:
            raise SearchInvariantError("Ongoing game with no empty cells")

        for node in children:
            if node.value is None:
                raise SearchInvariantError(
                    f"Unevaluated position after move {node.moves[0]}:\n{node.board}"
                )

        return max(children, key=lambda node: self._rank(node, mover))

    def _rank(self, node: SearchNode, mover: Mark) -> Tuple[int, int, int]:
        # Outcome for the mover first, then tempo, then lowest index
        outcome = node.value * mover.value
        plies = len(node.moves)
        if outcome > 0:
            tempo = -plies  # win sooner
        elif outcome < 0:
            tempo = plies  # lose later
        else:
            tempo = 0
        return outcome, tempo, -node.moves[0]


def compute_best_move(board: Board, use_memo: bool = True) -> int:
    """Best move for the side to play on ``board``; see AIPlayer.compute_best_move()."""
    return AIPlayer(use_memo=use_memo, verbose=False).compute_best_move(board)


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(verbose=True)

    # Test 1: AI should take a winning move
    board = Board.from_string("XX. OO. ...")
    board.print_board()
    print(f"\n{board.phase}. X can win with 2!")

    move = ai.compute_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly takes the win!")

    # Test 2: AI should block a winning move
    board = Board.from_string("XX. .O. ...")
    board.print_board()
    print(f"\n{board.phase}. X is about to win with 2!")

    move = ai.compute_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")

    print("\nAIPlayer test done!")
