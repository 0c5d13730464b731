"""
Memoization table for the minimax search.
Maps board snapshots to results that were already computed.
"""

from typing import Dict, Generic, Optional, TypeVar

from .board import Board, Snapshot


Result = TypeVar("Result")


class MemoTable(Generic[Result]):
    """
    Cache of evaluated positions for one search.

    Keys are full board snapshots (cells + phase), so the same position
    reached by different move orders shares one entry. There is no
    eviction: a 3x3 game has only a few thousand reachable positions.
    """

    def __init__(self):
        self.data: Dict[Snapshot, Result] = {}
        self.hits = 0
        self.misses = 0

    def lookup(self, board: Board) -> Optional[Result]:
        """Get the stored result for ``board``, or None."""
        result = self.data.get(board.snapshot())
        if result is None:
            self.misses += 1
        else:
            self.hits += 1
        return result

    def insert(self, board: Board, result: Result):
        self.data[board.snapshot()] = result

    def clear(self):
        self.data.clear()
        self.hits = 0
        self.misses = 0

    def __contains__(self, board: Board) -> bool:
        return board.snapshot() in self.data

    def __len__(self) -> int:
        return len(self.data)
