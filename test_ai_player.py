"""
Tests for the minimax AI and its memoization table.
"""

import pytest

from core.ai_player import (
    AIPlayer,
    SearchInvariantError,
    SearchNode,
    SearchResult,
    compute_best_move,
)
from core.board import Board
from core.memo_table import MemoTable
from core.phase import Mark, Turn, Won, TIE

X, O = Mark.X, Mark.O


def play_out(board, ai_mark, ai, cache, losses):
    """
    Let the human try every legal move while the AI answers.
    Appends every final board the AI lost to ``losses``.
    """
    if board.is_game_over:
        if board.winner == ai_mark.opposite():
            losses.append(board.render())
        return

    if board.current_mark == ai_mark:
        key = board.snapshot()
        if key not in cache:
            cache[key] = ai.compute_best_move(board)
        child = board.copy()
        assert child.place(cache[key])
        play_out(child, ai_mark, ai, cache, losses)
        return

    for index in board.empty_cells():
        child = board.copy()
        child.place(index)
        play_out(child, ai_mark, ai, cache, losses)


def test_takes_immediate_win():
    board = Board.from_string("XX. OO. ...")
    assert board.phase == Turn(X)
    assert compute_best_move(board) == 2


def test_takes_win_instead_of_blocking():
    board = Board.from_string("OO. XX. X..")
    assert board.phase == Turn(O)
    assert AIPlayer().compute_best_move(board) == 2


def test_blocks_opponent_win():
    board = Board.from_string("XX. .O. ...")
    assert board.phase == Turn(O)
    assert AIPlayer().compute_best_move(board) == 2


def test_prefers_quickest_win():
    board = Board.from_string("XX. OO. ...")
    result = AIPlayer().evaluate_position(board)
    assert result == SearchResult(value=1, moves=(2,))


def test_lost_position_still_returns_a_legal_move():
    # X threatens 2, 7 and 8; O can only stop one
    board = Board.from_string("XX. OXO ...")
    assert board.phase == Turn(O)
    ai = AIPlayer()
    result = ai.evaluate_position(board)
    assert result.value == 1
    move = ai.compute_best_move(board)
    assert move in board.empty_cells()
    # Blocking one threat delays the loss to X's next move
    assert len(result.moves) == 2


def test_search_does_not_modify_board():
    board = Board.from_string("X... O....")
    before = board.snapshot()
    AIPlayer().compute_best_move(board)
    assert board.snapshot() == before


def test_finished_board_is_rejected():
    with pytest.raises(ValueError):
        AIPlayer().compute_best_move(Board.from_string("XXX OO. ..."))
    with pytest.raises(ValueError):
        AIPlayer().compute_best_move(Board.from_string("XOX XOO OXX"))


def test_self_play_is_a_tie():
    board = Board()
    ai = AIPlayer()
    while not board.is_game_over:
        assert board.place(ai.compute_best_move(board))
    assert board.phase == TIE
    assert board.phase != Won(O)


@pytest.mark.parametrize("ai_mark", [X, O])
def test_never_loses_to_any_line_of_play(ai_mark):
    ai = AIPlayer()
    losses = []
    play_out(Board(), ai_mark, ai, {}, losses)
    assert losses == []


@pytest.mark.parametrize("position", [
    "...X O....",
    "X... O....",
    ".... X...O",
    "XO.. X....",
    "X.O. ..... ",
])
def test_memo_and_plain_search_agree(position):
    board = Board.from_string(position)
    memo_ai = AIPlayer(use_memo=True)
    plain_ai = AIPlayer(use_memo=False)

    memo_result = memo_ai.evaluate_position(board)
    plain_result = plain_ai.evaluate_position(board)
    assert memo_result.value == plain_result.value

    memo_move = memo_ai.compute_best_move(board)
    plain_move = plain_ai.compute_best_move(board)
    assert memo_ai.positions_evaluated < plain_ai.positions_evaluated

    for move in (memo_move, plain_move):
        child = board.copy()
        child.place(move)
        if child.is_game_over:
            continue
        assert memo_ai.evaluate_position(child).value == memo_result.value


def test_memo_table_is_fresh_for_each_search():
    ai = AIPlayer()
    ai.compute_best_move(Board.from_string("X... O...."))
    first_table = ai.last_table
    assert len(first_table) > 0
    assert first_table.hits > 0

    ai.compute_best_move(Board.from_string("X... O...."))
    assert ai.last_table is not first_table

    plain_ai = AIPlayer(use_memo=False)
    plain_ai.compute_best_move(Board.from_string("X... O...."))
    assert plain_ai.last_table is None


def test_unevaluated_child_is_an_invariant_violation():
    ai = AIPlayer()
    node = SearchNode(Board.from_string("X........"), (0,))
    with pytest.raises(SearchInvariantError):
        ai._select_best([node], X)


def test_memo_table_lookup_and_insert():
    table = MemoTable()
    board = Board.from_string("X... O....")
    assert table.lookup(board) is None
    assert table.misses == 1

    table.insert(board, SearchResult(0, (1,)))
    assert board in table
    assert len(table) == 1
    assert table.lookup(board) == SearchResult(0, (1,))
    assert table.hits == 1

    table.clear()
    assert len(table) == 0
    assert table.hits == 0


def test_memo_table_shares_transposed_positions():
    table = MemoTable()
    first = Board()
    for index in [0, 4, 2]:
        first.place(index)
    second = Board()
    for index in [2, 4, 0]:
        second.place(index)

    table.insert(first, SearchResult(1, (1,)))
    assert table.lookup(second) == SearchResult(1, (1,))


def test_memo_table_key_is_cells_and_phase():
    table = MemoTable()
    board = Board.from_string("X........")
    assert board.snapshot() == (tuple([X] + [None] * 8), Turn(O))

    table.insert(board, SearchResult(0))
    other = Board.from_string(".X.......")
    assert table.lookup(other) is None

    finished = Board.from_string("XXX OO. ...")
    assert finished.snapshot()[1] == Won(X)
    table.insert(finished, SearchResult(1))
    assert len(table) == 2
