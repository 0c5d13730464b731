"""
Test script for TicTacToe modules.
Run this to verify all components work before playing.

The checks are also collected by pytest.
"""

import io
import sys
import traceback


def test_game_config():
    """Test game configuration."""
    print("\n=== Testing Game Config ===")
    from core.config import GameConfig

    print(f"  Board size: {GameConfig.BOARD_SIZE}x{GameConfig.BOARD_SIZE}")
    print(f"  Marks: {GameConfig.FIRST_SYMBOL} / {GameConfig.SECOND_SYMBOL}")
    print(f"  Memo table: {GameConfig.USE_MEMO}")
    assert GameConfig.NUM_CELLS == 9
    print("  ✓ Game config OK")


def test_game_logic():
    """Test game logic components."""
    print("\n=== Testing Game Logic ===")
    from core.board import Board
    from core.move_validator import MoveValidator
    from core.phase import Mark, Turn

    # Test board
    board = Board()
    print(f"  Initial phase: {board.phase}")
    assert board.phase == Turn(Mark.X)

    # Test make move
    assert board.place(4)
    print("  Made move at 4")

    # Test validator
    validator = MoveValidator()
    result = validator.validate_move(board, 4)
    print(f"  Validate 4: valid={result.is_valid} ({result.error_message})")
    assert not result.is_valid

    # Test win checker
    print(f"  Winner check: {board.winner}")
    assert board.winner is None
    print("  ✓ Game logic OK")


def test_ai():
    """Test the minimax AI."""
    print("\n=== Testing AI ===")
    from core.ai_player import AIPlayer
    from core.board import Board

    board = Board()
    board.place(4)

    ai = AIPlayer()
    move = ai.compute_best_move(board)
    print(f"  AI suggests: {move} ({ai.positions_evaluated} positions)")
    assert move in (0, 2, 6, 8)
    print("  ✓ AI OK")


def test_console_ui():
    """Test the console UI."""
    print("\n=== Testing Console UI ===")
    from core.board import Board
    from core.phase import Mark
    from ui import ConsoleUI

    output = io.StringIO()
    ui = ConsoleUI(input_stream=io.StringIO("4\n"), output_stream=output)
    ui.show_board(Board())
    line = ui.read_line("> ")
    print(f"  Read line: {line!r}")
    assert line == "4"
    assert ui.read_line("> ") is None

    ui.show_result(Board.from_string("XOX XOO OXX"), Mark.X)
    assert "Tie!" in output.getvalue()
    print("  ✓ Console UI OK")


def run_all_tests():
    """Run every check above and print a summary. Returns the exit code."""
    checks = [
        ("Game Config", test_game_config),
        ("Game Logic", test_game_logic),
        ("AI", test_ai),
        ("Console UI", test_console_ui),
    ]

    print("TicTacToe - Module Tests")

    failed = []
    for name, check in checks:
        try:
            check()
        except Exception:
            print(f"  ✗ {name} FAILED")
            traceback.print_exc()
            failed.append(name)

    print(f"\n{len(checks) - len(failed)}/{len(checks)} checks passed")
    if failed:
        print(f"Failed: {', '.join(failed)}")
        return 1

    print("Ready to play TicTacToe.")
    return 0


if __name__ == "__main__":
    sys.exit(run_all_tests())
