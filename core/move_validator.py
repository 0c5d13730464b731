"""
Move validator for TicTacToe.
Explains why a move is rejected so the player can be asked again.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import Board


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    index: Optional[int] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be a cell number (0-8)
    3. Can only place on empty cells
    """

    def parse_move(self, text: str) -> ValidationResult:
        """
        Turn a line of user input into a cell index.

        Args:
            text: Raw input, e.g. "4\\n".

        Returns:
            ValidationResult with the parsed index, or an error if the
            input is not a whole number.
        """
        stripped = text.strip()
        try:
            index = int(stripped)
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"Not a cell number: {stripped!r}"
            )
        return ValidationResult(is_valid=True, index=index)

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place the next mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        error = board.check_move(index)
        if error is not None:
            return ValidationResult(is_valid=False, error_message=error, index=index)

        return ValidationResult(is_valid=True, index=index)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves for the player to move.

        Returns:
            List of cell indices, empty once the game is over.
        """
        if board.is_game_over:
            return []
        return board.empty_cells()


# Quick test
if __name__ == "__main__":
    print("Testing MoveValidator...")

    board = Board()
    validator = MoveValidator()

    # Test valid move
    result = validator.validate_move(board, 4)
    print(f"Move 4: valid={result.is_valid}, error={result.error_message}")

    # Make the move
    board.place(4)

    # Test invalid move (same cell)
    result = validator.validate_move(board, 4)
    print(f"Move 4 again: valid={result.is_valid}, error={result.error_message}")

    # Test out of range
    result = validator.validate_move(board, 9)
    print(f"Move 9: valid={result.is_valid}, error={result.error_message}")

    # Test junk input
    result = validator.parse_move("four")
    print(f"Input 'four': valid={result.is_valid}, error={result.error_message}")

    print(f"Valid moves: {validator.get_valid_moves(board)}")

    print("\nMoveValidator test done!")
