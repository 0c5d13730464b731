"""
Game configuration for console TicTacToe.
All the settings for the board, the solver and the console front end.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Command line flags in main.py override the defaults below.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells numbered 0-8 row by row
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE

    # Symbols used when printing marks
    FIRST_SYMBOL = "X"
    SECOND_SYMBOL = "O"

    # Characters accepted for an empty cell in Board.from_string(), besides digits
    EMPTY_SYMBOLS = "._-"

    # ==================== SOLVER SETTINGS ====================
    # Reuse results for positions reached by different move orders
    USE_MEMO = True

    # Print how many positions the solver looked at after each move
    VERBOSE = False

    # ==================== CONSOLE SETTINGS ====================
    # Which mark the human plays by default (X always moves first)
    HUMAN_SYMBOL = FIRST_SYMBOL

    PROMPT = "Your move [0-8]: "
    INVALID_MOVE_MESSAGE = "Invalid move."
    BANNER_WIDTH = 60
