"""
Console configuration for TicTacToe.
Colors, prompts and messages for the terminal interface.
"""

from colorama import Fore


class ConsoleConfig:
    """
    Configuration class for console settings.
    Change these values to suit your terminal!
    """

    # ==================== COLOR SETTINGS ====================
    USE_COLOR = True
    EMPTY_CELL_COLOR = Fore.MAGENTA  # Index shown in empty cells
    WIN_LINE_COLOR = Fore.GREEN      # Marks on the winning line

    # ==================== SCREEN SETTINGS ====================
    # Clear the terminal before drawing the board
    CLEAR_SCREEN = True
    CLEAR_SEQUENCE = "\033[2J\033[1;1H"

    # ==================== PROMPTS ====================
    PLAYER_PROMPT = "Enter player (X,O)"
    MOVE_PROMPT = "Enter index for next move: "
    INVALID_INPUT_MESSAGE = "Invalid input"
    ILLEGAL_MOVE_MESSAGE = "Illegal move"
    AI_MOVE_MESSAGE = ">>> AI places {mark} at {index}"

    # ==================== RESULTS ====================
    RESULT_X_WINS = "X wins"
    RESULT_O_WINS = "O wins"
    RESULT_DRAW = "draw"
    RESULT_NOT_WINNABLE = "draw (not winnable)"
