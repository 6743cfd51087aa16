"""
Console module for TicTacToe.
Handles drawing the board and reading the human's moves.
"""

from .config import ConsoleConfig
from .renderer import BoardRenderer
from .human_input import HumanInput
