"""
Engine module for TicTacToe.
Handles board state, rules, and the minimax AI opponent.
"""

from .board import BoardState, Mark, Outcome
from .config import SearchConfig
from .move_generator import (
    MoveGenerator,
    ValidationResult,
    partition_shuffle,
    uniform_shuffle,
    board_order,
)
from .win_checker import WinChecker
from .winnability import WinnabilityOracle
from .ai_player import AIPlayer, SearchNode

__version__ = "1.0.0"
