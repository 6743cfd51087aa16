"""
Winnability check for the TicTacToe engine.
Answers whether anyone can still win from a position.
"""

from typing import Optional

from .board import BoardState
from .move_generator import MoveGenerator, board_order
from .win_checker import WinChecker


class WinnabilityOracle:
    """
    Decides if a position can still end in a win for either player.

    Once no sequence of moves leads to a win the game is a forced draw,
    so the game loop can stop before the board is full.
    """

    def __init__(self, move_generator: Optional[MoveGenerator] = None):
        """
        Initialize the oracle.

        Args:
            move_generator: Generator used to walk the game tree. The order
                of moves doesn't change the answer, so board order is used
                by default.
        """
        self.move_generator = move_generator or MoveGenerator(ordering=board_order)
        self.win_checker = WinChecker()

        # How many positions the last check visited (for debugging)
        self.positions_visited = 0

    def is_winnable(self, state: BoardState) -> bool:
        """
        Check if any continuation from `state` ends in a win.

        Args:
            state: Position to check.

        Returns:
            True if the position is already won or some line of play
            still leads to a win, False if only draws remain.
        """
        self.positions_visited = 0
        return self._search(state)

    def _search(self, state: BoardState) -> bool:
        self.positions_visited += 1

        if self.win_checker.check_winner(state).is_decisive:
            return True

        children = self.move_generator.next_states(state)

        if not children:
            return False  # Full board, no line

        return any(self._search(child) for child in children)
