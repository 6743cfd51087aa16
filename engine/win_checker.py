"""
Win checker for the TicTacToe engine.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple
from .board import BoardState, Mark, Outcome


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, in the order they are checked.
    # The first completed line decides the winner.
    WINNING_LINES = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def check_winner(self, state: BoardState) -> Outcome:
        """
        Work out the outcome of a position.

        Args:
            state: The board to check.

        Returns:
            X_WINS / O_WINS for the first completed line, DRAW for a full
            board with no line, UNDETERMINED otherwise.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(state, line)
            if winner is not None:
                return Outcome.for_mark(winner)

        if Mark.EMPTY in state.cells:
            return Outcome.UNDETERMINED  # Game not finished

        return Outcome.DRAW

    def _check_line(
        self,
        state: BoardState,
        line: Tuple[int, int, int]
    ) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Returns:
            The winning Mark if all 3 cells hold it, None otherwise.
        """
        first = state[line[0]]
        if first == Mark.EMPTY:
            return None

        for index in line[1:]:
            if state[index] != first:
                return None

        return first

    def get_winning_line(self, state: BoardState) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            state: The board.

        Returns:
            The winning line as a tuple of cell indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(state, line) is not None:
                return line
        return None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    cases = [
        ("XXXOO....", Outcome.X_WINS),   # row
        ("XO.XO.X..", Outcome.X_WINS),   # column
        ("XXOXO.O..", Outcome.O_WINS),   # anti-diagonal
        ("XO..XO..X", Outcome.X_WINS),   # diagonal
        ("XX.OO....", Outcome.UNDETERMINED),
        ("XOXOXOOXO", Outcome.DRAW),
    ]

    for text, expected in cases:
        outcome = checker.check_winner(BoardState.from_string(text))
        print(f"{text}: {outcome.value}")
        assert outcome == expected

    print("\nWinChecker test done!")
