"""
Board state for the TicTacToe engine.
Holds the 9 cells, the marks, and the game outcome types.
"""

from enum import Enum
from typing import List, Tuple
from dataclasses import dataclass


class Mark(Enum):
    """What a single cell can hold."""
    EMPTY = "."
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        return Mark.EMPTY


class Outcome(Enum):
    """Result of a board position."""
    X_WINS = "X wins"
    O_WINS = "O wins"
    DRAW = "draw"
    UNDETERMINED = "undetermined"

    @classmethod
    def for_mark(cls, mark: Mark) -> "Outcome":
        """Outcome for a line completed by `mark`."""
        return cls.X_WINS if mark == Mark.X else cls.O_WINS

    @property
    def winner(self) -> Mark:
        """The winning mark, or EMPTY for a draw / game in progress."""
        if self == Outcome.X_WINS:
            return Mark.X
        if self == Outcome.O_WINS:
            return Mark.O
        return Mark.EMPTY

    @property
    def is_decisive(self) -> bool:
        return self in (Outcome.X_WINS, Outcome.O_WINS)

    @property
    def is_over(self) -> bool:
        return self != Outcome.UNDETERMINED


BOARD_CELLS = 9

# Characters accepted by BoardState.from_string
_CHAR_TO_MARK = {
    "X": Mark.X,
    "O": Mark.O,
    ".": Mark.EMPTY,
    "-": Mark.EMPTY,
    " ": Mark.EMPTY,
}


@dataclass(frozen=True)
class BoardState:
    """
    An immutable 3x3 TicTacToe board.

    Cells are stored row-major:

         0 | 1 | 2
         3 | 4 | 5
         6 | 7 | 8

    Whose turn it is is never stored. It is derived from how many cells
    are occupied, so it can't drift out of sync with the board.
    """

    cells: Tuple[Mark, ...] = (Mark.EMPTY,) * BOARD_CELLS

    def __post_init__(self):
        if len(self.cells) != BOARD_CELLS:
            raise ValueError(
                f"A board has {BOARD_CELLS} cells, got {len(self.cells)}"
            )
        # Accept lists too, but always store a tuple
        object.__setattr__(self, "cells", tuple(self.cells))

    @classmethod
    def empty(cls) -> "BoardState":
        """The starting position."""
        return cls()

    @classmethod
    def from_string(cls, text: str) -> "BoardState":
        """
        Build a board from a compact string like "XX.OO....".

        Args:
            text: 9 characters, X / O for marks and '.', '-' or ' ' for empty.

        Returns:
            The matching BoardState.
        """
        cells = []
        for char in text.upper():
            if char not in _CHAR_TO_MARK:
                raise ValueError(f"Unknown cell character: {char!r}")
            cells.append(_CHAR_TO_MARK[char])
        return cls(tuple(cells))

    def __getitem__(self, index: int) -> Mark:
        return self.cells[index]

    def __iter__(self):
        return iter(self.cells)

    def __str__(self) -> str:
        return "".join(cell.value for cell in self.cells)

    def occupied_count(self) -> int:
        """How many cells hold a mark."""
        return sum(1 for cell in self.cells if cell != Mark.EMPTY)

    def whose_turn(self) -> Mark:
        """
        Work out who moves next.

        X always starts, so an even number of marks means X to move and
        an odd number means O. A full board has no mover (EMPTY).
        """
        placed = self.occupied_count()

        if placed == BOARD_CELLS:
            return Mark.EMPTY  # Game over
        if placed % 2 == 0:
            return Mark.X
        return Mark.O

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices, in board order.
        """
        return [i for i, cell in enumerate(self.cells) if cell == Mark.EMPTY]

    def place(self, index: int, mark: Mark) -> "BoardState":
        """Return a copy of the board with `mark` at `index`."""
        cells = list(self.cells)
        cells[index] = mark
        return BoardState(tuple(cells))


# Quick test
if __name__ == "__main__":
    print("Testing BoardState...")

    board = BoardState.empty()

    for index in (4, 0, 2, 6, 3):
        mover = board.whose_turn()
        print(f"{mover.value} moves to {index}")
        board = board.place(index, mover)
        print(board)

    assert board.whose_turn() == Mark.O
    print("\nBoardState test done!")
