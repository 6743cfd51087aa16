"""
Move generation for the TicTacToe engine.
Lists the legal next positions and validates human moves.
"""

from typing import Callable, Dict, List, Optional
from dataclasses import dataclass

import numpy as np

from .board import BoardState, Mark, BOARD_CELLS
from .config import SearchConfig
from .win_checker import WinChecker


# An ordering takes the candidate positions (in board order) and a random
# generator, and returns the same positions in the order to search them.
MoveOrdering = Callable[[List[BoardState], np.random.Generator], List[BoardState]]


def partition_shuffle(
    candidates: List[BoardState],
    rng: np.random.Generator
) -> List[BoardState]:
    """
    Split the candidates into two buckets at random and join them.

    Each candidate lands in either bucket with probability 1/2, and the
    first bucket is emitted before the second. Candidates in the same
    bucket keep their board order, so this is not a uniform shuffle.
    """
    first = []
    second = []

    for candidate in candidates:
        if rng.integers(0, 2) == 0:
            first.append(candidate)
        else:
            second.append(candidate)

    return first + second


def uniform_shuffle(
    candidates: List[BoardState],
    rng: np.random.Generator
) -> List[BoardState]:
    """Uniformly random permutation of the candidates."""
    return [candidates[i] for i in rng.permutation(len(candidates))]


def board_order(
    candidates: List[BoardState],
    rng: np.random.Generator
) -> List[BoardState]:
    """Leave the candidates in board order."""
    return list(candidates)


ORDERINGS: Dict[str, MoveOrdering] = {
    "partition": partition_shuffle,
    "uniform": uniform_shuffle,
    "board": board_order,
}


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveGenerator:
    """
    Produces the positions reachable in one move.

    Rules:
    1. Can only place on empty cells
    2. The mover is always derived from the board (X first, then alternate)
    3. A finished game has no moves
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        ordering: Optional[MoveOrdering] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize the move generator.

        Args:
            config: Search settings (default: SearchConfig()).
            ordering: Move ordering function. Overrides config.MOVE_ORDERING.
            rng: Random generator for the ordering. Overrides config.RANDOM_SEED.
        """
        self.config = config or SearchConfig()
        self.win_checker = WinChecker()

        if ordering is None:
            if self.config.MOVE_ORDERING not in ORDERINGS:
                raise ValueError(
                    f"Unknown move ordering: {self.config.MOVE_ORDERING!r}"
                )
            ordering = ORDERINGS[self.config.MOVE_ORDERING]
        self.ordering = ordering

        self.rng = rng if rng is not None else np.random.default_rng(self.config.RANDOM_SEED)

    def next_states(self, state: BoardState) -> List[BoardState]:
        """
        Get every position one move away.

        Args:
            state: Current position.

        Returns:
            The child positions in search order, or an empty list if the
            game is already decided.
        """
        if self.win_checker.check_winner(state).is_over:
            return []

        mover = state.whose_turn()
        candidates = [state.place(i, mover) for i in state.get_empty_cells()]

        return self.ordering(candidates, self.rng)

    def legal_moves(self, state: BoardState) -> List[int]:
        """
        Get all legal cell indices for the current player.

        Returns:
            Cell indices in board order, empty if the game is over.
        """
        if self.win_checker.check_winner(state).is_over:
            return []
        return state.get_empty_cells()

    def apply_move(self, state: BoardState, index: int) -> BoardState:
        """
        Place the current mover's mark at `index`.

        The index is not checked here; call validate_move first.
        """
        return state.place(index, state.whose_turn())

    def validate_move(self, state: BoardState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            state: Current position.
            index: Cell to place a mark in (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if self.win_checker.check_winner(state).is_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not (0 <= index < BOARD_CELLS):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index}. Must be 0-{BOARD_CELLS - 1}."
            )

        # Check if cell is empty
        if state[index] != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {state[index].value}"
            )

        return ValidationResult(is_valid=True)


# Quick test
if __name__ == "__main__":
    print("Testing MoveGenerator...")

    generator = MoveGenerator(rng=np.random.default_rng(0))
    state = BoardState.from_string("XX.OO....")

    for child in generator.next_states(state):
        print(child)

    print(generator.validate_move(state, 0))
    print(generator.validate_move(state, 12))
    print(generator.validate_move(state, 2))

    print("\nMoveGenerator test done!")
