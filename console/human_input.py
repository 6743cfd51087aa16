"""
Human input for the TicTacToe console.
Reads the human's mark and moves from the terminal.
"""

import sys
from typing import Callable, Optional, TextIO

from engine.board import BoardState, Mark
from engine.move_generator import MoveGenerator
from .config import ConsoleConfig


class HumanInput:
    """
    Asks the human for input and keeps asking until it is usable.

    Bad lines never raise; they print a message and re-prompt.
    """

    def __init__(
        self,
        move_generator: MoveGenerator,
        config: Optional[ConsoleConfig] = None,
        input_func: Callable[[], str] = input,
        stream: Optional[TextIO] = None
    ):
        """
        Initialize human input.

        Args:
            move_generator: Used to validate and apply the human's moves.
            config: Console settings (default: ConsoleConfig()).
            input_func: Returns the next line typed by the human.
            stream: Where prompts and errors go (default: sys.stdout).
        """
        self.move_generator = move_generator
        self.config = config or ConsoleConfig()
        self.input_func = input_func
        self.stream = stream or sys.stdout

    def read_mark(self) -> Mark:
        """
        Ask which mark the human wants to play.

        Returns:
            Mark.O if the human typed "O", otherwise Mark.X.
        """
        print(self.config.PLAYER_PROMPT, file=self.stream)
        choice = self.input_func().strip().upper()

        if choice == Mark.O.value:
            return Mark.O
        return Mark.X

    def read_move(self, state: BoardState) -> BoardState:
        """
        Ask for a cell until a legal one is given, then play it.

        Args:
            state: Current position (must not be finished).

        Returns:
            The position after the human's move.
        """
        while True:
            print(self.config.MOVE_PROMPT, file=self.stream)
            index = self._parse_index(self.input_func())

            if index is None:
                print(self.config.INVALID_INPUT_MESSAGE, file=self.stream)
                continue

            result = self.move_generator.validate_move(state, index)
            if not result.is_valid:
                print(
                    f"{self.config.ILLEGAL_MOVE_MESSAGE}: {result.error_message}",
                    file=self.stream
                )
                print(
                    f"Legal moves: {self.move_generator.legal_moves(state)}",
                    file=self.stream
                )
                continue

            return self.move_generator.apply_move(state, index)

    def _parse_index(self, line: str) -> Optional[int]:
        """Turn a typed line into a cell index, or None if it isn't one."""
        try:
            index = int(line.strip())
        except ValueError:
            return None

        # Cell indices are never negative
        if index < 0:
            return None
        return index
