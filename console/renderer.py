"""
Board renderer for the TicTacToe console.
Draws the board in the terminal.
"""

import sys
from typing import Optional, TextIO

from colorama import Style

from engine.board import BoardState, Mark
from engine.win_checker import WinChecker
from .config import ConsoleConfig


class BoardRenderer:
    """
    Prints the board as a 3x3 grid.

    Empty cells show their index (so the human knows what to type),
    and the winning line is highlighted once the game is won.

        0|1|2
        3|X|5
        O|7|8
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        stream: Optional[TextIO] = None
    ):
        """
        Initialize the renderer.

        Args:
            config: Console settings (default: ConsoleConfig()).
            stream: Where to print (default: sys.stdout).
        """
        self.config = config or ConsoleConfig()
        self.stream = stream or sys.stdout
        self.win_checker = WinChecker()

    def clear(self):
        """Clear the terminal."""
        if self.config.CLEAR_SCREEN:
            print(self.config.CLEAR_SEQUENCE, end="", file=self.stream)

    def render(self, state: BoardState) -> str:
        """
        Build the text for a board.

        Args:
            state: Board to draw.

        Returns:
            Three lines, one per row, each ending with a newline.
        """
        winning_line = self.win_checker.get_winning_line(state) or ()

        lines = []
        for row in range(3):
            cells = []
            for col in range(3):
                index = row * 3 + col
                cells.append(self._format_cell(state[index], index, index in winning_line))
            lines.append("|".join(cells) + "\n")

        return "".join(lines)

    def show(self, state: BoardState):
        """Clear the screen and print the board."""
        self.clear()
        print(self.render(state), end="", file=self.stream)

    def _format_cell(self, mark: Mark, index: int, on_winning_line: bool) -> str:
        if mark == Mark.EMPTY:
            return self._colored(str(index), self.config.EMPTY_CELL_COLOR)
        if on_winning_line:
            return self._colored(mark.value, self.config.WIN_LINE_COLOR)
        return mark.value

    def _colored(self, text: str, color: str) -> str:
        if not self.config.USE_COLOR:
            return text
        return f"{color}{text}{Style.RESET_ALL}"
