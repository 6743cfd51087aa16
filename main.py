"""
Main script for TicTacToe.

This script ties together:
- Engine (board state, win checking, minimax AI)
- Console (board rendering, human input)

Run this script to play TicTacToe against the computer!
"""

import sys
from typing import Callable, Optional, TextIO

import colorama

# Engine imports
from engine.board import BoardState, Mark, Outcome
from engine.config import SearchConfig
from engine.move_generator import MoveGenerator
from engine.win_checker import WinChecker
from engine.winnability import WinnabilityOracle
from engine.ai_player import AIPlayer

# Console imports
from console.config import ConsoleConfig
from console.renderer import BoardRenderer
from console.human_input import HumanInput


class TicTacToeGame:
    """
    Main controller for a game of human vs. AI.

    Game flow:
    1. Human picks X or O (X always moves first)
    2. Human and AI take turns placing marks
    3. The board is printed after every move
    4. Stop when someone wins or nobody can win any more
    """

    def __init__(
        self,
        search_config: Optional[SearchConfig] = None,
        console_config: Optional[ConsoleConfig] = None,
        move_generator: Optional[MoveGenerator] = None,
        input_func: Callable[[], str] = input,
        stream: Optional[TextIO] = None
    ):
        """
        Initialize the game.

        Args:
            search_config: Engine settings.
            console_config: Terminal settings.
            move_generator: Shared move generator (inject a seeded one for
                repeatable games).
            input_func: Returns the next line typed by the human.
            stream: Where the board and messages are printed.
        """
        self.search_config = search_config or SearchConfig()
        self.console_config = console_config or ConsoleConfig()
        self.stream = stream or sys.stdout

        # Initialize game logic
        self.move_generator = move_generator or MoveGenerator(self.search_config)
        self.win_checker = WinChecker()
        self.oracle = WinnabilityOracle()
        self.ai = AIPlayer(self.search_config, self.move_generator)

        # Initialize console
        self.renderer = BoardRenderer(self.console_config, self.stream)
        self.human = HumanInput(
            self.move_generator,
            self.console_config,
            input_func=input_func,
            stream=self.stream
        )

        # State tracking
        self.state = BoardState.empty()
        self.human_player = Mark.X

    def start(self) -> str:
        """
        Play a full game.

        Returns:
            The result line ("X wins", "O wins", "draw" or
            "draw (not winnable)").
        """
        self.renderer.clear()
        self.human_player = self.human.read_mark()

        self.renderer.show(self.state)
        self._game_loop()

        result = self.result_text()
        print(result, file=self.stream)
        return result

    def is_running(self) -> bool:
        """True while the game is undecided and someone can still win."""
        return (
            not self.win_checker.check_winner(self.state).is_over
            and self.oracle.is_winnable(self.state)
        )

    def _game_loop(self):
        """Main game loop."""
        while self.is_running():
            if self.state.whose_turn() == self.human_player:
                self.state = self.human.read_move(self.state)
                self.renderer.show(self.state)
            else:
                mark = self.state.whose_turn()
                index = self._ai_move()

                self.renderer.show(self.state)
                print(
                    self.console_config.AI_MOVE_MESSAGE.format(mark=mark.value, index=index),
                    file=self.stream
                )

    def _ai_move(self) -> int:
        """Let the AI play its move. Returns the cell it played."""
        index = self.ai.get_move_index(self.state)

        if index is None:
            raise RuntimeError("AI could not find a move!")

        self.state = self.move_generator.apply_move(self.state, index)
        return index

    def result_text(self) -> str:
        """Text describing how the game ended."""
        outcome = self.win_checker.check_winner(self.state)

        if outcome == Outcome.X_WINS:
            return self.console_config.RESULT_X_WINS
        if outcome == Outcome.O_WINS:
            return self.console_config.RESULT_O_WINS
        if outcome == Outcome.DRAW:
            return self.console_config.RESULT_DRAW
        return self.console_config.RESULT_NOT_WINNABLE


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Play TicTacToe against a minimax AI. "
                    "Enter cell indices 0-8 to place your mark."
    )
    parser.parse_args()

    colorama.init()

    game = TicTacToeGame()

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
        print("Goodbye!")


if __name__ == "__main__":
    main()
