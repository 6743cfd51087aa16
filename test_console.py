"""
Tests for the TicTacToe console and game loop.
Human input is scripted and output goes to a StringIO buffer.
"""

import io
import itertools

import numpy as np
import pytest

from engine.board import BoardState, Mark
from engine.move_generator import MoveGenerator, board_order
from console.config import ConsoleConfig
from console.renderer import BoardRenderer
from console.human_input import HumanInput
from main import TicTacToeGame


class PlainConfig(ConsoleConfig):
    """No colors and no screen clearing, so output is easy to compare."""
    USE_COLOR = False
    CLEAR_SCREEN = False


def scripted(lines):
    """An input function that returns the given lines in order."""
    iterator = iter(lines)
    return lambda: next(iterator)


def cycling_cells():
    """Keeps offering cells 0-8; illegal ones get re-prompted."""
    return scripted(itertools.cycle(str(i) for i in range(9)))


def make_game(lines_or_func, seed=0):
    stream = io.StringIO()
    input_func = lines_or_func if callable(lines_or_func) else scripted(lines_or_func)
    game = TicTacToeGame(
        console_config=PlainConfig(),
        move_generator=MoveGenerator(rng=np.random.default_rng(seed)),
        input_func=input_func,
        stream=stream,
    )
    return game, stream


# ==================== RENDERER ====================

def test_render_shows_indices_for_empty_cells():
    renderer = BoardRenderer(PlainConfig(), io.StringIO())
    text = renderer.render(BoardState.from_string("X...O...."))
    assert text == "X|1|2\n3|O|5\n6|7|8\n"


def test_render_colors_empty_cells():
    renderer = BoardRenderer(ConsoleConfig(), io.StringIO())
    text = renderer.render(BoardState.from_string("X........"))
    assert ConsoleConfig.EMPTY_CELL_COLOR + "1" in text


def test_render_highlights_winning_line():
    renderer = BoardRenderer(ConsoleConfig(), io.StringIO())
    text = renderer.render(BoardState.from_string("XXXOO...."))
    assert text.count(ConsoleConfig.WIN_LINE_COLOR + "X") == 3


def test_show_clears_screen():
    stream = io.StringIO()
    renderer = BoardRenderer(ConsoleConfig(), stream)
    renderer.show(BoardState.empty())
    assert stream.getvalue().startswith(ConsoleConfig.CLEAR_SEQUENCE)


# ==================== HUMAN INPUT ====================

def make_input(lines):
    stream = io.StringIO()
    human = HumanInput(
        MoveGenerator(ordering=board_order),
        PlainConfig(),
        input_func=scripted(lines),
        stream=stream,
    )
    return human, stream


@pytest.mark.parametrize("line, expected", [
    ("O", Mark.O),
    (" o \n", Mark.O),
    ("X", Mark.X),
    ("", Mark.X),
    ("banana", Mark.X),
])
def test_read_mark(line, expected):
    human, _ = make_input([line])
    assert human.read_mark() == expected


def test_read_move_places_current_mark():
    human, _ = make_input(["4"])
    state = human.read_move(BoardState.from_string("X........"))
    assert state == BoardState.from_string("X...O....")


def test_read_move_retries_until_legal():
    human, stream = make_input(["abc", "9", "0", "-1", " 5 "])
    state = human.read_move(BoardState.from_string("X........"))

    output = stream.getvalue()
    assert state[5] == Mark.O
    assert output.count("Invalid input") == 2
    assert output.count("Illegal move") == 2


def test_negative_index_is_invalid_input():
    human, stream = make_input(["-3", "1"])
    human.read_move(BoardState.from_string("X........"))

    output = stream.getvalue()
    assert "Invalid input" in output
    assert "Illegal move" not in output


def test_illegal_move_explains_why():
    human, stream = make_input(["0", "12", "4"])
    human.read_move(BoardState.from_string("X........"))

    output = stream.getvalue()
    assert "Illegal move: Cell 0 is already occupied by X" in output
    assert "Illegal move: Invalid position 12. Must be 0-8." in output
    assert output.count("Legal moves: [1, 2, 3, 4, 5, 6, 7, 8]") == 2


# ==================== GAME LOOP ====================

def test_human_cannot_beat_the_ai():
    game, stream = make_game(itertools.chain(["X"], itertools.cycle(str(i) for i in range(9))).__next__)

    result = game.start()

    assert result in ("O wins", "draw", "draw (not winnable)")
    assert stream.getvalue().rstrip().endswith(result)


def test_ai_moves_first_when_human_plays_o():
    game, _ = make_game(itertools.chain(["O"], itertools.cycle(str(i) for i in range(9))).__next__)

    result = game.start()

    assert game.human_player == Mark.O
    assert result in ("X wins", "draw", "draw (not winnable)")


def test_game_stops_when_nobody_can_win():
    game, _ = make_game(cycling_cells())
    game.state = BoardState.from_string("XOXXOOOX.")

    assert not game.is_running()
    assert game.result_text() == "draw (not winnable)"


def test_result_text():
    game, _ = make_game([])

    game.state = BoardState.from_string("XXXOO....")
    assert game.result_text() == "X wins"

    game.state = BoardState.from_string("XXOXO.O..")
    assert game.result_text() == "O wins"

    game.state = BoardState.from_string("XOXOXOOXO")
    assert game.result_text() == "draw"


def test_ai_move_returns_played_cell():
    game, _ = make_game([])
    game.state = BoardState.from_string("XX.OO....")

    assert game._ai_move() == 2
    assert game.state == BoardState.from_string("XXXOO....")


def test_ai_announces_its_move_after_the_board():
    game, stream = make_game([])
    game.human_player = Mark.O
    game.state = BoardState.from_string("XX.OO....")

    game._game_loop()

    output = stream.getvalue()
    assert game.state == BoardState.from_string("XXXOO....")
    assert output.rstrip().endswith(">>> AI places X at 2")
    assert output.index("X|X|X") < output.index(">>> AI places X at 2")


def test_ai_failure_is_fatal():
    game, _ = make_game([])
    game.state = BoardState.from_string("XXXOO....")

    with pytest.raises(RuntimeError):
        game._ai_move()
