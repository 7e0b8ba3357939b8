from __future__ import annotations

from tetris_engine.game_state import UIState
from tetris_engine.positions import Position
from tetris_engine.tetromino import Colour
from tetris_engine.utils import render_ascii, render_grid


def _ui(**kwargs) -> UIState:
    board = [[None] * 4 for _ in range(3)]
    board[2] = [Colour.RED, Colour.RED, None, Colour.BLUE]
    defaults = dict(
        board=board,
        tetromino_blocks=None,
        tetromino_colour=None,
        game_over=False,
        score=0,
    )
    defaults.update(kwargs)
    return UIState(**defaults)


def test_render_grid_without_active_piece_copies_board() -> None:
    ui = _ui()
    grid = render_grid(ui)
    assert grid == ui.board
    grid[0][0] = Colour.GREEN
    assert ui.board[0][0] is None


def test_active_piece_is_drawn_on_top() -> None:
    blocks = (Position(0, 1), Position(1, 1), Position(1, 2), Position(2, 2))
    ui = _ui(tetromino_blocks=blocks, tetromino_colour=Colour.YELLOW)
    grid = render_grid(ui)
    assert grid[1][:2] == [Colour.YELLOW, Colour.YELLOW]
    assert grid[2] == [Colour.RED, Colour.YELLOW, Colour.YELLOW, Colour.BLUE]
    assert ui.board[2][1] is Colour.RED


def test_render_ascii_frame() -> None:
    blocks = (Position(0, 0), Position(1, 0), Position(2, 0), Position(3, 0))
    ui = _ui(tetromino_blocks=blocks, tetromino_colour=Colour.CYAN, score=40)
    assert render_ascii(ui).splitlines() == [
        "TETRIS! Score: 40",
        "CCCC",
        "....",
        "RR.B",
    ]


def test_render_ascii_game_over_title() -> None:
    ui = _ui(game_over=True, score=1200)
    assert render_ascii(ui).splitlines()[0] == "GAME OVER! Final score: 1200"
