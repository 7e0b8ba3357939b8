"""Rendering helpers shared by the front-ends."""

from __future__ import annotations

from typing import List, Optional

from .game_state import UIState
from .tetromino import Colour


def render_grid(state: UIState) -> List[List[Optional[Colour]]]:
    """Return a copy of the board with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw.
    The active piece is drawn on top of whatever the board holds at the same
    cells.
    """

    grid = [row[:] for row in state.board]
    if state.tetromino_blocks is not None and state.tetromino_colour is not None:
        height = len(grid)
        width = len(grid[0]) if grid else 0
        for x, y in state.tetromino_blocks:
            if 0 <= y < height and 0 <= x < width:
                grid[y][x] = state.tetromino_colour
    return grid


def title(state: UIState) -> str:
    if state.game_over:
        return f"GAME OVER! Final score: {state.score}"
    return f"TETRIS! Score: {state.score}"


def render_ascii(state: UIState) -> str:
    """Return a text frame: a title line then one character per cell.

    Empty cells are ``.``; filled cells show the first letter of their colour.
    """

    lines = [title(state)]
    for row in render_grid(state):
        lines.append("".join(cell.name[0] if cell else "." for cell in row))
    return "\n".join(lines)
