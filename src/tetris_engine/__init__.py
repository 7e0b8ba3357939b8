"""A small Tetris engine with Super Rotation System wall kicks."""

from .board import Board
from .positions import Position
from .tetromino import Colour, Orientation, Tetromino, TetrominoType
from .rules import blocks, candidate_rotations, shape_blocks
from .spawner import Spawner
from .game_state import GameState, SessionStatus, UIState, score_for_lines
from .controller import Action, GameController
from .utils import render_ascii, render_grid

__all__ = [
    "Action",
    "Board",
    "Colour",
    "GameController",
    "GameState",
    "Orientation",
    "Position",
    "SessionStatus",
    "Spawner",
    "Tetromino",
    "TetrominoType",
    "UIState",
    "blocks",
    "candidate_rotations",
    "render_ascii",
    "render_grid",
    "score_for_lines",
    "shape_blocks",
]
