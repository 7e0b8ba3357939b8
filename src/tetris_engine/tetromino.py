"""Tetromino definitions.

This module only holds the data describing a falling piece.  Geometry (which
cells a piece covers and how it rotates) lives in :mod:`tetris_engine.rules`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .positions import Position


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


class Orientation(str, Enum):
    """The four rotation states of a piece, in clockwise order."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def steps(self) -> int:
        """Number of 90 degree clockwise turns from :attr:`UP`."""

        return _ORIENTATIONS.index(self)

    def clockwise(self) -> "Orientation":
        return _ORIENTATIONS[(self.steps + 1) % 4]

    def anticlockwise(self) -> "Orientation":
        return _ORIENTATIONS[(self.steps - 1) % 4]


_ORIENTATIONS = list(Orientation)


class Colour(str, Enum):
    """Display colour carried by pieces and filled cells."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    CYAN = "cyan"
    MAGENTA = "magenta"


@dataclass(frozen=True)
class Tetromino:
    """Active falling piece in the game.

    ``box_corner`` is the top-left cell of the piece's square bounding box and
    is the only positional state a piece has.  Instances are immutable; moves
    and rotations produce new pieces.
    """

    shape: TetrominoType
    orientation: Orientation = Orientation.UP
    colour: Colour = Colour.RED
    box_corner: Position = Position(0, 0)
