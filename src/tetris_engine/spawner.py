"""Random piece supply."""

from __future__ import annotations

import random
from typing import Optional

from .positions import Position
from .tetromino import Colour, Orientation, Tetromino, TetrominoType


# Column of the box corner for every new piece.  Pieces always enter on row 0.
SPAWN_COLUMN = 5


class Spawner:
    """Draw new pieces uniformly at random.

    The spawner owns its own :class:`random.Random` so a seeded instance always
    produces the same sequence of pieces.
    """

    def __init__(self, seed: Optional[int] = None, *, column: int = SPAWN_COLUMN) -> None:
        self._rng = random.Random(seed)
        self.column = column

    def spawn(self) -> Tetromino:
        """Return a new piece of random shape, colour and orientation."""

        return Tetromino(
            shape=self._rng.choice(list(TetrominoType)),
            orientation=self._rng.choice(list(Orientation)),
            colour=self._rng.choice(list(Colour)),
            box_corner=Position(self.column, 0),
        )
