"""Rotation and movement rules for tetrominoes.

Cell layouts follow the Super Rotation System.  Each shape is described once in
its spawn (``UP``) orientation using coordinates local to the piece's square
bounding box; the other three orientations are derived by turning every offset
90 degrees clockwise inside that box.  Wall kicks are looked up in the fixed
tables below, keyed by ``(from_orientation, to_orientation)``.

Every function here is pure: pieces are returned, never mutated, and nothing
consults the board.  Validating a candidate is the caller's job.
"""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Dict, List, Tuple

from .positions import Position
from .tetromino import Colour, Orientation, Tetromino, TetrominoType

Blocks = Tuple[Position, Position, Position, Position]
KickTable = Dict[Tuple[Orientation, Orientation], Tuple[Position, ...]]

UP, RIGHT, DOWN, LEFT = Orientation.UP, Orientation.RIGHT, Orientation.DOWN, Orientation.LEFT


# Spawn orientation layouts in box-local ``(x, y)`` coordinates.
BASE_OFFSETS: Dict[TetrominoType, Blocks] = {
    TetrominoType.I: (Position(0, 1), Position(1, 1), Position(2, 1), Position(3, 1)),
    TetrominoType.J: (Position(0, 0), Position(0, 1), Position(1, 1), Position(2, 1)),
    TetrominoType.L: (Position(0, 1), Position(1, 1), Position(2, 1), Position(2, 0)),
    TetrominoType.O: (Position(0, 0), Position(0, 1), Position(1, 0), Position(1, 1)),
    TetrominoType.S: (Position(0, 1), Position(1, 1), Position(1, 0), Position(2, 0)),
    TetrominoType.T: (Position(0, 1), Position(1, 1), Position(1, 0), Position(2, 1)),
    TetrominoType.Z: (Position(0, 0), Position(1, 0), Position(1, 1), Position(2, 1)),
}

JLSTZ_KICKS: KickTable = {
    (UP, RIGHT): (Position(-1, 0), Position(-1, 1), Position(0, -2), Position(-1, -2)),
    (RIGHT, UP): (Position(1, 0), Position(1, -1), Position(0, -2), Position(1, 2)),
    (RIGHT, DOWN): (Position(1, 0), Position(1, -1), Position(0, 2), Position(1, 2)),
    (DOWN, RIGHT): (Position(-1, 0), Position(-1, 1), Position(0, -2), Position(-1, -2)),
    (DOWN, LEFT): (Position(1, 0), Position(1, 1), Position(0, -2), Position(1, -2)),
    (LEFT, DOWN): (Position(-1, 0), Position(-1, -1), Position(0, -2), Position(-1, 2)),
    (LEFT, UP): (Position(-1, 0), Position(-1, -1), Position(0, 2), Position(-1, 2)),
    (UP, LEFT): (Position(1, 0), Position(1, 1), Position(0, -2), Position(1, -2)),
}

I_KICKS: KickTable = {
    (UP, RIGHT): (Position(-2, 0), Position(1, 0), Position(-2, -1), Position(1, 2)),
    (RIGHT, UP): (Position(2, 0), Position(-1, 0), Position(2, 1), Position(-1, -2)),
    (RIGHT, DOWN): (Position(-1, 0), Position(2, 0), Position(-1, 2), Position(2, -1)),
    (DOWN, RIGHT): (Position(1, 0), Position(-2, 0), Position(1, -2), Position(-2, 1)),
    (DOWN, LEFT): (Position(2, 0), Position(-1, 0), Position(2, 1), Position(-1, -2)),
    (LEFT, DOWN): (Position(-2, 0), Position(1, 0), Position(-2, -1), Position(1, 2)),
    (LEFT, UP): (Position(1, 0), Position(-2, 0), Position(1, -2), Position(-2, 1)),
    (UP, LEFT): (Position(-1, 0), Position(2, 0), Position(-1, 2), Position(2, -1)),
}

_NO_KICKS: Tuple[Position, ...] = ()


def box_size(shape: TetrominoType) -> int:
    """Return the side length of ``shape``'s square bounding box."""

    if shape is TetrominoType.I:
        return 4
    if shape is TetrominoType.O:
        return 2
    return 3


def rotate_offset_90(pos: Position, size: int) -> Position:
    """Turn a box-local offset 90 degrees clockwise inside a ``size`` box."""

    return Position(size - pos.y - 1, pos.x)


def rotate_offset(pos: Position, steps: int, size: int) -> Position:
    """Apply :func:`rotate_offset_90` ``steps`` times (``0`` to ``3``)."""

    for _ in range(steps):
        pos = rotate_offset_90(pos, size)
    return pos


def _generate_offsets() -> Dict[Tuple[TetrominoType, Orientation], Blocks]:
    """Derive the layout of every shape in every orientation."""

    table: Dict[Tuple[TetrominoType, Orientation], Blocks] = {}
    for shape, base in BASE_OFFSETS.items():
        size = box_size(shape)
        for orientation in Orientation:
            table[shape, orientation] = tuple(  # type: ignore[assignment]
                rotate_offset(pos, orientation.steps, size) for pos in base
            )
    return table


OFFSETS: Dict[Tuple[TetrominoType, Orientation], Blocks] = _generate_offsets()


def shape_blocks(shape: TetrominoType, orientation: Orientation) -> Blocks:
    """Return the box-local offsets for ``shape`` at ``orientation``.

    Raises:
        KeyError: If the pair is not in the table.  This can only happen when
            called with values that are not members of the enumerations.
    """

    return OFFSETS[shape, orientation]


def blocks(tetromino: Tetromino) -> Blocks:
    """Return the absolute board cells covered by ``tetromino``."""

    corner = tetromino.box_corner
    return tuple(  # type: ignore[return-value]
        corner + offset for offset in shape_blocks(tetromino.shape, tetromino.orientation)
    )


def kicks(tetromino: Tetromino, new_orientation: Orientation) -> Tuple[Position, ...]:
    """Return the ordered wall kick offsets for turning to ``new_orientation``."""

    if tetromino.shape is TetrominoType.O:
        return _NO_KICKS
    table = I_KICKS if tetromino.shape is TetrominoType.I else JLSTZ_KICKS
    return table.get((tetromino.orientation, new_orientation), _NO_KICKS)


def candidate_rotations(tetromino: Tetromino, new_orientation: Orientation) -> List[Tetromino]:
    """Return the placements to try when rotating to ``new_orientation``.

    The first candidate is the in-place rotation.  It is followed by one
    candidate per wall kick, in table order.  Callers must accept the first
    candidate that fits on the board; if none fit the rotation is rejected.
    """

    basic = replace(tetromino, orientation=new_orientation)
    candidates = [basic]
    for kick in kicks(tetromino, new_orientation):
        candidates.append(replace(basic, box_corner=basic.box_corner + kick))
    return candidates


def translate(tetromino: Tetromino, dx: int, dy: int) -> Tetromino:
    """Return ``tetromino`` shifted by ``dx`` columns and ``dy`` rows."""

    return replace(tetromino, box_corner=tetromino.box_corner + Position(dx, dy))


def move_down(tetromino: Tetromino) -> Tetromino:
    return translate(tetromino, 0, 1)


def move_left(tetromino: Tetromino) -> Tetromino:
    return translate(tetromino, -1, 0)


def move_right(tetromino: Tetromino) -> Tetromino:
    return translate(tetromino, 1, 0)


def reroll(tetromino: Tetromino, rng: random.Random) -> Tetromino:
    """Return ``tetromino`` with a freshly drawn shape and colour.

    Orientation and position are kept so the new piece appears in place.
    """

    return replace(
        tetromino,
        shape=rng.choice(list(TetrominoType)),
        colour=rng.choice(list(Colour)),
    )
