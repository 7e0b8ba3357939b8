from __future__ import annotations

from tetris_engine.positions import Position
from tetris_engine.spawner import SPAWN_COLUMN, Spawner
from tetris_engine.tetromino import Colour, Orientation, TetrominoType


def test_pieces_spawn_at_fixed_corner() -> None:
    spawner = Spawner(seed=0)
    for _ in range(20):
        assert spawner.spawn().box_corner == Position(SPAWN_COLUMN, 0)
    assert SPAWN_COLUMN == 5


def test_seeded_spawners_repeat_sequence() -> None:
    a = Spawner(seed=123)
    b = Spawner(seed=123)
    assert [a.spawn() for _ in range(30)] == [b.spawn() for _ in range(30)]


def test_draws_cover_every_kind_colour_and_orientation() -> None:
    spawner = Spawner(seed=5)
    pieces = [spawner.spawn() for _ in range(500)]
    assert {p.shape for p in pieces} == set(TetrominoType)
    assert {p.colour for p in pieces} == set(Colour)
    assert {p.orientation for p in pieces} == set(Orientation)
