"""Integer board coordinates."""

from __future__ import annotations

from typing import NamedTuple


class Position(NamedTuple):
    """An ``(x, y)`` pair where ``x`` is the column and ``y`` the row.

    The same type is used for absolute board coordinates and for offsets
    relative to a piece's bounding box, so it supports vector addition.
    Row ``0`` is the top of the board.
    """

    x: int
    y: int

    def __add__(self, other: "Position") -> "Position":  # type: ignore[override]
        return Position(self.x + other.x, self.y + other.y)
