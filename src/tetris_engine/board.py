"""Board representation for the Tetris playfield."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import numpy as np
from numpy.typing import NDArray

from .positions import Position
from .tetromino import Colour


# Dimensions of the standard Tetris board.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.uint8]
Snapshot = List[List[Optional[Colour]]]

# Mapping from ``Colour`` to the integer stored in the grid.  The specific
# numeric values are not important as long as ``0`` represents an empty cell.
COLOUR_VALUES: Dict[Colour, int] = {c: i + 1 for i, c in enumerate(Colour)}
VALUE_COLOURS: Dict[int, Optional[Colour]] = {0: None, **{v: c for c, v in COLOUR_VALUES.items()}}


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Tetris board holding the filled cells.

    The grid is indexed ``[row, col]`` with row ``0`` at the top.  Its shape is
    fixed at construction; clearing rows keeps the row count constant.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(width, height)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get_cell(self, row: int, col: int) -> Optional[Colour]:
        """Safely return the colour at ``(row, col)`` or ``None`` if empty.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(row, col):
            return VALUE_COLOURS[int(self.grid[row, col])]
        raise IndexError("Cell out of bounds")

    def set_cell(self, row: int, col: int, colour: Optional[Colour]) -> None:
        """Safely set the colour at ``(row, col)``; ``None`` empties the cell.

        Pieces are committed through :meth:`add_blocks`; this is for laying out
        a board directly, e.g. a preset position in tests.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(row, col):
            self.grid[row, col] = np.uint8(COLOUR_VALUES[colour] if colour else 0)
        else:
            raise IndexError("Cell out of bounds")

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is empty.

        Any coordinates outside the board are treated as occupied.  This makes
        collision detection simpler as off-board positions are automatically
        rejected.
        """

        if self.in_bounds(row, col):
            return bool(self.grid[row, col] == 0)
        return False

    def valid_position(self, blocks: Iterable[Position]) -> bool:
        """Return ``True`` if every block is on the board and unfilled."""

        return all(self.is_empty(block.y, block.x) for block in blocks)

    def add_blocks(self, blocks: Iterable[Position], colour: Colour) -> int:
        """Fill ``blocks`` with ``colour``, then clear completed rows.

        Returns the number of rows removed.

        Raises:
            IndexError: If any block lies outside the board.  Nothing is
                written in that case.
        """

        coordinates = np.asarray([(b.y, b.x) for b in blocks], dtype=np.int16)
        rows, cols = coordinates.T
        if (
            np.any(rows < 0)
            or np.any(rows >= self.height)
            or np.any(cols < 0)
            or np.any(cols >= self.width)
        ):
            raise IndexError("Block out of bounds")

        self.grid[rows, cols] = np.uint8(COLOUR_VALUES[colour])
        return self.clear_full_rows()

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed."""

        full_rows = np.all(self.grid != 0, axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.grid[~full_rows]
            new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
            self.grid = np.vstack((new_rows, remaining))
        return cleared

    def snapshot(self) -> Snapshot:
        """Return a copy of the grid as rows of optional colours."""

        return [[self.get_cell(r, c) for c in range(self.width)] for r in range(self.height)]
