"""High level game state container.

:class:`GameState` is the only object that combines the board with the falling
piece.  Each public method performs one player action or one gravity tick and
returns once the state is consistent again.  Actions that would push the piece
off the board or into filled cells are ignored.

The class holds no lock.  Hosts that tick from one thread and handle input on
another must serialise calls themselves (see :mod:`tetris_engine.controller`).
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from . import rules
from .board import HEIGHT, WIDTH, Board, Snapshot
from .spawner import Spawner
from .tetromino import Colour, Orientation, Tetromino

logger = logging.getLogger(__name__)

# Points awarded for the number of rows cleared by a single lock-in.
LINE_SCORES = (0, 40, 100, 300, 1200)


def score_for_lines(lines: int) -> int:
    """Return the score for clearing ``lines`` rows at once.

    Raises:
        ValueError: If ``lines`` is outside ``0..4``.  A single piece spans at
            most four rows so any other count means the board is corrupt.
    """

    if not 0 <= lines < len(LINE_SCORES):
        raise ValueError(f"Invalid number of cleared lines: {lines}")
    return LINE_SCORES[lines]


class SessionStatus(str, Enum):
    FALLING = "falling"
    IDLE = "idle"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class UIState:
    """Read-only view of a session for renderers."""

    board: Snapshot
    tetromino_blocks: Optional[rules.Blocks]
    tetromino_colour: Optional[Colour]
    game_over: bool
    score: int


@dataclass
class GameState:
    """Mutable state for a Tetris game session."""

    board: Board = field(default_factory=Board)
    spawner: Spawner = field(default_factory=Spawner)
    rng: random.Random = field(default_factory=random.Random)
    active: Optional[Tetromino] = None
    score: int = 0
    game_over: bool = False

    @classmethod
    def create(
        cls, width: int = WIDTH, height: int = HEIGHT, *, seed: Optional[int] = None
    ) -> "GameState":
        """Return a fresh session on an empty ``width`` x ``height`` board.

        ``seed`` makes both the spawned pieces and the pieces drawn by
        :meth:`switch` reproducible.
        """

        return cls(
            board=Board(width, height),
            spawner=Spawner(seed),
            rng=random.Random(None if seed is None else seed + 1),
        )

    @property
    def status(self) -> SessionStatus:
        if self.game_over:
            return SessionStatus.GAME_OVER
        if self.active is None:
            return SessionStatus.IDLE
        return SessionStatus.FALLING

    def valid(self, tetromino: Tetromino) -> bool:
        """Return ``True`` if ``tetromino`` fits on the board."""

        return self.board.valid_position(rules.blocks(tetromino))

    def update(self) -> None:
        """Advance the game by one gravity tick.

        A falling piece moves down (or locks).  Without a falling piece a new
        one is spawned; if it does not fit the game is over.
        """

        if self.game_over:
            return

        if self.active is not None:
            self.move_down()
            return

        new = self.spawner.spawn()
        if self.valid(new):
            logger.info("Spawned %s", new)
            self.active = new
        else:
            logger.info("Game over. Final score: %d", self.score)
            self.game_over = True

    def move_down(self) -> None:
        """Move the piece down one row, locking it in place if blocked."""

        logger.debug("moving tetromino down")
        if self.active is None or self.game_over:
            return

        new = rules.move_down(self.active)
        if self.valid(new):
            self.active = new
            return

        self._lock(self.active)

    def _lock(self, tetromino: Tetromino) -> None:
        cleared = self.board.add_blocks(rules.blocks(tetromino), tetromino.colour)
        self.score += score_for_lines(cleared)
        self.active = None
        if cleared:
            logger.info("Cleared %d row(s). Score: %d", cleared, self.score)

    def move_left(self) -> None:
        logger.debug("moving tetromino left")
        if self.active is not None and not self.game_over:
            self._try_replace(rules.move_left(self.active))

    def move_right(self) -> None:
        logger.debug("moving tetromino right")
        if self.active is not None and not self.game_over:
            self._try_replace(rules.move_right(self.active))

    def rotate_clockwise(self) -> None:
        logger.debug("rotating tetromino clockwise")
        if self.active is not None and not self.game_over:
            self._rotate(self.active, self.active.orientation.clockwise())

    def rotate_anticlockwise(self) -> None:
        logger.debug("rotating tetromino anticlockwise")
        if self.active is not None and not self.game_over:
            self._rotate(self.active, self.active.orientation.anticlockwise())

    def _rotate(self, tetromino: Tetromino, orientation: Orientation) -> None:
        for candidate in rules.candidate_rotations(tetromino, orientation):
            if self.valid(candidate):
                self.active = candidate
                return

    def drop(self) -> None:
        """Hard drop: move the piece down until it locks."""

        logger.debug("dropping tetromino")
        # A piece can fall at most ``height`` rows before it must lock.
        for _ in range(self.board.height + 1):
            if self.active is None or self.game_over:
                return
            self.move_down()

    def switch(self) -> None:
        """Swap the piece for a random one in place, if the new one fits."""

        logger.debug("switching tetromino")
        if self.active is not None and not self.game_over:
            self._try_replace(rules.reroll(self.active, self.rng))

    def _try_replace(self, tetromino: Tetromino) -> None:
        if self.valid(tetromino):
            self.active = tetromino

    def ui_state(self) -> UIState:
        """Return a snapshot of everything a renderer needs."""

        active = self.active
        return UIState(
            board=self.board.snapshot(),
            tetromino_blocks=rules.blocks(active) if active is not None else None,
            tetromino_colour=active.colour if active is not None else None,
            game_over=self.game_over,
            score=self.score,
        )
