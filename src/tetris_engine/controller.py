"""Thread-safe boundary between a front-end and a game session.

Front-ends usually drive the game from two places: a timer that applies
gravity and an input loop that applies player actions.  :class:`GameController`
puts a single lock around the session so both can run on separate threads.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Optional

from .board import HEIGHT, WIDTH
from .game_state import GameState, UIState

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """Discrete player commands."""

    ROTATE_CLOCKWISE = "rotate_clockwise"
    ROTATE_ANTICLOCKWISE = "rotate_anticlockwise"
    MOVE_LEFT = "move_left"
    MOVE_DOWN = "move_down"
    MOVE_RIGHT = "move_right"
    DROP = "drop"
    SWITCH = "switch"
    RESTART = "restart"
    QUIT = "quit"


# Actions that map one-to-one onto a ``GameState`` method.
_GAME_ACTIONS = {
    Action.ROTATE_CLOCKWISE: GameState.rotate_clockwise,
    Action.ROTATE_ANTICLOCKWISE: GameState.rotate_anticlockwise,
    Action.MOVE_LEFT: GameState.move_left,
    Action.MOVE_DOWN: GameState.move_down,
    Action.MOVE_RIGHT: GameState.move_right,
    Action.DROP: GameState.drop,
    Action.SWITCH: GameState.switch,
}


class GameController:
    """Own a :class:`GameState` and serialise every call into it."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT, *, seed: Optional[int] = None) -> None:
        self.width = width
        self.height = height
        self._seed = seed
        self._lock = threading.Lock()
        self.state = GameState.create(width, height, seed=seed)

    def tick(self) -> UIState:
        """Apply one gravity step and return the resulting view."""

        with self._lock:
            self.state.update()
            return self.state.ui_state()

    def dispatch(self, action: Action) -> bool:
        """Apply ``action``.  Returns ``False`` once the player asked to quit."""

        logger.debug("action: %s", action.value)
        if action is Action.QUIT:
            return False
        with self._lock:
            if action is Action.RESTART:
                self.state = GameState.create(self.width, self.height, seed=self._seed)
                logger.info("Game restarted")
            else:
                _GAME_ACTIONS[action](self.state)
        return True

    def ui_state(self) -> UIState:
        with self._lock:
            return self.state.ui_state()
