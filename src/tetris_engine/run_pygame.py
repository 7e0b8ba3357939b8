"""Simple pygame front-end for the Tetris engine.

This module draws :class:`~tetris_engine.game_state.UIState` snapshots and
turns key presses into :class:`~tetris_engine.controller.Action` values.  All
game logic goes through a :class:`~tetris_engine.controller.GameController`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import pygame

from .controller import Action, GameController
from .settings import Settings
from .tetromino import Colour
from .utils import render_grid, title

logger = logging.getLogger(__name__)

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to run the game loop at
FPS = 60

COLOUR_RGB = {
    Colour.RED: (255, 0, 0),
    Colour.GREEN: (0, 255, 0),
    Colour.BLUE: (0, 0, 255),
    Colour.YELLOW: (255, 255, 0),
    Colour.CYAN: (0, 255, 255),
    Colour.MAGENTA: (255, 0, 255),
}
EMPTY_RGB = (0, 0, 0)
GRID_RGB = (50, 50, 50)

KEY_BINDINGS = {
    pygame.K_q: Action.QUIT,
    pygame.K_a: Action.ROTATE_ANTICLOCKWISE,
    pygame.K_d: Action.ROTATE_CLOCKWISE,
    pygame.K_j: Action.MOVE_LEFT,
    pygame.K_k: Action.MOVE_DOWN,
    pygame.K_l: Action.MOVE_RIGHT,
    pygame.K_s: Action.SWITCH,
    pygame.K_r: Action.RESTART,
    pygame.K_SPACE: Action.DROP,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_UP: Action.ROTATE_ANTICLOCKWISE,
    pygame.K_DOWN: Action.MOVE_DOWN,
}


def action_for_key(key: int) -> Optional[Action]:
    """Return the action bound to ``key``, or ``None`` for unbound keys."""

    return KEY_BINDINGS.get(key)


def draw_state(screen: pygame.Surface, controller: GameController) -> None:
    """Render the board with the active piece on top."""

    state = controller.ui_state()
    for r, row in enumerate(render_grid(state)):
        for c, colour in enumerate(row):
            rect = pygame.Rect(c * CELL_SIZE, r * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, COLOUR_RGB[colour] if colour else EMPTY_RGB, rect)
            pygame.draw.rect(screen, GRID_RGB, rect, 1)
    pygame.display.set_caption(title(state))


class GameRunner:
    """Manage the pygame window, gravity timer and input loop."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.controller = GameController(settings.width, settings.height, seed=settings.seed)
        self._running = False
        self._drop_timer = 0

    @property
    def running(self) -> bool:
        return self._running

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self._running = False
        elif event.type == pygame.KEYDOWN:
            action = action_for_key(event.key)
            if action is not None and not self.controller.dispatch(action):
                self._running = False

    async def _run_loop(self) -> None:
        pygame.init()
        screen = pygame.display.set_mode(
            (self.settings.width * CELL_SIZE, self.settings.height * CELL_SIZE)
        )
        clock = pygame.time.Clock()
        interval_ms = self.settings.interval * 1000.0
        logger.info("Game started")

        self._drop_timer = 0
        self._running = True
        while self._running:
            dt = clock.tick(FPS)
            for event in pygame.event.get():
                self.handle_event(event)

            self._drop_timer += dt
            if self._drop_timer >= interval_ms:
                self._drop_timer = 0
                self.controller.tick()

            screen.fill(EMPTY_RGB)
            draw_state(screen, self.controller)
            pygame.display.flip()

            # Yield to the host event loop to keep the UI responsive
            await asyncio.sleep(0)

        pygame.quit()
        logger.info("Game stopped")

    def run(self) -> None:
        asyncio.run(self._run_loop())


def main(settings: Settings) -> None:
    GameRunner(settings).run()
