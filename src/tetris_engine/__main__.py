"""Command line entry point.

Run with: `python -m tetris_engine`

By default a pygame window opens.  With ``--ascii`` the game instead plays
itself by gravity alone, printing a text frame after every tick until the
board tops out.
"""

from __future__ import annotations

import logging
from time import sleep
from typing import Optional, Sequence

from .controller import GameController
from .settings import Settings, configure_logging, parse_args
from .utils import render_ascii

logger = logging.getLogger(__name__)


def run_ascii(settings: Settings, *, delay: Optional[float] = None) -> int:
    """Tick a game until it ends, printing each frame.  Returns the score."""

    controller = GameController(settings.width, settings.height, seed=settings.seed)
    state = controller.ui_state()
    while not state.game_over:
        state = controller.tick()
        print(render_ascii(state))
        print()
        if delay:
            sleep(delay)
    return state.score


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = parse_args(argv)
    configure_logging(settings)
    logger.info("%s", settings)
    if settings.ascii:
        run_ascii(settings, delay=settings.interval)
        return

    from .run_pygame import main as run_pygame

    run_pygame(settings)


if __name__ == "__main__":
    main()
