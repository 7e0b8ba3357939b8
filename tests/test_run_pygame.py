from __future__ import annotations

import pytest

pygame = pytest.importorskip("pygame")

from tetris_engine.controller import Action
from tetris_engine.run_pygame import GameRunner, action_for_key
from tetris_engine.settings import Settings


def test_key_bindings() -> None:
    assert action_for_key(pygame.K_SPACE) is Action.DROP
    assert action_for_key(pygame.K_LEFT) is Action.MOVE_LEFT
    assert action_for_key(pygame.K_l) is Action.MOVE_RIGHT
    assert action_for_key(pygame.K_UP) is Action.ROTATE_ANTICLOCKWISE
    assert action_for_key(pygame.K_d) is Action.ROTATE_CLOCKWISE
    assert action_for_key(pygame.K_r) is Action.RESTART
    assert action_for_key(pygame.K_z) is None


def test_quit_key_stops_runner() -> None:
    runner = GameRunner(Settings(seed=0))
    runner._running = True
    runner.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
    assert not runner.running


def test_keys_are_forwarded_to_the_game() -> None:
    runner = GameRunner(Settings(seed=0))
    runner._running = True
    runner.controller.tick()
    runner.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert runner.running
    assert runner.controller.state.active is None
