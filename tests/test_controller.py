from __future__ import annotations

import threading

from tetris_engine.controller import Action, GameController
from tetris_engine.game_state import SessionStatus


def test_tick_spawns_and_reports_state() -> None:
    controller = GameController(seed=4)
    ui = controller.tick()
    assert ui.tetromino_blocks is not None
    assert controller.state.status is SessionStatus.FALLING


def test_dispatch_routes_game_actions() -> None:
    controller = GameController(seed=4)
    controller.tick()
    assert controller.dispatch(Action.DROP)
    assert controller.state.active is None
    assert any(cell is not None for row in controller.ui_state().board for cell in row)


def test_quit_is_left_to_the_host() -> None:
    controller = GameController(seed=4)
    controller.tick()
    before = controller.state
    assert controller.dispatch(Action.QUIT) is False
    assert controller.state is before


def test_restart_builds_fresh_session_with_same_dimensions() -> None:
    controller = GameController(8, 12, seed=9)
    controller.tick()
    controller.dispatch(Action.DROP)
    controller.state.game_over = True
    old = controller.state

    assert controller.dispatch(Action.RESTART)

    assert controller.state is not old
    assert controller.state.score == 0
    assert not controller.state.game_over
    assert controller.state.active is None
    assert (controller.state.board.width, controller.state.board.height) == (8, 12)


def test_every_gameplay_action_is_handled() -> None:
    controller = GameController(seed=1)
    controller.tick()
    for action in Action:
        if action is Action.QUIT:
            continue
        assert controller.dispatch(action)


def test_concurrent_ticks_and_actions_keep_board_consistent() -> None:
    controller = GameController(seed=2)
    actions = [Action.MOVE_LEFT, Action.ROTATE_CLOCKWISE, Action.MOVE_RIGHT, Action.SWITCH]

    def ticker() -> None:
        for _ in range(300):
            controller.tick()

    def player() -> None:
        for i in range(300):
            controller.dispatch(actions[i % len(actions)])

    threads = [threading.Thread(target=ticker), threading.Thread(target=player)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ui = controller.ui_state()
    assert len(ui.board) == 20
    assert all(len(row) == 10 for row in ui.board)
    assert ui.score >= 0
