import random

from jumprun.core.driver import Driver
from jumprun.core.events import EventType, reset_event
from jumprun.core.state import State
from jumprun.game.obstacles import Obstacle
from jumprun.game.session import GameSession
from jumprun.simulator.mock_hardware.input import SimulatedJumpButton


def _block_actor(driver):
    driver.session.obstacles.obstacles.append(Obstacle(x=60, y=155, width=30))


def _run_frames(scheduler, n):
    for _ in range(n):
        scheduler.run_pending()


def test_start_runs_first_frame_and_schedules_next(driver, renderer, scheduler):
    driver.start()

    assert driver.session.frame_count == 1
    assert renderer.calls == ["clear", "ground", "actor", "score"]
    assert scheduler.pending_count == 1
    assert driver.is_running


def test_start_twice_is_noop(driver, scheduler):
    driver.start()
    driver.start()

    assert driver.session.frame_count == 1
    assert scheduler.pending_count == 1


def test_one_tick_per_frame(driver, scheduler):
    driver.start()
    _run_frames(scheduler, 9)

    assert driver.session.frame_count == 10
    assert scheduler.pending_count == 1


def test_render_order_with_obstacles(driver, renderer):
    driver.session.obstacles.obstacles.extend([
        Obstacle(x=500, y=155, width=30),
        Obstacle(x=700, y=155, width=30),
    ])

    driver.tick()

    assert renderer.calls == ["clear", "ground", "actor", "obstacle", "obstacle", "score"]


def test_reported_score_is_floored(driver, renderer, scheduler):
    driver.start()
    _run_frames(scheduler, 24)

    assert renderer.scores[-1] == int(driver.session.score)
    assert renderer.scores[-1] == 2


def test_game_over_stops_chain_and_shows_end_screen(driver, renderer, scheduler, event_bus):
    driver.start()
    _block_actor(driver)

    _run_frames(scheduler, 1)

    assert driver.session.game_over
    assert driver.state_machine.state == State.GAME_OVER
    assert renderer.calls.count("show_end") == 1
    assert scheduler.pending_count == 0
    assert not driver.is_running

    game_over = event_bus.get_history(EventType.GAME_OVER)
    assert len(game_over) == 1
    assert game_over[0].data["frames"] == 2

    # Nothing left to run
    frames = driver.session.frame_count
    _run_frames(scheduler, 5)
    assert driver.session.frame_count == frames
    assert driver.tick() is False
    assert renderer.calls.count("show_end") == 1


def test_end_screen_shown_after_final_frame_is_drawn(driver, renderer):
    _block_actor(driver)
    driver.start()

    assert renderer.calls[-2:] == ["score", "show_end"]


def test_reset_after_game_over(driver, renderer, scheduler):
    _block_actor(driver)
    driver.start()
    old_session = driver.session

    driver.reset()

    assert driver.session is not old_session
    assert driver.state_machine.state == State.RUNNING
    assert renderer.calls.count("hide_end") == 1
    assert driver.session.frame_count == 1
    assert scheduler.pending_count == 1
    assert driver.is_running


def test_reset_while_running_keeps_a_single_chain(driver, renderer, scheduler):
    driver.start()
    _run_frames(scheduler, 5)

    driver.reset()
    driver.reset()

    assert scheduler.pending_count == 1
    assert "hide_end" not in renderer.calls

    _run_frames(scheduler, 3)
    assert driver.session.frame_count == 4
    assert scheduler.pending_count == 1


def test_stale_frame_callback_is_ignored(driver, scheduler):
    driver.start()
    stale = next(iter(scheduler._pending.values()))

    driver.reset()
    frames = driver.session.frame_count
    stale()

    assert driver.session.frame_count == frames
    assert scheduler.pending_count == 1


def test_reset_from_event_handler_during_tick(driver, scheduler, event_bus):
    driver.start()

    def reset_once(event):
        unsubscribe()
        driver.reset()

    unsubscribe = event_bus.subscribe(EventType.TICK, reset_once)
    _run_frames(scheduler, 1)

    assert scheduler.pending_count == 1


def test_reset_from_event_handler_on_final_tick(driver, renderer, scheduler, event_bus):
    driver.start()
    _block_actor(driver)
    old_session = driver.session

    def reset_once(event):
        unsubscribe()
        driver.reset()

    unsubscribe = event_bus.subscribe(EventType.TICK, reset_once)
    _run_frames(scheduler, 1)

    assert old_session.game_over
    assert not driver.session.game_over
    assert driver.state_machine.state == State.RUNNING
    assert "show_end" not in renderer.calls
    assert event_bus.get_history(EventType.GAME_OVER) == []
    assert scheduler.pending_count == 1

    # The new chain can still end normally
    _block_actor(driver)
    _run_frames(scheduler, 1)
    assert driver.state_machine.state == State.GAME_OVER
    assert renderer.calls.count("show_end") == 1
    assert scheduler.pending_count == 0


def test_reset_matches_fresh_session(settings, renderer, scheduler):
    driver = Driver(renderer, scheduler, settings=settings, rng=random.Random(5))
    driver.start()
    _run_frames(scheduler, 30)
    driver.request_jump()
    _run_frames(scheduler, 3)

    driver.stop()
    driver.reset()
    driver.stop()

    # reset() has already run one frame of the new session
    reset_session = driver.session
    fresh = GameSession.create(settings, random.Random(99))
    fresh.update()
    fresh.obstacles.next_spawn_frame = reset_session.obstacles.next_spawn_frame

    assert reset_session == fresh
    driver.close()


def test_stop_cancels_pending_frame(driver, scheduler):
    driver.start()

    driver.stop()

    assert scheduler.pending_count == 0
    assert not driver.has_pending_frame


def test_input_source_triggers_jump(renderer, scheduler, settings, rng):
    button = SimulatedJumpButton()
    driver = Driver(renderer, scheduler, settings=settings, rng=rng, input_source=button)
    driver.start()

    button._press()
    button._release()
    button._press()
    _run_frames(scheduler, 1)

    assert driver.session.actor.is_jumping
    assert driver.session.actor.dy == settings.physics.jump_strength + settings.physics.gravity

    driver.close()
    button._release()
    button._press()
    assert not driver.session.pending_jump.is_pending


def test_bus_reset_request_is_routed(driver, scheduler, event_bus):
    driver.start()

    driver.request_jump()
    _run_frames(scheduler, 1)
    assert driver.session.actor.is_jumping

    event_bus.emit(reset_event())
    assert driver.session.frame_count == 1
    assert not driver.session.actor.is_jumping
    assert len(event_bus.get_history(EventType.SESSION_RESET)) == 1


def test_spawn_events_emitted(driver, scheduler, event_bus):
    driver.session.obstacles.next_spawn_frame = 1
    driver.start()

    spawned = event_bus.get_history(EventType.OBSTACLE_SPAWNED)
    assert len(spawned) == 1
    assert 20 <= spawned[0].data["width"] < 50
