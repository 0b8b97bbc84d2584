import pytest

from jumprun.game.actor import Actor, jump, update_actor
from jumprun.game.constants import ACTOR_HEIGHT, ACTOR_WIDTH, GRAVITY, JUMP_STRENGTH

GROUND_Y = 200


def _resting_actor():
    return Actor.at_rest(x=50, width=ACTOR_WIDTH, height=ACTOR_HEIGHT, ground_y=GROUND_Y)


def test_at_rest_sits_on_ground():
    actor = _resting_actor()

    assert actor.y == 140
    assert actor.bottom == GROUND_Y
    assert actor.dy == 0
    assert not actor.is_jumping


def test_grounded_actor_stays_put():
    actor = _resting_actor()

    for _ in range(500):
        update_actor(actor, GROUND_Y, GRAVITY)
        assert actor.y == 140
        assert actor.dy == 0
        assert not actor.is_jumping


def test_jump_sets_impulse_and_flag():
    actor = _resting_actor()

    assert jump(actor) is True
    assert actor.dy == JUMP_STRENGTH
    assert actor.is_jumping


def test_second_jump_before_landing_is_ignored():
    actor = _resting_actor()
    jump(actor)
    update_actor(actor, GROUND_Y, GRAVITY)
    before = (actor.y, actor.dy, actor.is_jumping)

    assert jump(actor) is False
    assert (actor.y, actor.dy, actor.is_jumping) == before


def test_jump_ignored_after_game_over():
    actor = _resting_actor()

    assert jump(actor, game_over=True) is False
    assert actor.dy == 0
    assert not actor.is_jumping


def test_first_tick_after_jump_lifts_off():
    actor = _resting_actor()
    jump(actor)

    update_actor(actor, GROUND_Y, GRAVITY)

    assert actor.dy == pytest.approx(JUMP_STRENGTH + GRAVITY)
    assert actor.y == pytest.approx(140 + JUMP_STRENGTH + GRAVITY)
    assert actor.is_jumping


def test_jump_returns_to_ground():
    actor = _resting_actor()
    jump(actor)

    landed_at = None
    for tick in range(1, 61):
        update_actor(actor, GROUND_Y, GRAVITY)
        assert actor.bottom <= GROUND_Y
        if actor.y == pytest.approx(140):
            landed_at = tick
            break

    assert landed_at is not None
    assert landed_at <= 41


def test_clamp_zeroes_velocity_on_the_landing_tick():
    # Quarter-step values keep the arithmetic exact
    actor = _resting_actor()
    jump(actor, jump_strength=-10.0)

    for _ in range(25):
        update_actor(actor, GROUND_Y, 0.75)
        assert actor.is_jumping
        assert actor.dy != 0

    assert actor.y == pytest.approx(140 - 6.25)
    assert actor.dy == pytest.approx(8.75)

    update_actor(actor, GROUND_Y, 0.75)

    assert actor.y == 140
    assert actor.dy == 0
    assert not actor.is_jumping


def test_actor_above_ground_falls():
    actor = Actor(x=50, y=100, width=40, height=60)

    update_actor(actor, GROUND_Y, GRAVITY)

    assert actor.dy == pytest.approx(GRAVITY)
    assert actor.y == pytest.approx(100 + GRAVITY)


def test_never_below_ground():
    actor = Actor(x=50, y=139, width=40, height=60, dy=30.0)

    update_actor(actor, GROUND_Y, GRAVITY)

    assert actor.y == 140
    assert actor.dy == 0
