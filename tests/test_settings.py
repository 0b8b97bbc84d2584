import pytest
from pydantic import ValidationError

from jumprun.config.settings import (
    CanvasSettings,
    GameSettings,
    ObstacleSettings,
    PhysicsSettings,
)


def test_defaults_match_tuned_constants():
    settings = GameSettings()

    assert settings.canvas.width == 800
    assert settings.ground_y == 200
    assert settings.physics.gravity == 0.6
    assert settings.physics.jump_strength == -12
    assert settings.initial_game_speed == 5
    assert settings.game_speed_increment == 0.001
    assert settings.score_per_tick == 0.1
    assert settings.obstacles.min_width == 20
    assert settings.obstacles.max_width == 50
    assert settings.obstacles.height == 45
    assert settings.obstacles.min_spawn_interval == 50
    assert settings.obstacles.max_spawn_interval == 120


def test_spawn_interval_order_enforced():
    with pytest.raises(ValidationError):
        ObstacleSettings(min_spawn_interval=121, max_spawn_interval=120)


def test_equal_spawn_interval_bounds_allowed():
    settings = ObstacleSettings(min_spawn_interval=80, max_spawn_interval=80)

    assert settings.min_spawn_interval == settings.max_spawn_interval


def test_width_range_must_not_be_empty():
    with pytest.raises(ValidationError):
        ObstacleSettings(min_width=50, max_width=20)


def test_jump_must_point_up():
    with pytest.raises(ValidationError):
        PhysicsSettings(jump_strength=12)


def test_speed_must_be_positive():
    with pytest.raises(ValidationError):
        GameSettings(initial_game_speed=0)


def test_ground_must_be_on_canvas():
    with pytest.raises(ValidationError):
        CanvasSettings(height=50, ground_margin=50)


def test_actor_must_fit_above_ground():
    with pytest.raises(ValidationError):
        GameSettings(actor_height=500)


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("JUMPRUN_SEED", "42")
    monkeypatch.setenv("JUMPRUN_OBSTACLE_MAX_SPAWN_INTERVAL", "90")

    settings = GameSettings()

    assert settings.seed == 42
    assert settings.obstacles.max_spawn_interval == 90
