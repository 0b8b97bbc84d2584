"""
Game settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Defaults are the tuned constants from jumprun.game.constants.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jumprun.game import constants as C


class CanvasSettings(BaseSettings):
    """Play field geometry."""

    model_config = SettingsConfigDict(env_prefix="JUMPRUN_CANVAS_", extra="ignore")

    width: int = Field(default=C.CANVAS_WIDTH, gt=0)
    height: int = Field(default=C.CANVAS_HEIGHT, gt=0)

    # Distance from the bottom edge to the ground line
    ground_margin: int = Field(default=C.GROUND_MARGIN, ge=0)

    @property
    def ground_y(self) -> int:
        """Y position of the ground line."""
        return self.height - self.ground_margin

    @model_validator(mode="after")
    def _check_ground(self) -> "CanvasSettings":
        if self.ground_margin >= self.height:
            raise ValueError(
                f"ground_margin ({self.ground_margin}) must be smaller than "
                f"canvas height ({self.height})"
            )
        return self


class PhysicsSettings(BaseSettings):
    """Per-tick physics tuning."""

    model_config = SettingsConfigDict(env_prefix="JUMPRUN_PHYSICS_", extra="ignore")

    gravity: float = Field(default=C.GRAVITY, gt=0.0)
    jump_strength: float = Field(default=C.JUMP_STRENGTH, lt=0.0)


class ObstacleSettings(BaseSettings):
    """Obstacle size range and spawn cadence."""

    model_config = SettingsConfigDict(env_prefix="JUMPRUN_OBSTACLE_", extra="ignore")

    min_width: float = Field(default=C.OBSTACLE_MIN_WIDTH, gt=0.0)
    max_width: float = Field(default=C.OBSTACLE_MAX_WIDTH, gt=0.0)
    height: float = Field(default=C.OBSTACLE_HEIGHT, gt=0.0)

    # Frames between spawns (inclusive range)
    min_spawn_interval: int = Field(default=C.MIN_OBSTACLE_SPAWN_INTERVAL, ge=1)
    max_spawn_interval: int = Field(default=C.MAX_OBSTACLE_SPAWN_INTERVAL, ge=1)

    @model_validator(mode="after")
    def _check_ranges(self) -> "ObstacleSettings":
        if self.min_width >= self.max_width:
            raise ValueError(
                f"min_width ({self.min_width}) must be below max_width ({self.max_width})"
            )
        if self.min_spawn_interval > self.max_spawn_interval:
            raise ValueError(
                f"min_spawn_interval ({self.min_spawn_interval}) exceeds "
                f"max_spawn_interval ({self.max_spawn_interval})"
            )
        return self


class GameSettings(BaseSettings):
    """Main game settings."""

    model_config = SettingsConfigDict(
        env_prefix="JUMPRUN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Actor box
    actor_x: float = Field(default=C.ACTOR_X, ge=0.0)
    actor_width: float = Field(default=C.ACTOR_WIDTH, gt=0.0)
    actor_height: float = Field(default=C.ACTOR_HEIGHT, gt=0.0)

    # Pacing
    initial_game_speed: float = Field(default=C.INITIAL_GAME_SPEED, gt=0.0)
    game_speed_increment: float = Field(default=C.GAME_SPEED_INCREMENT, ge=0.0)
    score_per_tick: float = Field(default=C.SCORE_PER_TICK, ge=0.0)
    fps: int = Field(default=C.FPS, gt=0, le=240)

    # Fixed seed for reproducible runs; None draws from the OS
    seed: Optional[int] = None

    # Nested settings
    canvas: CanvasSettings = Field(default_factory=CanvasSettings)
    physics: PhysicsSettings = Field(default_factory=PhysicsSettings)
    obstacles: ObstacleSettings = Field(default_factory=ObstacleSettings)

    @property
    def ground_y(self) -> int:
        return self.canvas.ground_y

    @model_validator(mode="after")
    def _check_actor_fits(self) -> "GameSettings":
        if self.actor_height > self.canvas.ground_y:
            raise ValueError(
                f"actor_height ({self.actor_height}) does not fit above the "
                f"ground line at y={self.canvas.ground_y}"
            )
        if self.obstacles.height > self.canvas.ground_y:
            raise ValueError(
                f"obstacle height ({self.obstacles.height}) does not fit above "
                f"the ground line at y={self.canvas.ground_y}"
            )
        return self


@lru_cache
def get_settings() -> GameSettings:
    """Get cached settings instance."""
    return GameSettings()
