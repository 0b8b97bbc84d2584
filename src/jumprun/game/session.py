"""
Game session aggregate.

A GameSession holds everything that lives for one run: the actor, the
obstacle set, score, speed and the frame counter. Reset never mutates a
session back to its start state; the driver builds a new one.
"""

from dataclasses import dataclass, field
import logging
import math
import random
import threading
from typing import Optional

from jumprun.config.settings import GameSettings
from jumprun.game.actor import Actor, jump, update_actor
from jumprun.game.collision import collides
from jumprun.game.obstacles import Obstacle, ObstacleManager

logger = logging.getLogger(__name__)


class PendingJump:
    """Single-slot jump request latch.

    Input can arrive at any time and from any thread. Requests collapse into
    one slot that the session drains exactly once per tick.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending = False

    def request(self) -> None:
        with self._lock:
            self._pending = True

    def consume(self) -> bool:
        """Return and clear the pending flag."""
        with self._lock:
            pending = self._pending
            self._pending = False
            return pending

    @property
    def is_pending(self) -> bool:
        with self._lock:
            return self._pending


@dataclass
class GameSession:
    """Mutable state of a single run."""

    actor: Actor
    obstacles: ObstacleManager
    settings: GameSettings = field(compare=False, repr=False)
    score: float = 0.0
    frame_count: int = 0
    game_speed: float = 0.0
    game_over: bool = False

    pending_jump: PendingJump = field(default_factory=PendingJump, compare=False, repr=False)
    last_spawned: Optional[Obstacle] = field(default=None, compare=False, repr=False)

    @classmethod
    def create(
        cls,
        settings: GameSettings,
        rng: Optional[random.Random] = None,
    ) -> "GameSession":
        """Build a session in its start state."""
        rng = rng or random.Random(settings.seed)
        ground_y = settings.ground_y

        actor = Actor.at_rest(
            x=settings.actor_x,
            width=settings.actor_width,
            height=settings.actor_height,
            ground_y=ground_y,
        )
        obstacles = ObstacleManager(
            canvas_width=settings.canvas.width,
            ground_y=ground_y,
            rng=rng,
            min_width=settings.obstacles.min_width,
            max_width=settings.obstacles.max_width,
            height=settings.obstacles.height,
            min_spawn_interval=settings.obstacles.min_spawn_interval,
            max_spawn_interval=settings.obstacles.max_spawn_interval,
        )
        obstacles.schedule_next(0)

        return cls(
            actor=actor,
            obstacles=obstacles,
            settings=settings,
            game_speed=settings.initial_game_speed,
        )

    @property
    def display_score(self) -> int:
        """Score as shown to the player."""
        return math.floor(self.score)

    @property
    def next_obstacle_spawn_frame(self) -> int:
        return self.obstacles.next_spawn_frame

    @property
    def ground_y(self) -> int:
        return self.settings.ground_y

    def request_jump(self) -> None:
        """Queue a jump for the next tick."""
        self.pending_jump.request()

    def jump(self) -> bool:
        """Apply a jump right away. Returns True if it took effect."""
        return jump(
            self.actor,
            jump_strength=self.settings.physics.jump_strength,
            game_over=self.game_over,
        )

    def update(self) -> bool:
        """Advance the simulation by one tick.

        Returns:
            True if this tick ended the game
        """
        self.last_spawned = None
        if self.game_over:
            return False

        self.frame_count += 1

        if self.pending_jump.consume():
            self.jump()

        update_actor(self.actor, self.ground_y, self.settings.physics.gravity)
        self.obstacles.advance(self.game_speed)

        self.score += self.settings.score_per_tick
        self.game_speed += self.settings.game_speed_increment

        if self.obstacles.due(self.frame_count):
            self.last_spawned = self.obstacles.spawn(self.frame_count)

        if collides(self.actor, self.obstacles):
            self.game_over = True
            logger.info(
                f"Collision at frame {self.frame_count}: "
                f"score={self.display_score} speed={self.game_speed:.3f}"
            )
            return True

        return False
