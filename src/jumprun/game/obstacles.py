"""Obstacle spawning, scrolling and pruning."""

from dataclasses import dataclass, field
import logging
import random
from typing import Iterator, List

from jumprun.game.constants import (
    OBSTACLE_HEIGHT,
    OBSTACLE_MAX_WIDTH,
    OBSTACLE_MIN_WIDTH,
    MAX_OBSTACLE_SPAWN_INTERVAL,
    MIN_OBSTACLE_SPAWN_INTERVAL,
)

logger = logging.getLogger(__name__)


@dataclass
class Obstacle:
    """A block sitting on the ground, scrolling left."""

    x: float
    y: float
    width: float
    height: float = OBSTACLE_HEIGHT

    @property
    def is_off_screen(self) -> bool:
        """Fully past the left edge."""
        return self.x + self.width < 0


def spawn_obstacle(
    rng: random.Random,
    canvas_width: float,
    ground_y: float,
    min_width: float = OBSTACLE_MIN_WIDTH,
    max_width: float = OBSTACLE_MAX_WIDTH,
    height: float = OBSTACLE_HEIGHT,
) -> Obstacle:
    """Create an obstacle at the right edge with a width in [min_width, max_width)."""
    width = min_width + rng.random() * (max_width - min_width)
    return Obstacle(x=float(canvas_width), y=ground_y - height, width=width, height=height)


def draw_spawn_interval(
    rng: random.Random,
    lo: int = MIN_OBSTACLE_SPAWN_INTERVAL,
    hi: int = MAX_OBSTACLE_SPAWN_INTERVAL,
) -> int:
    """Frames until the next spawn, uniform over [lo, hi] inclusive."""
    return rng.randint(lo, hi)


def advance_and_prune(obstacles: List[Obstacle], speed: float) -> int:
    """Scroll every obstacle left by ``speed`` and drop the ones off screen.

    Walks back to front so deleting never skips an element.

    Returns:
        Number of obstacles removed
    """
    removed = 0
    for i in range(len(obstacles) - 1, -1, -1):
        obstacle = obstacles[i]
        obstacle.x -= speed

        if obstacle.is_off_screen:
            del obstacles[i]
            removed += 1
    return removed


@dataclass
class ObstacleManager:
    """Owns the live obstacle set and the spawn schedule.

    Spawning is driven from outside: the session asks ``due(frame)`` every
    tick and calls ``spawn(frame)`` when it is.
    """

    canvas_width: float = field(compare=False)
    ground_y: float = field(compare=False)
    rng: random.Random = field(compare=False, repr=False)
    min_width: float = field(default=OBSTACLE_MIN_WIDTH, compare=False)
    max_width: float = field(default=OBSTACLE_MAX_WIDTH, compare=False)
    height: float = field(default=OBSTACLE_HEIGHT, compare=False)
    min_spawn_interval: int = field(default=MIN_OBSTACLE_SPAWN_INTERVAL, compare=False)
    max_spawn_interval: int = field(default=MAX_OBSTACLE_SPAWN_INTERVAL, compare=False)

    obstacles: List[Obstacle] = field(default_factory=list)
    next_spawn_frame: int = 0

    def __post_init__(self) -> None:
        if self.min_width >= self.max_width:
            raise ValueError(
                f"Obstacle width range is empty: [{self.min_width}, {self.max_width})"
            )
        if self.min_spawn_interval < 1 or self.min_spawn_interval > self.max_spawn_interval:
            raise ValueError(
                f"Invalid spawn interval range: "
                f"[{self.min_spawn_interval}, {self.max_spawn_interval}]"
            )
        if self.height <= 0:
            raise ValueError(f"Obstacle height must be positive, got {self.height}")

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self.obstacles)

    def __len__(self) -> int:
        return len(self.obstacles)

    def schedule_next(self, current_frame: int) -> int:
        """Draw a fresh interval and set the next spawn threshold."""
        interval = draw_spawn_interval(
            self.rng, self.min_spawn_interval, self.max_spawn_interval
        )
        self.next_spawn_frame = current_frame + interval
        return self.next_spawn_frame

    def due(self, current_frame: int) -> bool:
        return current_frame >= self.next_spawn_frame

    def spawn(self, current_frame: int) -> Obstacle:
        """Add one obstacle at the right edge and reschedule."""
        obstacle = spawn_obstacle(
            self.rng,
            self.canvas_width,
            self.ground_y,
            min_width=self.min_width,
            max_width=self.max_width,
            height=self.height,
        )
        self.obstacles.append(obstacle)
        self.schedule_next(current_frame)

        logger.debug(
            f"Spawned obstacle w={obstacle.width:.1f} at frame {current_frame}, "
            f"next at {self.next_spawn_frame}"
        )
        return obstacle

    def advance(self, speed: float) -> int:
        """Scroll and prune; returns how many were removed."""
        return advance_and_prune(self.obstacles, speed)
