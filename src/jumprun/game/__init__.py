"""Simulation core: actor physics, obstacles and collision.

GameSession lives in jumprun.game.session and is imported from there.
"""

from .actor import Actor, jump, update_actor
from .collision import collides, overlaps
from .obstacles import Obstacle, ObstacleManager, advance_and_prune, spawn_obstacle

__all__ = [
    "Actor",
    "Obstacle",
    "ObstacleManager",
    "advance_and_prune",
    "collides",
    "jump",
    "overlaps",
    "spawn_obstacle",
    "update_actor",
]
