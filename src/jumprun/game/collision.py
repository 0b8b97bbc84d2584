"""Axis-aligned bounding box collision."""

from typing import Iterable, Protocol

from jumprun.game.actor import Actor
from jumprun.game.obstacles import Obstacle


class Box(Protocol):
    x: float
    y: float
    width: float
    height: float


def overlaps(a: Box, b: Box) -> bool:
    """Strict AABB overlap. Boxes that only share an edge do not overlap."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def collides(actor: Actor, obstacles: Iterable[Obstacle]) -> bool:
    """True if the actor overlaps any obstacle."""
    for obstacle in obstacles:
        if overlaps(actor, obstacle):
            return True
    return False
