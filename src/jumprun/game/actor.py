"""Player figure and its vertical physics."""

from dataclasses import dataclass

from jumprun.game.constants import GRAVITY, JUMP_STRENGTH


@dataclass
class Actor:
    """The runner. Only ``y``, ``dy`` and ``is_jumping`` change during play."""

    x: float
    y: float
    width: float
    height: float
    dy: float = 0.0
    is_jumping: bool = False

    @classmethod
    def at_rest(cls, x: float, width: float, height: float, ground_y: float) -> "Actor":
        """Create an actor standing on the ground line."""
        return cls(x=x, y=ground_y - height, width=width, height=height)

    @property
    def bottom(self) -> float:
        return self.y + self.height


def update_actor(actor: Actor, ground_y: float, gravity: float = GRAVITY) -> None:
    """Integrate one tick of gravity and clamp to the ground.

    Integration runs while airborne or moving upward. The upward case lets the
    first tick after a grounded jump lift off before the ground clamp runs.
    """
    if actor.y + actor.height < ground_y or actor.dy < 0:
        actor.dy += gravity
        actor.y += actor.dy

    if actor.y + actor.height > ground_y:
        actor.y = ground_y - actor.height
        actor.dy = 0.0
        actor.is_jumping = False


def jump(actor: Actor, jump_strength: float = JUMP_STRENGTH, game_over: bool = False) -> bool:
    """Apply an upward impulse.

    No double jumps: ignored while already in the air or after game over.

    Returns:
        True if the jump was applied
    """
    if actor.is_jumping or game_over:
        return False

    actor.dy = jump_strength
    actor.is_jumping = True
    return True
