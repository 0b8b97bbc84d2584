"""
Abstract base classes for the output and input boundaries.

The game core only talks to these interfaces. The simulator ships pygame
backed implementations; tests use recording fakes.
"""

from abc import ABC, abstractmethod
from typing import Callable

from jumprun.game.actor import Actor
from jumprun.game.obstacles import Obstacle


class Renderer(ABC):
    """Draws one frame of the game.

    Per tick the driver calls, in order: ``clear``, ``draw_ground``,
    ``draw_actor``, ``draw_obstacle`` for each live obstacle, ``draw_score``.
    ``show_end_screen``/``hide_end_screen`` are only called on state changes.
    """

    @abstractmethod
    def clear(self) -> None:
        """Clear the play field."""
        ...

    @abstractmethod
    def draw_ground(self) -> None:
        """Draw the ground line."""
        ...

    @abstractmethod
    def draw_actor(self, actor: Actor) -> None:
        ...

    @abstractmethod
    def draw_obstacle(self, obstacle: Obstacle) -> None:
        ...

    @abstractmethod
    def draw_score(self, score: int) -> None:
        """Update the score display."""
        ...

    @abstractmethod
    def show_end_screen(self) -> None:
        ...

    @abstractmethod
    def hide_end_screen(self) -> None:
        ...


class InputSource(ABC):
    """Anything that can ask the runner to jump.

    Key press, touch and click all arrive as the same abstract request.
    """

    @abstractmethod
    def on_jump(self, callback: Callable[[], None]) -> Callable[[], None]:
        """
        Register a jump callback.

        Returns:
            Unsubscribe function
        """
        ...
