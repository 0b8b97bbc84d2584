"""Frame-buffer renderer for the play field."""

from dataclasses import dataclass
import logging

from jumprun.game.actor import Actor
from jumprun.game.obstacles import Obstacle
from jumprun.graphics.primitives import (
    Buffer, Color, draw_hline, draw_rect, fill, new_buffer
)
from jumprun.hardware.base import Renderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Palette:
    """Play field colors."""

    background: Color = (255, 255, 255)
    ground: Color = (51, 51, 51)       # #333
    actor: Color = (0, 128, 0)         # green
    obstacle: Color = (255, 0, 0)      # red


class BufferRenderer(Renderer):
    """
    Draws the scene into a numpy RGB buffer.

    Text-like outputs (the score label and the end screen) are kept as state
    for the host to present with its own widgets.
    """

    GROUND_THICKNESS = 2

    def __init__(
        self,
        width: int,
        height: int,
        ground_y: int,
        palette: Palette | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.ground_y = ground_y
        self.palette = palette or Palette()

        self._buffer = new_buffer(width, height, self.palette.background)
        self.score = 0
        self.end_screen_visible = False

    @property
    def buffer(self) -> Buffer:
        return self._buffer

    @property
    def score_text(self) -> str:
        return f"Score: {self.score}"

    def clear(self) -> None:
        fill(self._buffer, self.palette.background)

    def draw_ground(self) -> None:
        draw_hline(
            self._buffer, 0, self.width, self.ground_y,
            self.palette.ground, thickness=self.GROUND_THICKNESS,
        )

    def draw_actor(self, actor: Actor) -> None:
        draw_rect(
            self._buffer, actor.x, actor.y, actor.width, actor.height,
            self.palette.actor,
        )

    def draw_obstacle(self, obstacle: Obstacle) -> None:
        draw_rect(
            self._buffer, obstacle.x, obstacle.y, obstacle.width, obstacle.height,
            self.palette.obstacle,
        )

    def draw_score(self, score: int) -> None:
        self.score = score

    def show_end_screen(self) -> None:
        self.end_screen_visible = True
        logger.debug("End screen shown")

    def hide_end_screen(self) -> None:
        self.end_screen_visible = False
        logger.debug("End screen hidden")
