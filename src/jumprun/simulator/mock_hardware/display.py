"""
Simulated canvas for the simulator.

Turns the renderer's numpy buffer into a pygame surface.
"""

import pygame
import numpy as np
from numpy.typing import NDArray


class SimulatedCanvas:
    """
    Presents an (H, W, 3) RGB buffer as a pygame surface.

    The game draws at canvas resolution; the window scales it up.
    """

    def __init__(self, width: int, height: int, scale: int = 1) -> None:
        self._width = width
        self._height = height
        self.scale = max(1, scale)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        """Scaled size in window pixels."""
        return self._width * self.scale, self._height * self.scale

    def render(self, buffer: NDArray[np.uint8]) -> pygame.Surface:
        """
        Render buffer to a pygame surface.

        Returns:
            pygame.Surface at the scaled size
        """
        # surfarray expects (width, height, 3)
        surface = pygame.surfarray.make_surface(buffer.swapaxes(0, 1))
        if self.scale == 1:
            return surface
        return pygame.transform.scale(surface, self.size)
