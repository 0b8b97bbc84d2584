"""Basic drawing primitives for numpy frame buffers."""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def new_buffer(width: int, height: int, color: Color = (0, 0, 0)) -> Buffer:
    """Allocate an RGB buffer of shape (height, width, 3)."""
    buffer = np.zeros((height, width, 3), dtype=np.uint8)
    buffer[:, :] = color
    return buffer


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def draw_rect(
    buffer: Buffer,
    x: float,
    y: float,
    width: float,
    height: float,
    color: Color,
) -> None:
    """Draw a filled rectangle on the buffer.

    Fractional coordinates are truncated to whole pixels; the parts outside
    the buffer are clipped.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
    """
    h, w = buffer.shape[:2]

    # Clamp to buffer bounds
    x1 = max(0, min(int(x), w))
    y1 = max(0, min(int(y), h))
    x2 = max(0, min(int(x + width), w))
    y2 = max(0, min(int(y + height), h))

    if x1 >= x2 or y1 >= y2:
        return

    buffer[y1:y2, x1:x2] = color


def draw_hline(
    buffer: Buffer,
    x1: int,
    x2: int,
    y: int,
    color: Color,
    thickness: int = 1,
) -> None:
    """Draw a horizontal line centred on ``y``.

    Args:
        buffer: Target numpy array (height, width, 3)
        x1, x2: Horizontal extent (x2 exclusive)
        y: Line centre
        color: RGB color tuple
        thickness: Line thickness in pixels
    """
    top = y - thickness // 2
    draw_rect(buffer, x1, top, x2 - x1, thickness, color)
