"""Graphics: numpy drawing primitives and the frame-buffer renderer."""

from .renderer import BufferRenderer, Palette

__all__ = ["BufferRenderer", "Palette"]
