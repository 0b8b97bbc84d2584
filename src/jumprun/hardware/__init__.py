"""Input/output boundary interfaces for jumprun."""

from .base import InputSource, Renderer

__all__ = ["InputSource", "Renderer"]
