"""Configuration for jumprun."""

from .settings import (
    CanvasSettings,
    GameSettings,
    ObstacleSettings,
    PhysicsSettings,
    get_settings,
)

__all__ = [
    "CanvasSettings",
    "GameSettings",
    "ObstacleSettings",
    "PhysicsSettings",
    "get_settings",
]
