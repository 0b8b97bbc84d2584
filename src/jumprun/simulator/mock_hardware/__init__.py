"""Mock hardware implementations for the simulator."""

from .display import SimulatedCanvas
from .input import SimulatedJumpButton

__all__ = [
    "SimulatedCanvas",
    "SimulatedJumpButton",
]
