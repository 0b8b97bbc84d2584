"""
Simulated input device for the simulator.

Space, Up, mouse clicks and touches on the play field all press the same
virtual jump button.
"""

import logging
from typing import Callable

from ...hardware.base import InputSource

logger = logging.getLogger(__name__)


class SimulatedJumpButton(InputSource):
    """
    Virtual jump button.

    Press state is controlled by the simulator window. Each press (not each
    held frame) fires the jump callbacks once.
    """

    def __init__(self) -> None:
        self._pressed = False
        self._callbacks: list[Callable[[], None]] = []

    def on_jump(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def _press(self) -> None:
        """Called by simulator when the button goes down."""
        if self._pressed:
            return
        self._pressed = True
        for callback in list(self._callbacks):
            try:
                callback()
            except Exception as e:
                logger.error(f"Error in jump callback: {e}")

    def _release(self) -> None:
        """Called by simulator when the button goes up."""
        self._pressed = False
