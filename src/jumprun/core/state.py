"""
State machine for the game loop.

States:
    RUNNING: Simulation advances every tick
    GAME_OVER: Simulation frozen, end screen shown, waiting for reset
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class State(Enum):
    """Session states."""
    RUNNING = auto()
    GAME_OVER = auto()


Listener = Callable[[State, State], None]


class StateMachine:
    """
    Tracks the session state and validates transitions.

    Listeners are notified after every accepted transition; a failing
    listener is logged and never blocks the transition.
    """

    VALID_TRANSITIONS: list[tuple[State, State]] = [
        (State.RUNNING, State.GAME_OVER),  # Collision
        (State.GAME_OVER, State.RUNNING),  # Reset after game over
        (State.RUNNING, State.RUNNING),    # Restart mid-run
    ]

    def __init__(self, initial_state: State = State.RUNNING) -> None:
        self._state = initial_state
        self._listeners: list[Listener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.info(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> State:
        """Get current state."""
        return self._state

    def can_transition(self, to_state: State) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: State) -> bool:
        """
        Attempt to transition to a new state.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state

        logger.info(f"State transition: {old_state.name} -> {to_state.name}")

        for listener in list(self._listeners):
            try:
                listener(old_state, to_state)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")

        return True

    def add_listener(self, callback: Listener) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)

