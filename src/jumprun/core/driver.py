"""
Frame driver: runs the update-then-render cycle.

The driver never owns a clock. It asks a FrameScheduler to call it back on
the next frame, the way a browser's requestAnimationFrame works, so any host
loop (pygame window, timer, test harness) can drive it.
"""

from abc import ABC, abstractmethod
from functools import partial
from itertools import count
from typing import Any, Callable, Optional
import logging
import random

from jumprun.config.settings import GameSettings, get_settings
from jumprun.core.events import Event, EventBus, EventType, tick_event
from jumprun.core.state import State, StateMachine
from jumprun.game.session import GameSession
from jumprun.hardware.base import InputSource, Renderer

logger = logging.getLogger(__name__)


class FrameScheduler(ABC):
    """Schedules a callback for the next frame."""

    @abstractmethod
    def schedule(self, callback: Callable[[], None]) -> Any:
        """Request ``callback`` on the next frame. Returns a cancel handle."""
        ...

    @abstractmethod
    def cancel(self, handle: Any) -> None:
        """Cancel a pending callback. Unknown or spent handles are ignored."""
        ...


class FrameCallbackScheduler(FrameScheduler):
    """
    Frame-callback scheduler pumped by the host loop.

    The host calls ``run_pending()`` once per presented frame. Callbacks
    scheduled while it runs wait for the following frame.
    """

    def __init__(self) -> None:
        self._pending: dict[int, Callable[[], None]] = {}
        self._ids = count(1)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def schedule(self, callback: Callable[[], None]) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: Any) -> None:
        self._pending.pop(handle, None)

    def run_pending(self) -> int:
        """Run callbacks due this frame. Returns how many ran."""
        due, self._pending = self._pending, {}
        for callback in due.values():
            callback()
        return len(due)


class Driver:
    """
    Owns the current GameSession and its tick chain.

    Lifecycle:
        1. start() - first frame runs immediately, then one per scheduled frame
        2. tick() - update + render, called by the chain
        3. reset() - cancel the chain, build a new session, start again
        4. stop() - cancel the chain for shutdown
    """

    def __init__(
        self,
        renderer: Renderer,
        scheduler: FrameScheduler,
        settings: Optional[GameSettings] = None,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
        input_source: Optional[InputSource] = None,
    ) -> None:
        self.renderer = renderer
        self.scheduler = scheduler
        self.settings = settings or get_settings()
        self.rng = rng or random.Random(self.settings.seed)
        self.event_bus = event_bus or EventBus()

        self.state_machine = StateMachine(State.RUNNING)
        self.state_machine.add_listener(self._on_state_change)

        self._session = GameSession.create(self.settings, self.rng)
        self._handle: Any = None
        self._generation = 0
        self._started = False
        self._unsubscribers: list[Callable[[], None]] = []

        if input_source is not None:
            self._unsubscribers.append(input_source.on_jump(self.request_jump))
        self._unsubscribers.append(
            self.event_bus.subscribe(EventType.RESET_REQUESTED, self._on_reset_event)
        )

        logger.info("Driver created")

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def is_running(self) -> bool:
        """True while a tick chain is live and the game is not over."""
        return self._started and not self._session.game_over

    @property
    def has_pending_frame(self) -> bool:
        return self._handle is not None

    # Lifecycle
    def start(self) -> None:
        """Begin ticking. No-op if already started."""
        if self._started:
            return
        self._started = True
        logger.info("Driver started")
        self._frame(self._generation)

    def stop(self) -> None:
        """Cancel any pending frame."""
        self._cancel_pending()
        self._started = False
        logger.info("Driver stopped")

    def reset(self) -> None:
        """Replace the session and restart the loop."""
        self._cancel_pending()
        self._generation += 1

        self._session = GameSession.create(self.settings, self.rng)
        self.state_machine.transition(State.RUNNING)

        logger.info(
            f"Session reset (chain {self._generation}), "
            f"first spawn at frame {self._session.next_obstacle_spawn_frame}"
        )
        self.event_bus.emit(Event(
            EventType.SESSION_RESET,
            data={"generation": self._generation},
            source="driver",
        ))

        self._started = False
        self.start()

    def close(self) -> None:
        """Stop and detach from the input source and event bus."""
        self.stop()
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    # Input
    def request_jump(self) -> None:
        """Queue a jump for the next tick."""
        self._session.request_jump()

    # Per-frame work
    def tick(self) -> bool:
        """Run one update + render.

        Returns:
            True if the session is still running afterwards
        """
        session = self._session
        if session.game_over:
            return False

        ended = session.update()

        if session.last_spawned is not None:
            self.event_bus.emit(Event(
                EventType.OBSTACLE_SPAWNED,
                data={
                    "frame": session.frame_count,
                    "width": session.last_spawned.width,
                    "next_spawn_frame": session.next_obstacle_spawn_frame,
                },
                source="driver",
            ))
            if session is not self._session:
                return False

        self._render(session)
        self.event_bus.emit(tick_event(
            session.frame_count,
            session.display_score,
            session.game_speed,
            len(session.obstacles),
        ))

        # A handler may have reset; the new session owns the state machine now
        if session is not self._session:
            return False
        if ended:
            self.state_machine.transition(State.GAME_OVER)
            return False
        return True

    def _frame(self, generation: int) -> None:
        """Scheduled callback: tick, then book the next frame."""
        if generation != self._generation:
            # Superseded chain
            return

        self._handle = None
        running = self.tick()

        # A reset during the tick has already started a new chain
        if running and generation == self._generation:
            self._handle = self.scheduler.schedule(partial(self._frame, generation))

    def _render(self, session: GameSession) -> None:
        renderer = self.renderer
        renderer.clear()
        renderer.draw_ground()
        renderer.draw_actor(session.actor)
        for obstacle in session.obstacles:
            renderer.draw_obstacle(obstacle)
        renderer.draw_score(session.display_score)

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self.scheduler.cancel(self._handle)
            self._handle = None

    # Listeners
    def _on_state_change(self, old_state: State, new_state: State) -> None:
        self.event_bus.emit(Event(
            EventType.STATE_CHANGED,
            data={"from": old_state.name, "to": new_state.name},
            source="driver",
        ))

        if new_state == State.GAME_OVER:
            session = self._session
            logger.info(
                f"Game over: score {session.display_score} "
                f"after {session.frame_count} frames"
            )
            self.renderer.show_end_screen()
            self.event_bus.emit(Event(
                EventType.GAME_OVER,
                data={"score": session.display_score, "frames": session.frame_count},
                source="driver",
            ))
        elif old_state == State.GAME_OVER:
            self.renderer.hide_end_screen()

    def _on_reset_event(self, event: Event) -> None:
        logger.debug(f"Reset requested by {event.source}")
        self.reset()
