"""
Main simulator window using pygame.

Presents the game canvas, the score label and the game-over overlay, and
routes keyboard, mouse and touch input to the game.
"""

import pygame
import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..core.driver import FrameCallbackScheduler
from ..core.events import EventBus, EventType, Event, reset_event
from ..graphics.renderer import BufferRenderer
from .mock_hardware.display import SimulatedCanvas
from .mock_hardware.input import SimulatedJumpButton

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    title: str = "jumprun"
    fullscreen: bool = False
    fps: int = 60
    scale: int = 1
    screenshot_dir: Path = Path("screenshots")

    # Space around the canvas
    margin: int = 20
    header_height: int = 40

    # Colors
    bg_color: tuple[int, int, int] = (240, 240, 240)
    text_color: tuple[int, int, int] = (51, 51, 51)
    overlay_color: tuple[int, int, int, int] = (0, 0, 0, 170)
    button_color: tuple[int, int, int] = (76, 175, 80)
    button_text_color: tuple[int, int, int] = (255, 255, 255)


class SimulatorWindow:
    """
    Desktop window hosting one game.

    The window is the frame source: each loop iteration it runs the pending
    frame callbacks and then presents the renderer's buffer.

    Keyboard Mapping:
        SPACE / UP: Jump
        Mouse click / touch on the canvas: Jump
        R: Restart (also the Restart button on the end screen)
        D: Toggle debug overlay
        S: Capture screenshot
        ESC / Q: Exit simulator
    """

    def __init__(
        self,
        renderer: BufferRenderer,
        scheduler: FrameCallbackScheduler,
        config: WindowConfig | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config or WindowConfig()
        self.renderer = renderer
        self.scheduler = scheduler
        self.event_bus = event_bus or EventBus()

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0
        self._show_debug = False

        # Virtual devices
        self.canvas = SimulatedCanvas(renderer.width, renderer.height, self.config.scale)
        self.jump_button = SimulatedJumpButton()

        # Fonts
        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None
        self._small_font: pygame.font.Font | None = None

        # Layout
        self._canvas_rect = pygame.Rect(0, 0, *self.canvas.size)
        self._restart_rect = pygame.Rect(0, 0, 0, 0)

        # Last tick info for the debug overlay
        self._stats: dict = {}
        self.event_bus.subscribe(EventType.TICK, self._on_tick)

        logger.info("SimulatorWindow created")

    @property
    def size(self) -> tuple[int, int]:
        canvas_w, canvas_h = self.canvas.size
        margin = self.config.margin
        return (
            canvas_w + margin * 2,
            canvas_h + margin * 2 + self.config.header_height,
        )

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN

        self._screen = pygame.display.set_mode(self.size, flags)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont("Arial", 24)
        self._big_font = pygame.font.SysFont("Arial", 48, bold=True)
        self._small_font = pygame.font.SysFont("monospace", 14)

        self._calculate_layout()

        logger.info(f"Pygame initialized: {self.size[0]}x{self.size[1]}")

    def _calculate_layout(self) -> None:
        """Calculate positions for all UI elements."""
        margin = self.config.margin
        self._canvas_rect = pygame.Rect(
            margin, margin + self.config.header_height, *self.canvas.size
        )

        button_w, button_h = 160, 44
        self._restart_rect = pygame.Rect(0, 0, button_w, button_h)
        self._restart_rect.center = (
            self._canvas_rect.centerx,
            self._canvas_rect.centery + 40,
        )

    def _on_tick(self, event: Event) -> None:
        self._stats = event.data

    # Input
    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.KEYUP:
                if event.key in (pygame.K_SPACE, pygame.K_UP):
                    self.jump_button._release()

            elif event.type == pygame.MOUSEBUTTONDOWN:
                # Touches also arrive as FINGERDOWN
                if not getattr(event, "touch", False):
                    self._handle_pointer(event.pos)

            elif event.type == pygame.MOUSEBUTTONUP:
                if not getattr(event, "touch", False):
                    self.jump_button._release()

            elif event.type == pygame.FINGERDOWN:
                w, h = self.size
                self._handle_pointer((int(event.x * w), int(event.y * h)))

            elif event.type == pygame.FINGERUP:
                self.jump_button._release()

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key == pygame.K_ESCAPE or key == pygame.K_q:
            self._running = False
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug
        elif key == pygame.K_s:
            self._capture_screenshot()
        elif key == pygame.K_r:
            self.event_bus.emit(reset_event(source="keyboard"))
        elif key in (pygame.K_SPACE, pygame.K_UP):
            self._jump(source="keyboard")

    def _handle_pointer(self, pos: tuple[int, int]) -> None:
        """Click or touch: restart button when shown, else jump on the canvas."""
        if self.renderer.end_screen_visible:
            if self._restart_rect.collidepoint(pos):
                self.event_bus.emit(reset_event(source="restart_button"))
            return

        if self._canvas_rect.collidepoint(pos):
            self._jump(source="pointer")

    def _jump(self, source: str) -> None:
        logger.debug(f"Jump from {source}")
        self.jump_button._press()

    # Drawing
    def _render(self) -> None:
        """Render all UI elements."""
        if not self._screen:
            return

        self._screen.fill(self.config.bg_color)

        self._render_score()
        self._render_canvas()
        if self.renderer.end_screen_visible:
            self._render_end_screen()
        if self._show_debug:
            self._render_debug()

        pygame.display.flip()

    def _render_score(self) -> None:
        if not self._font:
            return
        text_surface = self._font.render(
            self.renderer.score_text, True, self.config.text_color
        )
        self._screen.blit(text_surface, (self.config.margin, self.config.margin))

    def _render_canvas(self) -> None:
        surface = self.canvas.render(self.renderer.buffer)
        self._screen.blit(surface, self._canvas_rect.topleft)
        pygame.draw.rect(self._screen, self.config.text_color, self._canvas_rect, 1)

    def _render_end_screen(self) -> None:
        """Game-over overlay with a restart button."""
        overlay = pygame.Surface(self._canvas_rect.size, pygame.SRCALPHA)
        overlay.fill(self.config.overlay_color)
        self._screen.blit(overlay, self._canvas_rect.topleft)

        if not self._big_font or not self._font:
            return

        title = self._big_font.render("GAME OVER", True, (255, 255, 255))
        title_rect = title.get_rect(
            center=(self._canvas_rect.centerx, self._canvas_rect.centery - 30)
        )
        self._screen.blit(title, title_rect)

        pygame.draw.rect(
            self._screen, self.config.button_color, self._restart_rect, border_radius=6
        )
        label = self._font.render("Restart", True, self.config.button_text_color)
        self._screen.blit(label, label.get_rect(center=self._restart_rect.center))

    def _render_debug(self) -> None:
        """Frame, speed and obstacle count in the top-right corner."""
        if not self._small_font:
            return

        lines = [
            f"FPS: {self._clock.get_fps():.1f}" if self._clock else "FPS: --",
            f"Frame: {self._stats.get('frame', 0)}",
            f"Speed: {self._stats.get('speed', 0.0):.3f}",
            f"Obstacles: {self._stats.get('obstacles', 0)}",
        ]

        x = self._canvas_rect.right - 160
        y = self.config.margin
        for line in lines:
            text_surface = self._small_font.render(line, True, self.config.text_color)
            self._screen.blit(text_surface, (x, y))
            y += 16

    def _screenshot_path(self, now: datetime | None = None) -> Path:
        """Timestamped file under the screenshot directory."""
        stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S_%f")
        return self.config.screenshot_dir / f"screenshot_{stamp}.png"

    def _capture_screenshot(self) -> None:
        """Capture and save a screenshot."""
        if self._screen:
            path = self._screenshot_path()
            path.parent.mkdir(parents=True, exist_ok=True)
            pygame.image.save(self._screen, str(path))
            logger.info(f"Screenshot saved: {path}")

    # Main loop
    async def run(self) -> None:
        """Main simulator loop."""
        self._init_pygame()
        self._running = True

        logger.info("Simulator started")

        while self._running:
            self._handle_events()

            # Frame callbacks: one game tick per presented frame
            self.scheduler.run_pending()

            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            # Yield to other tasks
            await asyncio.sleep(0)

        self.event_bus.emit(Event(EventType.SHUTDOWN, source="window"))
        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        """Stop the simulator."""
        self._running = False
