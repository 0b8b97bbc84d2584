"""
Simulator entry point.

Runs jumprun in a desktop pygame window.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from jumprun.config.settings import GameSettings
from jumprun.core.driver import Driver, FrameCallbackScheduler
from jumprun.core.events import EventBus
from jumprun.graphics.renderer import BufferRenderer
from jumprun.simulator.window import SimulatorWindow, WindowConfig

logger = logging.getLogger(__name__)


def setup_logging(log_file: Path | None = None, debug: bool = False) -> None:
    """Configure logging for the simulator, optionally with file output."""
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    level = logging.DEBUG if debug else logging.INFO

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        # Truncate on each run for fresh logs
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logging.info(f"Logging to file: {log_file}")

    # Per-spawn detail is noisy even in debug runs
    logging.getLogger("jumprun.game.obstacles").setLevel(logging.INFO)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run jumprun in a desktop window")
    parser.add_argument("--fps", type=int, default=None, help="Frames per second")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for obstacles")
    parser.add_argument("--scale", type=int, default=1, help="Window pixels per canvas pixel")
    parser.add_argument("--fullscreen", action="store_true", help="Start fullscreen")
    parser.add_argument(
        "--screenshot-dir", type=Path, default=Path("screenshots"),
        help="Where S saves screenshots",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--log-file", type=Path, default=None, help="Also log to this file")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> GameSettings:
    """Environment/.env settings with CLI overrides applied."""
    overrides = {}
    if args.fps is not None:
        overrides["fps"] = args.fps
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.debug:
        overrides["debug"] = True
    return GameSettings(**overrides)


class JumprunSimulator:
    """Wires the driver, renderer and window together."""

    def __init__(
        self,
        settings: GameSettings,
        scale: int = 1,
        fullscreen: bool = False,
        screenshot_dir: Path = Path("screenshots"),
    ):
        self.settings = settings
        self.event_bus = EventBus()
        self.scheduler = FrameCallbackScheduler()

        self.renderer = BufferRenderer(
            width=settings.canvas.width,
            height=settings.canvas.height,
            ground_y=settings.ground_y,
        )

        self.window = SimulatorWindow(
            renderer=self.renderer,
            scheduler=self.scheduler,
            config=WindowConfig(
                fps=settings.fps,
                scale=scale,
                fullscreen=fullscreen,
                screenshot_dir=screenshot_dir,
            ),
            event_bus=self.event_bus,
        )

        self.driver = Driver(
            renderer=self.renderer,
            scheduler=self.scheduler,
            settings=settings,
            event_bus=self.event_bus,
            input_source=self.window.jump_button,
        )

        logger.info("JumprunSimulator initialized")

    async def run(self) -> None:
        """Run the simulator."""
        logger.info("Starting jumprun...")
        self.driver.start()
        try:
            await self.window.run()
        finally:
            self.driver.close()


def main(argv: list[str] | None = None) -> None:
    """Main entry point for simulator."""
    load_dotenv()
    args = parse_args(argv)
    setup_logging(args.log_file, debug=args.debug)

    logger.info("Controls:")
    logger.info("  SPACE/UP/click - Jump")
    logger.info("  R              - Restart")
    logger.info("  D              - Toggle debug overlay")
    logger.info("  S              - Screenshot")
    logger.info("  Q/ESC          - Quit")

    try:
        settings = build_settings(args)
        simulator = JumprunSimulator(
            settings,
            scale=args.scale,
            fullscreen=args.fullscreen,
            screenshot_dir=args.screenshot_dir,
        )
        asyncio.run(simulator.run())
    except KeyboardInterrupt:
        logger.info("Simulator stopped by user")
    except Exception as e:
        logger.exception(f"Simulator error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
