"""Spirograph window: pygame host loop around the sketch engine.

Opens a single window and runs until it is closed. There are no controls.
"""
from __future__ import annotations

import logging
import sys

import pygame

from spirograph.config import SketchConfig
from spirograph.engine import Engine
from spirograph.render import draw_frame
from spirograph.sketch import Sketch, build_sketch
from spirograph.types import TickContext, WindowError

_logger = logging.getLogger(__name__)


def open_window(config: SketchConfig) -> pygame.Surface:
    """Create the display surface. Raises WindowError if pygame cannot."""
    try:
        screen = pygame.display.set_mode(config.size_px)
    except pygame.error as exc:
        raise WindowError(f"could not open a {config.size_px} window: {exc}") from exc
    pygame.display.set_caption(config.title)
    _logger.info("opened %dx%d window", *config.size_px)
    return screen


def _log_start(sketch: Sketch, ctx: TickContext) -> None:
    _logger.info(
        "animation starts after a %d ms delay, %d ticks per second",
        sketch.config.delay_ms,
        sketch.config.tps,
    )


def _log_stop(sketch: Sketch, ctx: TickContext) -> None:
    _logger.info(
        "window closed after %d ticks, trail holds %d points",
        ctx.tick_number,
        len(sketch.animator.trail),
    )


def run(config: SketchConfig | None = None, max_frames: int | None = None) -> Engine[Sketch]:
    """Run the sketch until the window closes or ``max_frames`` frames are shown.

    Returns the engine so callers can inspect the final sketch state.
    """
    if config is None:
        config = SketchConfig()

    pygame.init()
    try:
        screen = open_window(config)
        clock = pygame.time.Clock()
        engine = build_sketch(config)
        engine.on_start(_log_start)
        engine.on_stop(_log_stop)
        engine.start()

        shown = 0
        running = True
        while running:
            dt = clock.tick(config.fps) / 1000.0

            # --- Events ---
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            # --- Tick ---
            engine.pump(dt)

            # --- Render ---
            screen.fill(config.background)
            frame = engine.state.frame
            if frame is not None:
                draw_frame(screen, frame)
            pygame.display.flip()

            shown += 1
            if max_frames is not None and shown >= max_frames:
                running = False

        engine.stop()
        return engine
    finally:
        pygame.quit()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run()
    except WindowError as exc:
        _logger.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
