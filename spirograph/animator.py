"""Trajectory animator: clock value in, traced point and frame commands out."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from spirograph.frame import Frame, FrameStyle, build_frame
from spirograph.trail import Trail
from spirograph.types import Point
from spirograph.vectors import chain

if TYPE_CHECKING:
    from spirograph.config import SketchConfig
    from spirograph.sketch import Sketch
    from spirograph.types import System, TickContext

_logger = logging.getLogger(__name__)

TRAIL_LOG_INTERVAL = 1000


class TrajectoryAnimator:
    """Evaluates both arms at a clock value and records the outer tip.

    Each call to ``render`` appends exactly one point, so the trail length
    always equals the number of frames rendered.
    """

    def __init__(self, center: Point, radius: float, style: FrameStyle) -> None:
        self.center = center
        self.radius = radius
        self.style = style
        self.trail = Trail()

    @classmethod
    def from_config(cls, config: SketchConfig) -> TrajectoryAnimator:
        style = FrameStyle(
            center_point_radius=config.center_point_radius_px,
            inner_color=config.inner_color,
            outer_color=config.outer_color,
        )
        return cls(center=config.center, radius=config.radius_px, style=style)

    @property
    def frames_rendered(self) -> int:
        return len(self.trail)

    def arms(self, time: float) -> tuple[Point, Point]:
        """Inner and outer tip positions at ``time``, without touching the trail."""
        return chain(time, self.center, self.radius)

    def render(self, time: float) -> Frame:
        inner, outer = self.arms(time)
        self.trail.append(outer)
        if len(self.trail) % TRAIL_LOG_INTERVAL == 0:
            _logger.debug("trail holds %d points", len(self.trail))
        return build_frame(self.center, inner, outer, self.trail, self.style)


def make_animator_system() -> System[Sketch]:
    """Return a system that renders a frame whenever the clock moved this tick."""

    def animator_system(sketch: Sketch, ctx: TickContext) -> None:
        if not sketch.clock_moved:
            return
        sketch.frame = sketch.animator.render(sketch.driver.value)

    return animator_system
