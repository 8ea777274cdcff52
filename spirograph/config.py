"""Sketch constants and the configuration dataclass built from them."""
from __future__ import annotations

import math
from dataclasses import dataclass

from spirograph.easing import EASINGS
from spirograph.types import Color, Point

# Window (device-independent units)
WIDTH = 800
HEIGHT = 600
TITLE = "Spirograph"

# Arms
RADIUS = 128
CENTER_POINT_RADIUS = 2

INNER_SHIFT = -math.pi / 2
OUTER_SHIFT = -49 * math.pi / 36

# Colors
INNER_COLOR: Color = (0, 0, 255)
OUTER_COLOR: Color = (0, 255, 0)
BG_COLOR: Color = (255, 255, 255)

# Animation (durations in milliseconds)
TIME_SPEED = 5.0
DURATION_MS = 5000
DELAY_MS = 5000
EASING = "linear"

# Timing
FPS = 60
TPS = 60


@dataclass(frozen=True)
class SketchConfig:
    """Immutable configuration for one spirograph window.

    Attributes:
        width: Window width in device-independent units.
        height: Window height in device-independent units.
        radius: Length of both arms in device-independent units.
        center_point_radius: Radius of the filled center marker.
        inner_color: Color of the center marker and the inner arm.
        outer_color: Color of the outer arm and the trail.
        background: Window fill color.
        time_speed: Clock increment per animation step.
        duration_ms: Length of one animation step.
        delay_ms: Start delay applied to the first step only.
        easing: Name of the easing curve used by every step.
        density: Pixels per device-independent unit. Never queried from the
            display; pass it explicitly for high-DPI output.
        tps: Animation ticks per second.
        fps: Window redraw cap.
        title: Window caption.
    """

    width: int = WIDTH
    height: int = HEIGHT
    radius: float = RADIUS
    center_point_radius: float = CENTER_POINT_RADIUS
    inner_color: Color = INNER_COLOR
    outer_color: Color = OUTER_COLOR
    background: Color = BG_COLOR
    time_speed: float = TIME_SPEED
    duration_ms: int = DURATION_MS
    delay_ms: int = DELAY_MS
    easing: str = EASING
    density: float = 1.0
    tps: int = TPS
    fps: int = FPS
    title: str = TITLE

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("window size must be positive")
        if self.radius <= 0 or self.center_point_radius <= 0:
            raise ValueError("radii must be positive")
        if self.duration_ms <= 0:
            raise ValueError("duration_ms must be positive")
        if self.delay_ms < 0:
            raise ValueError("delay_ms must be non-negative")
        if self.density <= 0:
            raise ValueError("density must be positive")
        if self.tps <= 0 or self.fps <= 0:
            raise ValueError("tps and fps must be positive")
        if self.easing not in EASINGS:
            raise ValueError(f"unknown easing {self.easing!r}")

    def to_px(self, length: float) -> float:
        return length * self.density

    @property
    def size_px(self) -> tuple[int, int]:
        return (round(self.to_px(self.width)), round(self.to_px(self.height)))

    @property
    def center(self) -> Point:
        """Window center in pixels."""
        return (self.to_px(self.width) / 2, self.to_px(self.height) / 2)

    @property
    def radius_px(self) -> float:
        return self.to_px(self.radius)

    @property
    def center_point_radius_px(self) -> float:
        return self.to_px(self.center_point_radius)
