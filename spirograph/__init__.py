"""spirograph - A two-arm rotating-vector sketch that traces its outer tip."""
from __future__ import annotations

from spirograph.animator import TrajectoryAnimator, make_animator_system
from spirograph.clock import Clock
from spirograph.config import SketchConfig
from spirograph.driver import TimeDriver, make_driver_system
from spirograph.easing import EASINGS
from spirograph.engine import Engine
from spirograph.frame import Circle, Frame, FrameStyle, Line, Polyline, build_frame
from spirograph.sketch import Sketch, build_sketch
from spirograph.trail import Trail
from spirograph.tween import Tween, TweenSpec
from spirograph.types import SketchError, TickContext, WindowError
from spirograph.vectors import evaluate, inner_vector, outer_vector, place, scale

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "SketchConfig",
    "Sketch",
    "build_sketch",
    "TimeDriver",
    "make_driver_system",
    "TrajectoryAnimator",
    "make_animator_system",
    "Tween",
    "TweenSpec",
    "EASINGS",
    "Trail",
    "Circle",
    "Line",
    "Polyline",
    "Frame",
    "FrameStyle",
    "build_frame",
    "evaluate",
    "inner_vector",
    "outer_vector",
    "scale",
    "place",
    "SketchError",
    "WindowError",
]
