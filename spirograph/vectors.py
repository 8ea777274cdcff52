"""Rotating unit vectors and the scale/place chain that turns them into points."""
from __future__ import annotations

import math

from spirograph.config import INNER_SHIFT, OUTER_SHIFT
from spirograph.types import Point, Vec

INNER_SPEED = 1.0
OUTER_SPEED = math.pi


def evaluate(time: float, angular_speed: float, phase_shift: float) -> Vec:
    """Point on the unit circle at angle ``angular_speed * time + phase_shift``."""
    angle = angular_speed * time + phase_shift
    return (math.cos(angle), math.sin(angle))


# e^(t*i); callers pass the clock unchanged, the angle decreases as it grows
def inner_vector(time: float) -> Vec:
    return evaluate(-time, INNER_SPEED, INNER_SHIFT)


# e^(pi*t*i)
def outer_vector(time: float) -> Vec:
    return evaluate(-time, OUTER_SPEED, OUTER_SHIFT)


def scale(v: Vec, factor: float) -> Vec:
    return (v[0] * factor, v[1] * factor)


def place(v: Vec, origin_x: float, origin_y: float) -> Point:
    return (origin_x + v[0], origin_y + v[1])


def magnitude(v: Vec) -> float:
    return math.hypot(v[0], v[1])


def chain(time: float, center: Point, radius: float) -> tuple[Point, Point]:
    """Return ``(inner_point, outer_point)`` for clock value ``time``.

    The inner arm hangs off ``center``; the outer arm hangs off the inner tip.
    """
    inner = place(scale(inner_vector(time), radius), center[0], center[1])
    outer = place(scale(outer_vector(time), radius), inner[0], inner[1])
    return inner, outer
