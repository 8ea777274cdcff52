"""Draw commands for one frame of the sketch."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from spirograph.trail import Trail
from spirograph.types import Color, Point


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
    color: Color


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    color: Color


@dataclass(frozen=True)
class Polyline:
    """Connected segments, each ending where the next begins."""

    segments: tuple[tuple[Point, Point], ...]
    color: Color

    @classmethod
    def from_segments(cls, segments: Iterable[tuple[Point, Point]], color: Color) -> Polyline:
        return cls(segments=tuple(segments), color=color)

    def points(self) -> list[Point]:
        if not self.segments:
            return []
        return [self.segments[0][0]] + [end for _, end in self.segments]


DrawCommand = Union[Circle, Line, Polyline]
Frame = tuple[DrawCommand, ...]


@dataclass(frozen=True)
class FrameStyle:
    center_point_radius: float
    inner_color: Color
    outer_color: Color


def build_frame(
    center: Point,
    inner: Point,
    outer: Point,
    trail: Trail,
    style: FrameStyle,
) -> Frame:
    """Commands in paint order: center marker, inner arm, outer arm, trail.

    The marker and inner arm use the inner color; the outer arm and the trail
    use the outer color.
    """
    return (
        Circle(center=center, radius=style.center_point_radius, color=style.inner_color),
        Line(start=center, end=inner, color=style.inner_color),
        Line(start=inner, end=outer, color=style.outer_color),
        Polyline.from_segments(trail.segments(), style.outer_color),
    )
