"""Append-only trail of traced outer-arm positions."""
from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Iterator

from spirograph.types import Point


class Trail:
    """Ordered points in the order they were traced.

    There is no bound or eviction: the trail grows for the life of the run.
    """

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._points: list[Point] = list(points)

    def append(self, point: Point) -> None:
        self._points.append(point)

    def segments(self) -> Iterator[tuple[Point, Point]]:
        """Lazily yield consecutive pairs; ``len(self) - 1`` of them, or none."""
        return pairwise(self._points)

    def points(self) -> list[Point]:
        """Copy of the traced points."""
        return list(self._points)

    @property
    def last(self) -> Point | None:
        return self._points[-1] if self._points else None

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __repr__(self) -> str:
        return f"Trail(len={len(self._points)}, last={self.last!r})"
