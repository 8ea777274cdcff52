"""Shared type aliases, tick context and errors for the spirograph animator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

Vec = tuple[float, float]
Point = tuple[float, float]
Color = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


class SketchError(Exception):
    """Base class for spirograph failures."""


class WindowError(SketchError):
    """Raised when the host window surface cannot be created."""


S = TypeVar("S")

# A per-tick step (or lifecycle hook) over engine state of type S.
System = Callable[[S, TickContext], None]
