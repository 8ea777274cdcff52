"""Tween - time-bounded interpolation from a start value to an end value."""
from __future__ import annotations

from dataclasses import dataclass

from spirograph.easing import EASINGS

DELAYED = "delayed"
ANIMATING = "animating"
FINISHED = "finished"


@dataclass(frozen=True)
class TweenSpec:
    """How one tween runs: its length, start delay and easing (milliseconds)."""

    duration_ms: float
    delay_ms: float = 0.0
    easing: str = "linear"

    def __post_init__(self) -> None:
        if self.duration_ms <= 0:
            raise ValueError("duration_ms must be positive")
        if self.delay_ms < 0:
            raise ValueError("delay_ms must be non-negative")
        if self.easing not in EASINGS:
            raise KeyError(f"unknown easing {self.easing!r}")

    @property
    def total_ms(self) -> float:
        return self.delay_ms + self.duration_ms


class Tween:
    """Interpolation state machine: ``delayed`` -> ``animating`` -> ``finished``.

    ``elapsed_ms`` counts from the moment the tween was created, so the first
    ``delay_ms`` of it hold the value at ``start``. On completion the value
    snaps to ``end`` exactly.
    """

    def __init__(self, start: float, end: float, spec: TweenSpec) -> None:
        self.start = start
        self.end = end
        self.spec = spec
        self.elapsed_ms = 0.0
        self._easing = EASINGS[spec.easing]

    @property
    def phase(self) -> str:
        if self.elapsed_ms >= self.spec.total_ms:
            return FINISHED
        if self.elapsed_ms < self.spec.delay_ms:
            return DELAYED
        return ANIMATING

    @property
    def finished(self) -> bool:
        return self.phase == FINISHED

    @property
    def fraction(self) -> float:
        """Linear progress through the animating phase, in [0, 1]."""
        active = self.elapsed_ms - self.spec.delay_ms
        if active <= 0:
            return 0.0
        return min(active / self.spec.duration_ms, 1.0)

    @property
    def value(self) -> float:
        if self.finished:
            return self.end
        eased = self._easing(self.fraction)
        return self.start + (self.end - self.start) * eased

    def advance(self, dt_ms: float) -> float:
        """Move forward by ``dt_ms``; return the time left over past the end."""
        if dt_ms < 0:
            raise ValueError("dt_ms must be non-negative")
        self.elapsed_ms += dt_ms
        overshoot = self.elapsed_ms - self.spec.total_ms
        if overshoot > 0:
            self.elapsed_ms = self.spec.total_ms
            return overshoot
        return 0.0

    def __repr__(self) -> str:
        return (
            f"Tween({self.start} -> {self.end}, {self.phase}, "
            f"elapsed_ms={self.elapsed_ms:.1f}, spec={self.spec})"
        )
