"""Animation clock driver: chains delayed-then-immediate tweens forever."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from spirograph.tween import Tween, TweenSpec

if TYPE_CHECKING:
    from spirograph.sketch import Sketch
    from spirograph.types import System, TickContext

_logger = logging.getLogger(__name__)

DELAYED = "delayed"
RUNNING = "running"


class TimeDriver:
    """Owns the clock value and advances it one tween step at a time.

    Every step animates the value from ``v`` to ``v + time_speed``. The first
    step uses ``spec_with_delay``; once it completes the driver moves from
    ``"delayed"`` to ``"running"`` and every later step uses ``spec_no_delay``.
    ``"running"`` is terminal.
    """

    def __init__(
        self,
        time_speed: float = 1.0,
        duration_ms: float = 5000,
        delay_ms: float = 5000,
        easing: str = "linear",
        on_transition: Callable[[str, str], None] | None = None,
    ) -> None:
        self.time_speed = time_speed
        self.spec_with_delay = TweenSpec(duration_ms, delay_ms, easing)
        self.spec_no_delay = TweenSpec(duration_ms, 0.0, easing)
        self._on_transition = on_transition
        self._state = DELAYED
        self._spec = self.spec_with_delay
        self._steps_completed = 0
        self._tween = Tween(0.0, time_speed, self._spec)

    @property
    def state(self) -> str:
        return self._state

    @property
    def spec(self) -> TweenSpec:
        """Spec of the step currently in progress."""
        return self._spec

    @property
    def tween(self) -> Tween:
        return self._tween

    @property
    def steps_completed(self) -> int:
        return self._steps_completed

    @property
    def value(self) -> float:
        return self._tween.value

    def _complete_step(self) -> None:
        self._steps_completed += 1
        if self._state == DELAYED:
            self._state = RUNNING
            self._spec = self.spec_no_delay
            _logger.info("clock driver %s -> %s", DELAYED, RUNNING)
            if self._on_transition is not None:
                self._on_transition(DELAYED, RUNNING)
        end = self._tween.end
        self._tween = Tween(end, end + self.time_speed, self._spec)

    def advance(self, dt_ms: float) -> bool:
        """Advance by ``dt_ms`` milliseconds. Returns True if the value moved.

        Time left over when a step ends carries into the next step, so a
        single large ``dt_ms`` may complete several steps.
        """
        before = self.value
        remaining = dt_ms
        while True:
            remaining = self._tween.advance(remaining)
            if not self._tween.finished:
                break
            self._complete_step()
            if remaining <= 0:
                break
        return self.value != before


def make_driver_system() -> System[Sketch]:
    """Return a system that advances the sketch clock by one tick's worth of time."""

    def driver_system(sketch: Sketch, ctx: TickContext) -> None:
        sketch.clock_moved = sketch.driver.advance(ctx.dt * 1000.0)

    return driver_system
