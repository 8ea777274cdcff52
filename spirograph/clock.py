"""Fixed-timestep host clock: tick counting and wall-time accumulation."""

from typing import Callable

from spirograph.types import TickContext

# Upper bound on ticks replayed after a stall (window drag, debugger pause).
MAX_CATCH_UP = 10


class Clock:
    """Counts fixed ticks and converts wall time into a number of due ticks."""

    def __init__(self, tps: int, max_catch_up: int = MAX_CATCH_UP) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        if max_catch_up <= 0:
            raise ValueError("max_catch_up must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._accumulator = 0.0
        self._max_catch_up = max_catch_up

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def pending(self) -> float:
        """Wall time (seconds) fed in but not yet consumed by a tick."""
        return self._accumulator

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def accumulate(self, seconds: float) -> int:
        """Add elapsed wall time and return how many ticks are now due.

        Time beyond ``max_catch_up`` ticks is dropped so a long stall does not
        turn into a burst of frames.
        """
        if seconds < 0:
            raise ValueError("elapsed time must be non-negative")
        self._accumulator += seconds
        due = int(self._accumulator // self._dt)
        if due > self._max_catch_up:
            due = self._max_catch_up
            self._accumulator = 0.0
        else:
            self._accumulator -= due * self._dt
        return due

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
            request_stop=stop_fn,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
        self._accumulator = 0.0
