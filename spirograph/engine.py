"""Engine - ordered systems over a shared sketch state, with lifecycle hooks."""

from __future__ import annotations

from typing import Generic

from spirograph.clock import Clock
from spirograph.types import S, System


class Engine(Generic[S]):
    """Runs systems ``(state, ctx) -> None`` once per fixed tick.

    The state object is opaque to the engine; for the sketch it is the
    ``Sketch`` bundle of driver, animator and latest frame.
    """

    def __init__(self, state: S, tps: int = 60) -> None:
        self._clock = Clock(tps)
        self._state = state
        self._systems: list[System[S]] = []
        self._start_hooks: list[System[S]] = []
        self._stop_hooks: list[System[S]] = []
        self._stop_requested = False
        self._started = False

    @property
    def state(self) -> S:
        return self._state

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def add_system(self, system: System[S]) -> None:
        self._systems.append(system)

    def on_start(self, hook: System[S]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: System[S]) -> None:
        self._stop_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self.request_stop)
        for system in self._systems:
            system(self._state, ctx)
            if self._stop_requested:
                break

    def start(self) -> None:
        """Fire start hooks once; later calls are no-ops."""
        if self._started:
            return
        self._started = True
        self._stop_requested = False
        ctx = self._clock.context(self.request_stop)
        for hook in self._start_hooks:
            hook(self._state, ctx)

    def stop(self) -> None:
        if not self._started:
            return
        self._started = False
        ctx = self._clock.context(self.request_stop)
        for hook in self._stop_hooks:
            hook(self._state, ctx)

    def pump(self, seconds: float) -> int:
        """Feed wall time and run every tick that became due. Returns ticks run."""
        due = self._clock.accumulate(seconds)
        ran = 0
        for _ in range(due):
            self._tick()
            ran += 1
            if self._stop_requested:
                break
        return ran

    def run(self, n: int) -> None:
        """Run exactly ``n`` ticks between the start and stop hooks, ignoring wall time."""
        self.start()
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break
        self.stop()
