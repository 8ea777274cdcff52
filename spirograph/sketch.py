"""Build the complete sketch state and the engine that drives it."""
from __future__ import annotations

from dataclasses import dataclass

from spirograph.animator import TrajectoryAnimator, make_animator_system
from spirograph.config import SketchConfig
from spirograph.driver import TimeDriver, make_driver_system
from spirograph.engine import Engine
from spirograph.frame import Frame


@dataclass
class Sketch:
    """Holds the clock driver, the animator and the most recent frame."""

    config: SketchConfig
    driver: TimeDriver
    animator: TrajectoryAnimator
    frame: Frame | None = None
    # Set by the driver system each tick, read by the animator system.
    clock_moved: bool = False


def build_sketch(config: SketchConfig | None = None) -> Engine[Sketch]:
    """Wire driver and animator systems (driver first) into a fresh engine."""
    if config is None:
        config = SketchConfig()

    driver = TimeDriver(
        time_speed=config.time_speed,
        duration_ms=config.duration_ms,
        delay_ms=config.delay_ms,
        easing=config.easing,
    )
    sketch = Sketch(
        config=config,
        driver=driver,
        animator=TrajectoryAnimator.from_config(config),
    )

    engine = Engine(sketch, tps=config.tps)
    engine.add_system(make_driver_system())
    engine.add_system(make_animator_system())
    return engine
