"""Tests for the trajectory animator and the end-to-end sketch wiring."""

import math

import pytest
from spirograph.animator import TrajectoryAnimator, make_animator_system
from spirograph.config import OUTER_SHIFT, SketchConfig
from spirograph.driver import RUNNING, make_driver_system
from spirograph.frame import Circle, Line, Polyline
from spirograph.sketch import build_sketch
from spirograph.types import TickContext


def _ctx(dt_seconds, tick_number=1):
    return TickContext(
        tick_number=tick_number,
        dt=dt_seconds,
        elapsed=dt_seconds * tick_number,
        request_stop=lambda: None,
    )


class TestTrajectoryAnimator:
    """Test rendering directly from a clock value."""

    def test_from_config_uses_window_center(self):
        animator = TrajectoryAnimator.from_config(SketchConfig())
        assert animator.center == (400.0, 300.0)
        assert animator.radius == 128.0
        assert animator.style.center_point_radius == 2.0

    def test_points_at_clock_zero(self):
        animator = TrajectoryAnimator.from_config(SketchConfig())
        frame = animator.render(0.0)
        circle, inner_arm, outer_arm, polyline = frame

        assert isinstance(circle, Circle)
        assert circle.center == (400.0, 300.0)

        inner = inner_arm.end
        assert inner[0] == pytest.approx(400.0, abs=1e-9)
        assert inner[1] == pytest.approx(172.0, abs=1e-9)

        outer = outer_arm.end
        assert outer_arm.start == inner
        assert outer[0] == pytest.approx(400.0 + 128.0 * math.cos(-49 * math.pi / 36), abs=1e-9)
        assert outer[1] == pytest.approx(172.0 + 128.0 * math.sin(-49 * math.pi / 36), abs=1e-9)

        assert isinstance(polyline, Polyline)
        assert polyline.segments == ()

    def test_each_render_appends_one_point(self):
        animator = TrajectoryAnimator.from_config(SketchConfig())
        for i in range(1, 6):
            animator.render(i * 0.1)
            assert len(animator.trail) == i
            assert animator.frames_rendered == i

    def test_trail_holds_outer_tips_in_order(self):
        animator = TrajectoryAnimator.from_config(SketchConfig())
        times = [0.0, 0.5, 1.0]
        frames = [animator.render(t) for t in times]
        assert list(animator.trail) == [f[2].end for f in frames]

    def test_arms_do_not_touch_trail(self):
        animator = TrajectoryAnimator.from_config(SketchConfig())
        animator.arms(1.0)
        assert len(animator.trail) == 0

    def test_density_scales_lengths(self):
        animator = TrajectoryAnimator.from_config(SketchConfig(density=2.0))
        assert animator.center == (800.0, 600.0)
        _, inner_arm, _, _ = animator.render(0.0)
        assert inner_arm.end[1] == pytest.approx(600.0 - 256.0, abs=1e-9)
        assert animator.style.center_point_radius == 4.0

    def test_outer_shift_constant(self):
        assert OUTER_SHIFT == -49 * math.pi / 36


class TestSketchSystems:
    """Test driver and animator systems working together."""

    def test_one_completed_delayed_step_gives_one_point(self):
        """A single tick spanning delay and duration renders exactly one frame."""
        sketch = build_sketch().state
        driver_system = make_driver_system()
        animator_system = make_animator_system()

        ctx = _ctx(10.0)
        driver_system(sketch, ctx)
        animator_system(sketch, ctx)

        assert sketch.driver.value == 5.0
        assert sketch.driver.state == RUNNING
        assert len(sketch.animator.trail) == 1
        assert sketch.frame is not None

    def test_no_frames_during_delay(self):
        sketch = build_sketch().state
        driver_system = make_driver_system()
        animator_system = make_animator_system()

        for i in range(1, 5):
            ctx = _ctx(1.0, i)
            driver_system(sketch, ctx)
            animator_system(sketch, ctx)

        assert sketch.clock_moved is False
        assert sketch.frame is None
        assert len(sketch.animator.trail) == 0

    def test_delay_parameter_per_step(self):
        sketch = build_sketch().state
        driver_system = make_driver_system()

        step_one_delay = sketch.driver.spec.delay_ms
        driver_system(sketch, _ctx(10.0))
        step_two_delay = sketch.driver.spec.delay_ms

        assert step_one_delay == 5000
        assert step_two_delay == 0

    def test_engine_trail_matches_frames_rendered(self):
        """Over many fixed ticks, trail length equals ticks where the clock moved."""
        engine = build_sketch(SketchConfig(tps=60))
        moved = []
        engine.add_system(lambda sketch, ctx: moved.append(sketch.clock_moved))

        engine.run(290)
        assert len(engine.state.animator.trail) == 0
        assert engine.state.driver.value == 0.0

        engine.run(700)
        trail = engine.state.animator.trail
        assert len(trail) == sum(moved)
        assert len(trail) > 0
        assert engine.state.driver.state == RUNNING
        assert engine.state.driver.value > 5.0
        assert len(list(trail.segments())) == len(trail) - 1

    def test_latest_frame_polyline_covers_trail(self):
        engine = build_sketch(SketchConfig(delay_ms=0, duration_ms=1000, tps=20))
        engine.run(30)
        frame = engine.state.frame
        assert frame is not None
        assert frame[3].points() == list(engine.state.animator.trail)
        assert isinstance(frame[1], Line)
