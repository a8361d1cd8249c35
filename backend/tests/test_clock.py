"""Tests for the fixed-rate SimulationClock."""

import pytest
import sys
import os
from unittest.mock import Mock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from clock import SimulationClock
from config import SimulationConfig
from simulation import SimulationState


class FakeTime:
    """Deterministic stand-in for time.monotonic and time.sleep."""

    def __init__(self):
        self.now = 0.0

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.now += seconds


class TestSimulationClock:

    def test_rejects_non_positive_period(self):
        with pytest.raises(ValueError):
            SimulationClock(0, on_tick=Mock())

    def test_rejects_negative_elapsed(self):
        clock = SimulationClock(100, on_tick=Mock())
        with pytest.raises(ValueError):
            clock.advance(-1)

    def test_one_period_fires_one_tick(self):
        on_tick = Mock()
        clock = SimulationClock(1300, on_tick=on_tick)

        assert clock.advance(1300) == 1
        on_tick.assert_called_once_with()

    def test_partial_periods_accumulate(self):
        on_tick = Mock()
        clock = SimulationClock(1300, on_tick=on_tick)

        assert clock.advance(650) == 0
        assert clock.advance(649) == 0
        assert clock.advance(1) == 1
        assert on_tick.call_count == 1
        assert clock.accumulated_ms == 0

    def test_long_frame_fires_several_ticks(self):
        on_tick = Mock()
        clock = SimulationClock(1000, on_tick=on_tick)

        assert clock.advance(2500) == 2
        assert on_tick.call_count == 2
        assert clock.accumulated_ms == 500
        assert clock.ticks_fired == 2

    def test_frame_pass_runs_every_advance(self):
        on_tick = Mock()
        on_frame = Mock()
        clock = SimulationClock(1000, on_tick=on_tick, on_frame=on_frame)

        clock.advance(16)
        clock.advance(16)

        assert on_frame.call_count == 2
        on_frame.assert_called_with(16)
        on_tick.assert_not_called()

    def test_frame_pass_runs_after_ticks(self):
        calls = []
        clock = SimulationClock(
            100,
            on_tick=lambda: calls.append("tick"),
            on_frame=lambda ms: calls.append("frame"),
        )

        clock.advance(200)

        assert calls == ["tick", "tick", "frame"]

    def test_reset(self):
        clock = SimulationClock(1000, on_tick=Mock())
        clock.advance(1500)
        clock.reset()
        assert clock.accumulated_ms == 0
        assert clock.ticks_fired == 0

    def test_run_stops_after_max_ticks(self):
        fake = FakeTime()
        on_tick = Mock()
        clock = SimulationClock(250, on_tick=on_tick)

        fired = clock.run(max_ticks=3, frame_ms=125, now=fake.monotonic, sleep=fake.sleep)

        assert fired == 3
        assert on_tick.call_count == 3
        assert fake.now == 0.75

    def test_run_stops_when_asked(self):
        fake = FakeTime()
        clock = SimulationClock(250, on_tick=Mock())

        fired = clock.run(
            stop_when=lambda: clock.ticks_fired >= 2,
            frame_ms=125,
            now=fake.monotonic,
            sleep=fake.sleep,
        )

        assert fired == 2

    def test_drives_simulation_ticks(self):
        state = SimulationState(SimulationConfig(seed=7))
        frames = []
        clock = SimulationClock(
            state.config.tick_ms,
            on_tick=state.tick,
            on_frame=lambda ms: frames.append(state.snapshot().entities()),
        )

        clock.advance(state.config.tick_ms * 3)

        assert state.tick_count == 3
        assert len(frames) == 1
        assert frames[0][0][0] == "head"
