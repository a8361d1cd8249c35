"""
Fixed-rate simulation clock.

Ticks (movement, collision, growth) fire at a fixed period. The frame pass
runs once per advance() regardless of how many ticks fired, and only reads
state.
"""

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class SimulationClock:
    """
    Accumulates elapsed time and fires on_tick once per full period.

    Args:
        tick_ms: tick period in milliseconds
        on_tick: called once per tick with no arguments
        on_frame: called once per advance() with the elapsed milliseconds
    """

    def __init__(
        self,
        tick_ms: float,
        on_tick: Callable[[], object],
        on_frame: Optional[Callable[[float], object]] = None,
    ):
        if tick_ms <= 0:
            raise ValueError(f"Tick period must be positive, got {tick_ms}")
        self.tick_ms = tick_ms
        self.on_tick = on_tick
        self.on_frame = on_frame
        self.accumulated_ms = 0.0
        self.ticks_fired = 0

    def advance(self, elapsed_ms: float) -> int:
        """
        Feed elapsed wall time into the clock.

        Returns:
            Number of ticks fired during this call
        """
        if elapsed_ms < 0:
            raise ValueError(f"Elapsed time cannot be negative, got {elapsed_ms}")

        self.accumulated_ms += elapsed_ms
        fired = 0
        while self.accumulated_ms >= self.tick_ms:
            self.accumulated_ms -= self.tick_ms
            self.on_tick()
            fired += 1
        self.ticks_fired += fired

        if self.on_frame is not None:
            self.on_frame(elapsed_ms)
        return fired

    def reset(self) -> None:
        self.accumulated_ms = 0.0
        self.ticks_fired = 0

    def run(
        self,
        max_ticks: Optional[int] = None,
        stop_when: Optional[Callable[[], bool]] = None,
        frame_ms: float = 16.0,
        now: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """
        Drive the clock from wall time until max_ticks ticks have fired or
        stop_when() returns True. A slow frame can fire several ticks at
        once, so the count may overshoot max_ticks.

        Returns:
            Number of ticks fired by this run
        """
        start_ticks = self.ticks_fired
        last = now()
        logger.info("Clock running at %.0f ms per tick", self.tick_ms)

        while True:
            if max_ticks is not None and self.ticks_fired - start_ticks >= max_ticks:
                break
            if stop_when is not None and stop_when():
                break
            sleep(frame_ms / 1000.0)
            current = now()
            self.advance((current - last) * 1000.0)
            last = current

        return self.ticks_fired - start_ticks
