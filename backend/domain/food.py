"""
Food placement and food collision rules.
"""

import itertools
import logging
import random
from dataclasses import dataclass
from typing import Collection, Iterator, List, Optional, Tuple

from .constants import DEFAULT_MAX_SPAWN_ATTEMPTS
from .exceptions import BoardFull
from .position import GridPosition

logger = logging.getLogger(__name__)

AxisRange = Tuple[int, int]


@dataclass(frozen=True)
class Bounds:
    """
    Inclusive per-axis ranges food may be placed in.

    An axis whose low and high ends are equal is fixed rather than
    randomized. The defaults only randomize y over -5..5, which is the
    column the snake starts in.
    """

    x: AxisRange = (0, 0)
    y: AxisRange = (-5, 5)
    z: AxisRange = (0, 0)

    def __post_init__(self):
        for axis, (lo, hi) in zip("xyz", (self.x, self.y, self.z)):
            if lo > hi:
                raise ValueError(f"Bounds for axis {axis} are empty: {lo} > {hi}")

    @property
    def randomized_axes(self) -> List[str]:
        return [axis for axis, (lo, hi) in zip("xyz", (self.x, self.y, self.z)) if lo != hi]

    def contains(self, position: GridPosition) -> bool:
        return (
            self.x[0] <= position.x <= self.x[1]
            and self.y[0] <= position.y <= self.y[1]
            and self.z[0] <= position.z <= self.z[1]
        )

    def cells(self) -> Iterator[GridPosition]:
        """Every lattice point inside the bounds, in x, y, z order."""
        for x, y, z in itertools.product(
            range(self.x[0], self.x[1] + 1),
            range(self.y[0], self.y[1] + 1),
            range(self.z[0], self.z[1] + 1),
        ):
            yield GridPosition(x, y, z)

    def random_cell(self, rng: random.Random) -> GridPosition:
        return GridPosition(
            rng.randint(*self.x),
            rng.randint(*self.y),
            rng.randint(*self.z),
        )

    def __len__(self) -> int:
        return (
            (self.x[1] - self.x[0] + 1)
            * (self.y[1] - self.y[0] + 1)
            * (self.z[1] - self.z[0] + 1)
        )

    @classmethod
    def parse(cls, text: str) -> "Bounds":
        """
        Parse "x0:x1,y0:y1,z0:z1" into Bounds.

        A single number for an axis fixes it, e.g. "0,-5:5,0".
        """
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 3:
            raise ValueError(f"Expected three axis ranges, got {text!r}")

        ranges = []
        for part in parts:
            # Split on the separator colon, not on a leading minus sign
            lo, sep, hi = part.partition(":")
            ranges.append((int(lo), int(hi)) if sep else (int(lo), int(lo)))
        return cls(*ranges)

    def __str__(self):
        return ",".join(f"{lo}:{hi}" for lo, hi in (self.x, self.y, self.z))


def check_food_eaten(head_position: GridPosition, food_position: Optional[GridPosition]) -> bool:
    """Return True iff food is present and sits exactly on the head."""
    return food_position is not None and food_position == head_position


class FoodSpawner:
    """
    Picks a free cell for food inside the configured bounds.

    Candidates are drawn uniformly by rejection sampling. After
    max_attempts rejections the free cells are enumerated directly, so a
    nearly full board still terminates and a full one raises BoardFull.
    """

    def __init__(
        self,
        bounds: Optional[Bounds] = None,
        rng: Optional[random.Random] = None,
        max_attempts: int = DEFAULT_MAX_SPAWN_ATTEMPTS,
    ):
        if max_attempts < 0:
            raise ValueError("max_attempts must not be negative")
        self.bounds = bounds if bounds is not None else Bounds()
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts

    def spawn(
        self,
        occupied_positions: Collection[GridPosition],
        bounds: Optional[Bounds] = None,
        rng: Optional[random.Random] = None,
    ) -> GridPosition:
        """
        Choose a food position not in occupied_positions.

        Args:
            occupied_positions: cells held by the snake right now
            bounds: overrides the spawner's bounds for this call
            rng: overrides the spawner's random source for this call

        Returns:
            A cell inside the bounds that nothing occupies

        Raises:
            BoardFull: if every cell in the bounds is occupied
        """
        bounds = bounds if bounds is not None else self.bounds
        rng = rng or self.rng
        occupied = set(occupied_positions)

        for attempt in range(self.max_attempts):
            candidate = bounds.random_cell(rng)
            if candidate not in occupied:
                logger.debug("Spawned new food at %s after %d attempt(s)", candidate, attempt + 1)
                return candidate

        free = [cell for cell in bounds.cells() if cell not in occupied]
        if not free:
            raise BoardFull(cells=len(bounds), occupied=len(occupied))

        candidate = rng.choice(free)
        logger.debug(
            "Rejection sampling gave up after %d attempts; picked %s from %d free cells",
            self.max_attempts, candidate, len(free),
        )
        return candidate
