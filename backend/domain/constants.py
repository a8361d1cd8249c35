"""
Game constants for the grid snake simulation.
"""

from enum import Enum

from .exceptions import InvalidDirection
from .position import GridPosition


class Direction(str, Enum):
    """The six axis-aligned headings a snake head can travel in."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    FORWARD = "FORWARD"
    BACKWARD = "BACKWARD"

    @property
    def delta(self) -> GridPosition:
        """Unit vector this direction moves the head by."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _BY_DELTA[GridPosition(-self.delta.x, -self.delta.y, -self.delta.z)]

    @classmethod
    def from_delta(cls, delta: GridPosition) -> "Direction":
        """
        Map a unit vector back to its Direction.

        Raises:
            InvalidDirection: for the zero vector or any non-unit vector
        """
        try:
            return _BY_DELTA[GridPosition(*delta)]
        except (KeyError, TypeError):
            raise InvalidDirection(f"Not a unit direction vector: {delta!r}") from None

    @classmethod
    def parse(cls, name: str) -> "Direction":
        """Case-insensitive lookup by name, e.g. "up" -> Direction.UP."""
        try:
            return cls[name.strip().upper()]
        except (KeyError, AttributeError):
            raise InvalidDirection(f"Unknown direction: {name!r}") from None


_DELTAS = {
    Direction.UP: GridPosition(0, 1, 0),
    Direction.DOWN: GridPosition(0, -1, 0),
    Direction.RIGHT: GridPosition(1, 0, 0),
    Direction.LEFT: GridPosition(-1, 0, 0),
    Direction.FORWARD: GridPosition(0, 0, 1),
    Direction.BACKWARD: GridPosition(0, 0, -1),
}
_BY_DELTA = {delta: direction for direction, delta in _DELTAS.items()}

# Movement directions, kept as names for config and CLI parsing
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
FORWARD = Direction.FORWARD
BACKWARD = Direction.BACKWARD
VALID_MOVES = set(Direction)

# Simulation defaults
DEFAULT_TICK_MS = 1300
DEFAULT_HEADING = UP
DEFAULT_CHAIN = (GridPosition(0, 0, 0), GridPosition(0, -1, 0))
DEFAULT_FOOD = GridPosition(0, 1, 0)
DEFAULT_MAX_SPAWN_ATTEMPTS = 64
