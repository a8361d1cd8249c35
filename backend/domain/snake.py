"""
SnakeChain entity for the simulation core.
"""

import logging
from collections import deque
from typing import Iterable, List, Optional, Set

from .constants import Direction
from .exceptions import GrowthWithoutPendingPosition, InvalidHeading
from .position import GridPosition

logger = logging.getLogger(__name__)


class SnakeChain:
    """
    Represents the snake as an explicit ordered chain of segments.

    Attributes:
        positions: deque of GridPosition from head at index 0 to tail at the end
        heading: direction the head moves in on the next tick
        pending_last_position: the tail's position before the most recent
            advance(), consumed by grow()
    """

    def __init__(self, positions: Iterable[GridPosition], heading: Direction = Direction.UP):
        self.positions = deque(GridPosition(*p) for p in positions)
        if len(self.positions) < 2:
            raise ValueError(
                f"A snake needs a head and at least one tail segment, got {len(self.positions)}"
            )
        self.heading = heading
        self.pending_last_position: Optional[GridPosition] = None
        self._queued_heading: Optional[Direction] = None

    @property
    def head(self) -> GridPosition:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> GridPosition:
        """Return the designated tail position (last element)."""
        return self.positions[-1]

    @property
    def queued_heading(self) -> Optional[Direction]:
        return self._queued_heading

    def __len__(self) -> int:
        return len(self.positions)

    def segments(self) -> List[GridPosition]:
        """Head-to-tail copy of the chain."""
        return list(self.positions)

    def occupied(self) -> Set[GridPosition]:
        """Cells covered by the chain right now. Recomputed on every call."""
        return set(self.positions)

    def queue_heading(self, direction: Direction) -> None:
        """
        Queue a heading change applied at the start of the next advance().

        Raises:
            InvalidHeading: if moving that way would put the head onto the
                second segment (a straight reversal)
        """
        if self.head + direction.delta == self.positions[1]:
            raise InvalidHeading(
                f"Cannot turn {direction.value}: head {self.head} would reverse into {self.positions[1]}"
            )
        self._queued_heading = direction
        logger.debug("Queued heading %s", direction.value)

    def advance(self) -> GridPosition:
        """
        Move the whole chain one cell along the heading.

        Every segment takes its predecessor's pre-tick position; the head
        moves by the heading delta. The pre-tick tail position is kept in
        pending_last_position for grow().

        Returns:
            The new head position
        """
        if self._queued_heading is not None:
            self.heading = self._queued_heading
            self._queued_heading = None

        self.pending_last_position = self.positions[-1]
        logger.debug("Saving last segment at %s", self.pending_last_position)

        new_head = self.head + self.heading.delta
        # appendleft + pop shifts every index by one against the same snapshot
        self.positions.appendleft(new_head)
        self.positions.pop()

        logger.debug("Moved head to %s", new_head)
        return new_head

    def grow(self, pending_last_position: Optional[GridPosition] = None) -> GridPosition:
        """
        Append a new tail segment at the tail's pre-tick position.

        Args:
            pending_last_position: explicit position to append at; defaults
                to the one captured by the last advance()

        Returns:
            The new tail position

        Raises:
            GrowthWithoutPendingPosition: if no advance() preceded this call
                or the captured position was already used this tick
        """
        position = pending_last_position
        if position is None:
            position = self.pending_last_position
        if position is None:
            raise GrowthWithoutPendingPosition(
                "grow() needs the tail position captured by advance()"
            )

        position = GridPosition(*position)
        self.positions.append(position)
        self.pending_last_position = None
        logger.debug("Spawned new tail segment at %s", position)
        return position

    def __repr__(self):
        return f"<SnakeChain heading={self.heading.value}, length={len(self)}, head={self.head}>"
