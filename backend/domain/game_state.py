"""
GameState entity - a read-only snapshot of the simulation at a tick.
"""

from typing import List, Optional, Tuple

from .constants import Direction
from .food import Bounds
from .position import GridPosition


def to_translation(position: GridPosition) -> Tuple[float, float, float]:
    """Continuous-space translation for a grid cell (direct per-axis cast)."""
    return (float(position.x), float(position.y), float(position.z))


class GameState:
    """
    A snapshot of the simulation at a specific tick.

    Attributes:
        tick_number: how many ticks have run (0 before the first tick)
        segments: tuple of GridPosition from head to tail
        heading: direction the head is travelling in
        food: the current food cell, or None while absent
        bounds: the region food is placed in
        game_over: whether the simulation has ended
    """

    def __init__(
        self,
        tick_number: int,
        segments: Tuple[GridPosition, ...],
        heading: Direction,
        food: Optional[GridPosition],
        bounds: Bounds,
        game_over: bool = False,
    ):
        self.tick_number = tick_number
        self.segments = tuple(segments)
        self.heading = heading
        self.food = food
        self.bounds = bounds
        self.game_over = game_over

    @property
    def head(self) -> GridPosition:
        return self.segments[0]

    def entities(self) -> List[Tuple[str, GridPosition]]:
        """
        (entity id, position) pairs for everything the renderer draws.

        The head is "head", body segments are "segment-1".."segment-N" in
        head-to-tail order, and the food is "food" when present.
        """
        pairs = [("head", self.head)]
        pairs.extend((f"segment-{i}", pos) for i, pos in enumerate(self.segments[1:], start=1))
        if self.food is not None:
            pairs.append(("food", self.food))
        return pairs

    def print_board(self) -> str:
        """
        Returns a string representation of the XY plane with:
        . = empty space
        A = food
        T = snake body
        H = snake head
        Cells along z are projected onto the plane. Rows run from the
        highest y at the top to the lowest at the bottom, with x-axis
        labels at the bottom.
        """
        points = list(self.segments)
        if self.food is not None:
            points.append(self.food)
        min_x = min([self.bounds.x[0]] + [p.x for p in points])
        max_x = max([self.bounds.x[1]] + [p.x for p in points])
        min_y = min([self.bounds.y[0]] + [p.y for p in points])
        max_y = max([self.bounds.y[1]] + [p.y for p in points])

        width = max_x - min_x + 1
        board = {y: ['.'] * width for y in range(min_y, max_y + 1)}

        if self.food is not None:
            board[self.food.y][self.food.x - min_x] = 'A'
        # Body first so the head wins when segments overlap in projection
        for pos in reversed(self.segments[1:]):
            board[pos.y][pos.x - min_x] = 'T'
        board[self.head.y][self.head.x - min_x] = 'H'

        label_width = max(len(str(min_y)), len(str(max_y)))
        result = [f"{y:>{label_width}} {' '.join(board[y])}" for y in range(max_y, min_y - 1, -1)]
        result.append(" " * (label_width + 1) + " ".join(str(x)[-1] for x in range(min_x, max_x + 1)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, heading={self.heading.value}, "
            f"length={len(self.segments)}, food={self.food}, game_over={self.game_over}>"
        )
