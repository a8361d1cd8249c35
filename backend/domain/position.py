"""
GridPosition value type for the simulation grid.
"""

from typing import NamedTuple


class GridPosition(NamedTuple):
    """
    An integer lattice point (x, y, z).

    Positions are immutable and hashable so they can be stored in the
    chain deque and compared against occupancy sets directly.
    """

    x: int
    y: int
    z: int

    def __add__(self, other: "GridPosition") -> "GridPosition":
        return GridPosition(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "GridPosition") -> "GridPosition":
        return GridPosition(self.x - other.x, self.y - other.y, self.z - other.z)

    @classmethod
    def parse(cls, text: str) -> "GridPosition":
        """
        Parse "x,y,z" (whitespace allowed) into a GridPosition.

        Raises:
            ValueError: if the text does not hold exactly three integers
        """
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 3:
            raise ValueError(f"Expected 'x,y,z', got {text!r}")
        x, y, z = (int(p) for p in parts)
        return cls(x, y, z)

    def __repr__(self):
        return f"({self.x}, {self.y}, {self.z})"


ORIGIN = GridPosition(0, 0, 0)
