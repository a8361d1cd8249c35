"""
Error kinds raised by the simulation core.
"""


class SimulationError(Exception):
    """Base class for all simulation errors."""


class InvalidDirection(SimulationError, ValueError):
    """A vector or name that does not map to one of the six unit directions."""


class InvalidHeading(SimulationError, ValueError):
    """A heading change that would turn the head back into its own neck."""


class GrowthWithoutPendingPosition(SimulationError, RuntimeError):
    """grow() was called without a tail position captured by advance()."""


class BoardFull(SimulationError):
    """No free cell is left inside the bounds to place food on."""

    def __init__(self, cells: int, occupied: int):
        super().__init__(
            f"No free cell for food: {cells} cells in bounds, {occupied} occupied"
        )
        self.cells = cells
        self.occupied = occupied
