"""
Domain entities for the grid snake simulation.

This module contains the core simulation entities that are independent of
scheduling and rendering concerns.
"""

from .constants import (
    Direction, UP, DOWN, LEFT, RIGHT, FORWARD, BACKWARD, VALID_MOVES,
    DEFAULT_TICK_MS, DEFAULT_HEADING, DEFAULT_CHAIN, DEFAULT_FOOD,
    DEFAULT_MAX_SPAWN_ATTEMPTS,
)
from .exceptions import (
    SimulationError,
    InvalidDirection,
    InvalidHeading,
    GrowthWithoutPendingPosition,
    BoardFull,
)
from .position import GridPosition, ORIGIN
from .snake import SnakeChain
from .food import Bounds, FoodSpawner, check_food_eaten
from .game_state import GameState, to_translation

__all__ = [
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'FORWARD', 'BACKWARD', 'VALID_MOVES',
    'DEFAULT_TICK_MS', 'DEFAULT_HEADING', 'DEFAULT_CHAIN', 'DEFAULT_FOOD',
    'DEFAULT_MAX_SPAWN_ATTEMPTS',
    'SimulationError', 'InvalidDirection', 'InvalidHeading',
    'GrowthWithoutPendingPosition', 'BoardFull',
    'GridPosition', 'ORIGIN',
    'SnakeChain',
    'Bounds', 'FoodSpawner', 'check_food_eaten',
    'GameState', 'to_translation',
]
