"""
SimulationState - owns the snake and the food and runs one tick at a time.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from config import SimulationConfig
from domain.constants import Direction
from domain.exceptions import BoardFull
from domain.food import FoodSpawner, check_food_eaten
from domain.game_state import GameState
from domain.position import GridPosition
from domain.snake import SnakeChain
from events import BoardFilled, EventBus, FoodEaten, FoodSpawned

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    MOVING = "moving"
    COLLISION_CHECK = "collision_check"
    GROWING = "growing"
    RESPAWNING = "respawning"


@dataclass(frozen=True)
class TickResult:
    tick: int
    ate: bool
    food: Optional[GridPosition]
    game_over: bool = False


class SimulationState:
    """
    Manages:
      - The snake chain and its heading
      - The single food cell
      - The tick state machine (move -> collision check -> grow -> respawn)
      - Snapshots for readers and an in-memory history
    """

    def __init__(self, config: Optional[SimulationConfig] = None, bus: Optional[EventBus] = None):
        self.config = config or SimulationConfig()
        self.bus = bus or EventBus()
        # Registered first so growth and respawn run before any observer
        self.bus.subscribe(FoodEaten, self._on_food_eaten)
        self.history: List[GameState] = []
        self.reset()

    def reset(self) -> None:
        """Reinitialize the board from config."""
        self.rng = random.Random(self.config.seed)
        self.spawner = FoodSpawner(
            bounds=self.config.bounds,
            rng=self.rng,
            max_attempts=self.config.max_spawn_attempts,
        )
        self.chain = SnakeChain(self.config.initial_chain, heading=self.config.heading)
        self.food: Optional[GridPosition] = self.config.initial_food
        if self.food is None:
            self.food = self.spawner.spawn(self.chain.occupied())

        self.tick_count = 0
        self.phase = Phase.IDLE
        self.game_over = False
        self.end_reason: Optional[str] = None
        self.history = []
        self.bus.clear()
        logger.debug("Reset board: chain=%s food=%s", self.chain.segments(), self.food)

    def set_heading(self, direction: Direction) -> None:
        """Queue a heading change for the next tick. Rejects straight reversals."""
        self.chain.queue_heading(direction)

    def tick(self) -> TickResult:
        """
        Run one full tick:
          1) Advance the chain
          2) Check whether the head landed on the food
          3) On a hit, clear the food and deliver one FoodEaten event,
             which grows the chain and respawns the food
        """
        if self.game_over:
            logger.info("Simulation is already over (%s). Ignoring tick.", self.end_reason)
            return TickResult(tick=self.tick_count, ate=False, food=self.food, game_over=True)

        self.tick_count += 1

        self.phase = Phase.MOVING
        head = self.chain.advance()

        self.phase = Phase.COLLISION_CHECK
        ate = check_food_eaten(head, self.food)
        if ate:
            logger.debug("Head %s reached food %s", head, self.food)
            eaten_at = self.food
            self.food = None
            self.bus.publish(FoodEaten(tick=self.tick_count, position=eaten_at))

        try:
            self.bus.flush()
        finally:
            self.phase = Phase.IDLE

        return TickResult(tick=self.tick_count, ate=ate, food=self.food, game_over=self.game_over)

    def _on_food_eaten(self, event: FoodEaten) -> None:
        self.phase = Phase.GROWING
        self.chain.grow()

        self.phase = Phase.RESPAWNING
        try:
            self.food = self.spawner.spawn(self.chain.occupied())
        except BoardFull as e:
            self.end_game("board_full")
            logger.warning("Board full after tick %d: %s", event.tick, e)
            self.bus.publish(BoardFilled(tick=event.tick, length=len(self.chain)))
            return

        self.bus.publish(FoodSpawned(tick=event.tick, position=self.food))

    def end_game(self, reason: str) -> None:
        self.game_over = True
        self.end_reason = reason
        logger.info("Simulation over: %s", reason)

    def snapshot(self) -> GameState:
        """Return a read-only snapshot of the current board."""
        return GameState(
            tick_number=self.tick_count,
            segments=tuple(self.chain.positions),
            heading=self.chain.heading,
            food=self.food,
            bounds=self.config.bounds,
            game_over=self.game_over,
        )

    def record_history(self) -> None:
        self.history.append(self.snapshot())

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.snapshot().print_board() + "\n")

    def __repr__(self):
        return f"<SimulationState tick={self.tick_count}, phase={self.phase.value}, chain={self.chain!r}>"
