"""
Simulation configuration loaded from the environment.

Values come from process environment variables, with a local .env file
loaded first via python-dotenv:

    SNAKE_TICK_MS              tick period in milliseconds (default 1300)
    SNAKE_BOUNDS               food bounds "x0:x1,y0:y1,z0:z1" (default "0:0,-5:5,0:0")
    SNAKE_HEADING              initial heading name (default UP)
    SNAKE_INITIAL_FOOD         initial food cell "x,y,z" (default "0,1,0")
    SNAKE_SEED                 RNG seed for food placement (default: unseeded)
    SNAKE_MAX_SPAWN_ATTEMPTS   rejection sampling cap before enumerating free cells
"""

import os
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from dotenv import load_dotenv

from domain.constants import (
    DEFAULT_CHAIN,
    DEFAULT_FOOD,
    DEFAULT_HEADING,
    DEFAULT_MAX_SPAWN_ATTEMPTS,
    DEFAULT_TICK_MS,
    Direction,
)
from domain.food import Bounds
from domain.position import GridPosition


@dataclass(frozen=True)
class SimulationConfig:
    tick_ms: int = DEFAULT_TICK_MS
    bounds: Bounds = field(default_factory=Bounds)
    initial_chain: Tuple[GridPosition, ...] = DEFAULT_CHAIN
    heading: Direction = DEFAULT_HEADING
    initial_food: Optional[GridPosition] = DEFAULT_FOOD
    seed: Optional[int] = None
    max_spawn_attempts: int = DEFAULT_MAX_SPAWN_ATTEMPTS

    def __post_init__(self):
        object.__setattr__(self, "initial_chain", tuple(GridPosition(*p) for p in self.initial_chain))
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if len(self.initial_chain) < 2:
            raise ValueError("initial_chain needs a head and at least one tail segment")
        if self.initial_chain[0] + self.heading.delta == self.initial_chain[1]:
            raise ValueError(f"Heading {self.heading.value} points the head back into the snake")
        if self.initial_food is not None and self.initial_food in self.initial_chain:
            raise ValueError(f"Initial food {self.initial_food} sits on the snake")

    def with_overrides(self, **overrides) -> "SimulationConfig":
        """Copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "SimulationConfig":
        """
        Build a config from SNAKE_* environment variables.

        Raises:
            ValueError: naming the variable whose value could not be parsed
        """
        load_dotenv(dotenv_path)

        kwargs = {}
        parsers = {
            "tick_ms": ("SNAKE_TICK_MS", int),
            "bounds": ("SNAKE_BOUNDS", Bounds.parse),
            "heading": ("SNAKE_HEADING", Direction.parse),
            "initial_food": ("SNAKE_INITIAL_FOOD", GridPosition.parse),
            "seed": ("SNAKE_SEED", int),
            "max_spawn_attempts": ("SNAKE_MAX_SPAWN_ATTEMPTS", int),
        }
        for name, (var, parse) in parsers.items():
            raw = os.getenv(var)
            if raw is None or raw.strip() == "":
                continue
            try:
                kwargs[name] = parse(raw)
            except ValueError as e:
                raise ValueError(f"Invalid {var}={raw!r}: {e}") from e

        return cls(**kwargs)
