#!/usr/bin/env python3
"""
Run the grid snake simulation headless from the command line.

Usage:
    python main.py --ticks 10
    python main.py --ticks 20 --heading right --bounds=-5:5,-5:5,0:0 --seed 7
    python main.py --realtime --tick-ms 500

Settings not given on the command line come from SNAKE_* environment
variables (see config.py), which may live in a .env file.
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from clock import SimulationClock
from config import SimulationConfig
from domain.constants import Direction
from domain.food import Bounds
from events import BoardFilled, FoodEaten
from simulation import SimulationState

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the grid snake simulation.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--ticks", type=int, default=10,
                        help="Number of ticks to run (default: 10)")
    parser.add_argument("--tick-ms", type=int, default=None,
                        help="Tick period in milliseconds (default: SNAKE_TICK_MS or 1300)")
    parser.add_argument("--heading", type=str, default=None,
                        help="Initial heading: up, down, left, right, forward or backward")
    parser.add_argument("--bounds", type=str, default=None,
                        help="Food bounds as 'x0:x1,y0:y1,z0:z1'")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement")
    parser.add_argument("--realtime", action="store_true",
                        help="Tick on a wall-clock timer instead of as fast as possible")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the board after every tick")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Environment config with command line values layered on top."""
    try:
        heading = Direction.parse(args.heading) if args.heading else None
        bounds = Bounds.parse(args.bounds) if args.bounds else None
        return SimulationConfig.from_env().with_overrides(
            tick_ms=args.tick_ms,
            heading=heading,
            bounds=bounds,
            seed=args.seed,
        )
    except ValueError as e:
        raise SystemExit(f"error: {e}")


def run(args: argparse.Namespace) -> SimulationState:
    config = config_from_args(args)
    state = SimulationState(config)

    state.bus.subscribe(FoodEaten, lambda e: logger.info(f"Food eaten at {e.position} on tick {e.tick}"))
    state.bus.subscribe(BoardFilled, lambda e: logger.info(f"Board filled with a snake of length {e.length}"))

    if not args.quiet:
        state.print_board()

    def on_tick():
        state.tick()
        state.record_history()
        if not args.quiet:
            state.print_board()

    if args.realtime:
        clock = SimulationClock(config.tick_ms, on_tick=on_tick)
        clock.run(max_ticks=args.ticks, stop_when=lambda: state.game_over)
    else:
        for _ in range(args.ticks):
            if state.game_over:
                break
            on_tick()

    return state


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    state = run(args)

    snapshot = state.snapshot()
    print("\nSimulation Result Summary:")
    print(f"  Ticks run:    {snapshot.tick_number}")
    print(f"  Snake length: {len(snapshot.segments)}")
    print(f"  Head:         {snapshot.head}")
    print(f"  Food:         {snapshot.food}")
    if state.game_over:
        print(f"  Game over:    {state.end_reason}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
