"""
Tests for main.py - the command line runner.
"""

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Bounds, RIGHT
from main import build_parser, config_from_args, main, run


class TestArguments:
    """Tests for argument parsing and config layering."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.ticks == 10
        assert args.realtime is False
        assert args.quiet is False

    def test_overrides_layer_on_env_config(self, clean_env):
        clean_env.setenv("SNAKE_TICK_MS", "700")
        args = build_parser().parse_args(
            ["--heading", "right", "--bounds=-2:2,-2:2,0:0", "--seed", "5"]
        )

        config = config_from_args(args)

        assert config.tick_ms == 700
        assert config.heading is RIGHT
        assert config.bounds == Bounds(x=(-2, 2), y=(-2, 2), z=(0, 0))
        assert config.seed == 5

    def test_bad_heading_exits(self, clean_env):
        args = build_parser().parse_args(["--heading", "sideways"])
        with pytest.raises(SystemExit):
            config_from_args(args)

    def test_reversed_heading_exits(self, clean_env):
        args = build_parser().parse_args(["--heading", "down"])
        with pytest.raises(SystemExit):
            config_from_args(args)


class TestRun:
    """Tests for running the simulation from the command line."""

    def test_run_ticks(self, clean_env):
        args = build_parser().parse_args(["--ticks", "4", "--quiet", "--seed", "1"])
        state = run(args)

        assert state.tick_count == 4
        assert len(state.history) == 4
        # The default food sits right in front of the head
        assert len(state.chain) >= 3

    def test_run_stops_on_game_over(self, clean_env):
        args = build_parser().parse_args(["--ticks", "10", "--quiet", "--bounds", "0,-1:1,0"])
        state = run(args)

        assert state.game_over is True
        assert state.end_reason == "board_full"
        assert state.tick_count == 1

    def test_main_prints_board_and_summary(self, clean_env, capsys):
        assert main(["--ticks", "2", "--seed", "3"]) == 0

        out = capsys.readouterr().out
        assert "H" in out
        assert "Simulation Result Summary:" in out
        assert "Ticks run:    2" in out
